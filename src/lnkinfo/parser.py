"""Parse Windows .lnk files (Shell Link) into an immutable record."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ._constants import (
    HAS_ARGUMENTS,
    HAS_CUSTOM_ICON,
    HAS_DESCRIPTION,
    HAS_RELATIVE_PATH,
    HAS_WORKING_DIRECTORY,
    LI_FLAG_NETWORK,
    LI_FLAGS,
    LI_HEADER_EXTENDED,
    LI_HEADER_SIZE,
    LI_HEADER_SIZES,
    LI_LOCAL_PATH_OFFSET,
    LI_LOCAL_PATH_UNICODE_OFFSET,
    LI_NETWORK_OFFSET,
    LI_SIZE,
    LI_VOLUME_OFFSET,
    LINK_INFO_BASE,
    MAGIC,
    NET_SHARE_NAME,
    OFF_ATTRIBUTES,
    OFF_FLAGS,
    OFF_ICON_INDEX,
    OFF_IDLIST_SIZE,
    OFF_TARGET_SIZE,
    VOL_DRIVE_TYPE,
    VOL_LABEL,
    VOL_SERIAL,
)
from ._errors import FormatError, ReadError
from ._types import Attribute, VolumeType
from ._util import read_counted_utf16, read_integer, read_latin1_z, read_utf16_bytes

log = logging.getLogger(__name__)

# StringData entries, in the order they are stored.  Each entry starts where
# the previous present one ended, so this order must not change.
_STRING_FIELDS = (
    (HAS_DESCRIPTION, "description"),
    (HAS_RELATIVE_PATH, "relative_path"),
    (HAS_WORKING_DIRECTORY, "working_directory"),
    (HAS_ARGUMENTS, "arguments"),
)


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class VolumeInfo:
    """The local drive or network share the target resides on."""

    type: VolumeType = VolumeType.UNKNOWN
    serial: int = 0
    name: str = ""


@dataclass(frozen=True, slots=True)
class ParsedLink:
    """Structured, read-only representation of a decoded .lnk file."""

    # LinkInfo
    target_path: str = ""
    target_size: int = 0
    target_attributes: Attribute = Attribute(0)
    target_is_on_network: bool = False
    volume: VolumeInfo = field(default_factory=VolumeInfo)

    # StringData
    description: str = ""
    relative_path: str = ""
    working_directory: str = ""
    arguments: str = ""
    icon_path: str = ""
    icon_index: int = 0

    @property
    def has_custom_icon(self) -> bool:
        return bool(self.icon_path)

    @property
    def volume_type(self) -> VolumeType:
        return self.volume.type

    @property
    def volume_serial(self) -> int:
        return self.volume.serial

    @property
    def volume_name(self) -> str:
        return self.volume.name

    def target_has_attribute(self, attribute: Attribute) -> bool:
        """Return True if any bit of *attribute* is set on the target."""
        return bool(self.target_attributes & attribute)


# ---------------------------------------------------------------------------
# LinkInfo
# ---------------------------------------------------------------------------
def _volume_type(raw: int) -> VolumeType:
    try:
        return VolumeType(raw)
    except ValueError:
        log.debug("Unknown VolumeID DriveType %d, reporting UNKNOWN", raw)
        return VolumeType.UNKNOWN


def _parse_local(data, start, header_size):
    """Parse the VolumeID and LocalBasePath of a local target."""
    vol_pos = start + read_integer(data, start + LI_VOLUME_OFFSET, 4)
    volume = VolumeInfo(
        type=_volume_type(read_integer(data, vol_pos + VOL_DRIVE_TYPE, 4)),
        serial=read_integer(data, vol_pos + VOL_SERIAL, 4),
        name=read_latin1_z(data, vol_pos + VOL_LABEL)[0],
    )

    path_pos = start + read_integer(data, start + LI_LOCAL_PATH_OFFSET, 4)
    path, path_end = read_latin1_z(data, path_pos)

    # The extended header also carries the path in UTF-16, which is
    # authoritative over the ANSI copy.
    if header_size == LI_HEADER_EXTENDED:
        uni_off = read_integer(data, start + LI_LOCAL_PATH_UNICODE_OFFSET, 4)
        uni_pos = start + uni_off if uni_off else path_end
        path = read_utf16_bytes(data, uni_pos, 2 * len(path)).rstrip("\x00")

    return path, volume


def _parse_network(data, start):
    """Parse the CommonNetworkRelativeLink of a network target."""
    net_pos = start + read_integer(data, start + LI_NETWORK_OFFSET, 4)
    share_name, pos = read_latin1_z(data, net_pos + NET_SHARE_NAME)
    drive, pos = read_latin1_z(data, pos)
    remainder, _ = read_latin1_z(data, pos)
    volume = VolumeInfo(type=VolumeType.NETWORK_DRIVE, serial=0, name=share_name)
    return drive + "\\" + remainder, volume


def _parse_link_info(data: bytes) -> tuple[dict, int]:
    """Validate the header and decode LinkInfo.

    Returns ``(fields, link_info_start)``; *fields* holds the
    :class:`ParsedLink` keyword arguments read so far.
    """
    magic = read_integer(data, 0, 1)
    if magic != MAGIC:
        raise FormatError(f"Invalid header magic 0x{magic:02X} (expected 0x4C)")

    start = LINK_INFO_BASE + read_integer(data, OFF_IDLIST_SIZE, 2)
    header_size = read_integer(data, start + LI_HEADER_SIZE, 1)
    if header_size not in LI_HEADER_SIZES:
        raise FormatError(
            f"Invalid LinkInfo header size 0x{header_size:02X} at offset "
            f"0x{start + LI_HEADER_SIZE:X} (expected 0x1C or 0x24)"
        )

    on_network = bool(read_integer(data, start + LI_FLAGS, 1) & LI_FLAG_NETWORK)
    log.debug(
        "LinkInfo at 0x%X: %s header, %s target",
        start,
        LI_HEADER_SIZES[header_size],
        "network" if on_network else "local",
    )

    if on_network:
        target_path, volume = _parse_network(data, start)
    else:
        target_path, volume = _parse_local(data, start, header_size)

    fields = {
        "target_path": target_path,
        "target_size": read_integer(data, OFF_TARGET_SIZE, 4),
        "target_attributes": Attribute(read_integer(data, OFF_ATTRIBUTES, 2)),
        "target_is_on_network": on_network,
        "volume": volume,
    }
    return fields, start


# ---------------------------------------------------------------------------
# StringData
# ---------------------------------------------------------------------------
def _parse_string_data(data: bytes, start: int) -> dict:
    """Decode the optional string section that follows LinkInfo."""
    flags = read_integer(data, OFF_FLAGS, 1)
    pos = start + read_integer(data, start + LI_SIZE, 4)
    log.debug("StringData at 0x%X, flags 0x%02X", pos, flags)

    fields = {}
    for bit, name in _STRING_FIELDS:
        if flags & bit:
            fields[name], pos = read_counted_utf16(data, pos)

    if flags & HAS_CUSTOM_ICON:
        fields["icon_path"] = read_counted_utf16(data, pos)[0]
        # IconIndex lives in the fixed header, not in StringData
        fields["icon_index"] = read_integer(data, OFF_ICON_INDEX, 4)

    return fields


# ---------------------------------------------------------------------------
# Main parser
# ---------------------------------------------------------------------------
def decode_lnk(data: bytes | bytearray | memoryview) -> ParsedLink:
    """Decode the raw bytes of a .lnk file into a :class:`ParsedLink`.

    Raises:
        FormatError: On a bad magic byte, an unrecognised LinkInfo header
            size, or any field lying outside *data*
            (:class:`OutOfRangeError`).
    """
    data = bytes(data)
    link_fields, start = _parse_link_info(data)
    string_fields = _parse_string_data(data, start)
    return ParsedLink(**link_fields, **string_fields)


def parse_lnk(source: str | Path | bytes | bytearray | memoryview) -> ParsedLink:
    """Parse a .lnk file and return a :class:`ParsedLink`.

    Args:
        source: A file path (str or Path) or raw bytes of a .lnk file.

    Raises:
        ReadError: If *source* is a path that cannot be read.
        FormatError: If the data is not a valid .lnk file.
    """
    if isinstance(source, (str, Path)):
        try:
            data = Path(source).read_bytes()
        except OSError as exc:
            raise ReadError(f"Cannot read {source}: {exc.strerror or exc}") from exc
    else:
        data = source
    return decode_lnk(data)


# ---------------------------------------------------------------------------
# Human-readable formatter
# ---------------------------------------------------------------------------
def _attribute_names(attrs: Attribute) -> str:
    names = [a.name for a in Attribute if attrs & a]
    return "|".join(names) if names else "none"


def format_lnk(info: ParsedLink) -> str:
    """Return a human-readable string representation of *info*."""
    lines: list[str] = []

    lines.append("--- LINK INFO ---")
    lines.append(f"  OnNetwork:       {'yes' if info.target_is_on_network else 'no'}")
    lines.append(
        f"  VolumeType:      {info.volume_type.value} ({info.volume_type.name})"
    )
    lines.append(f"  VolumeSerial:    0x{info.volume_serial:08X}")
    if info.volume_name:
        lines.append(f'  VolumeName:      "{info.volume_name}"')
    lines.append(
        f"  Attributes:      0x{int(info.target_attributes):04X} "
        f"({_attribute_names(info.target_attributes)})"
    )
    lines.append(f"  TargetSize:      {info.target_size}")

    has_strings = any(
        [
            info.description,
            info.relative_path,
            info.working_directory,
            info.arguments,
            info.icon_path,
        ]
    )
    if has_strings:
        lines.append("")
        lines.append("--- STRING DATA ---")
        if info.description:
            lines.append(f'  Description:       "{info.description}"')
        if info.relative_path:
            lines.append(f'  RelativePath:      "{info.relative_path}"')
        if info.working_directory:
            lines.append(f'  WorkingDirectory:  "{info.working_directory}"')
        if info.arguments:
            lines.append(f'  Arguments:         "{info.arguments}"')
        if info.icon_path:
            lines.append(f'  IconLocation:      "{info.icon_path}"')

    lines.append("")
    lines.append("--- RESOLVED ---")
    lines.append(f"  TargetPath:      {info.target_path or '(empty)'}")
    lines.append(f"  Arguments:       {info.arguments or '(empty)'}")
    lines.append(f"  WorkingDirectory: {info.working_directory or '(empty)'}")
    lines.append(f"  Description:     {info.description or '(empty)'}")
    icon_display = info.icon_path
    if icon_display:
        icon_display = f"{icon_display},{info.icon_index}"
    lines.append(f"  IconLocation:    {icon_display or '(empty)'}")

    return "\n".join(lines)

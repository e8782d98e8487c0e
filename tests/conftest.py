"""Shared fixtures for lnkinfo tests.

The library only reads .lnk files, so test inputs are packed here by hand,
laid out the way Windows writes them: 76-byte header, IDList, LinkInfo,
StringData and the terminal block.
"""

import struct

import pytest

LINK_CLSID = b"\x01\x14\x02\x00\x00\x00\x00\x00\xc0\x00\x00\x00\x00\x00\x00\x46"

# Empty IDList: just the 2-byte terminator, so LinkInfo starts at 80
EMPTY_IDLIST = b"\x00\x00"
LINK_INFO_START = 78 + len(EMPTY_IDLIST)


def _ansi(s: str) -> bytes:
    """Latin-1 copy of *s* with one '?' per UTF-16 code unit it cannot hold."""
    out = []
    for ch in s:
        if ord(ch) < 0x100:
            out.append(ch)
        else:
            out.append("??" if ord(ch) > 0xFFFF else "?")
    return "".join(out).encode("latin-1")


def _counted_utf16(s: str) -> bytes:
    """StringData entry: uint16 code-unit count followed by UTF-16LE units."""
    raw = s.encode("utf-16-le", "surrogatepass")
    return struct.pack("<H", len(raw) // 2) + raw


def _local_link_info(
    target, drive_type, serial, volume_label, extended, unicode_offset
):
    header_size = 0x24 if extended else 0x1C
    label = volume_label.encode("latin-1") + b"\x00"
    volume = struct.pack("<IIII", 16 + len(label), drive_type, serial, 0x10) + label
    ansi = _ansi(target) + b"\x00"
    uni = target.encode("utf-16-le") + b"\x00\x00"

    vol_off = header_size
    base_off = vol_off + len(volume)
    if extended and not unicode_offset:
        # Unicode path placed directly after the ANSI one, no offset recorded
        uni_base_off = 0
        body = volume + ansi + uni
        suffix_off = base_off + len(ansi) + len(uni)
        body += b"\x00"
        uni_suffix_off = suffix_off + 1
        body += b"\x00\x00"
    else:
        suffix_off = base_off + len(ansi)
        body = volume + ansi + b"\x00"
        uni_base_off = suffix_off + 1
        uni_suffix_off = uni_base_off + len(uni)
        if extended:
            body += uni + b"\x00\x00"

    fields = [0x01, vol_off, base_off, 0, suffix_off]
    if extended:
        fields += [uni_base_off, uni_suffix_off]
    header = struct.pack("<I", header_size) + struct.pack(f"<{len(fields)}I", *fields)
    total = 4 + len(header) + len(body)
    return struct.pack("<I", total) + header + body


def _network_link_info(remainder, share_name, device, extended):
    share = share_name.encode("latin-1") + b"\x00"
    dev = device.encode("latin-1") + b"\x00"
    cnr = (
        struct.pack(
            "<IIIII",
            20 + len(share) + len(dev),
            0x03,  # ValidDevice | ValidNetType
            0x14,
            0x14 + len(share),
            0x00020000,  # WNNC_NET_LANMAN
        )
        + share
        + dev
    )
    suffix = remainder.encode("latin-1") + b"\x00"
    header_size = 0x24 if extended else 0x1C
    cnr_off = header_size
    suffix_off = cnr_off + len(cnr)
    fields = [header_size, 0x02, 0, 0, cnr_off, suffix_off]
    if extended:
        # No local path, so both Unicode offsets are zero
        fields += [0, 0]
    header = struct.pack(f"<{len(fields)}I", *fields)
    body = cnr + suffix
    total = 4 + len(header) + len(body)
    return struct.pack("<I", total) + header + body


def build_lnk_bytes(
    target: str = r"C:\Users\glind\Target.txt",
    *,
    attributes: int = 0x20,
    target_size: int = 12,
    icon_index: int = 0,
    drive_type: int = 3,
    serial: int = 1852545763,
    volume_label: str = "Windows-SSD",
    extended: bool = False,
    unicode_offset: bool = True,
    network: bool = False,
    share_name: str = r"\\SERVER\SHARE",
    device: str = "D:",
    description: str | None = None,
    relative_path: str | None = None,
    working_dir: str | None = None,
    arguments: str | None = None,
    icon_location: str | None = None,
) -> bytes:
    """Pack a .lnk file.

    For network links *target* is the path below the share (e.g.
    ``Target.txt``) and *device* the mapped drive letter.
    """
    flags = 0x01 | 0x02 | 0x80
    strings = b""
    for bit, value in (
        (0x04, description),
        (0x08, relative_path),
        (0x10, working_dir),
        (0x20, arguments),
        (0x40, icon_location),
    ):
        if value is not None:
            flags |= bit
            strings += _counted_utf16(value)

    header = (
        struct.pack("<I", 0x4C)
        + LINK_CLSID
        + struct.pack("<II", flags, attributes)
        + b"\x00" * 24  # creation / access / write times
        + struct.pack("<III", target_size, icon_index, 1)
        + b"\x00" * 12  # hotkey + reserved
    )
    assert len(header) == 76

    if network:
        link_info = _network_link_info(target, share_name, device, extended)
    else:
        link_info = _local_link_info(
            target, drive_type, serial, volume_label, extended, unicode_offset
        )

    return (
        header
        + struct.pack("<H", len(EMPTY_IDLIST))
        + EMPTY_IDLIST
        + link_info
        + strings
        + b"\x00\x00\x00\x00"  # terminal block
    )


@pytest.fixture
def make_lnk():
    """Factory fixture: ``make_lnk(**kwargs)`` -> .lnk bytes."""
    return build_lnk_bytes


@pytest.fixture
def basic_lnk_bytes():
    """A local file target on a fixed disk."""
    return build_lnk_bytes(
        r"C:\Users\glind\Target.txt",
        relative_path=r".\Target.txt",
        working_dir=r"C:\Users\glind",
    )


@pytest.fixture
def usb_lnk_bytes():
    """A file on a removable drive."""
    return build_lnk_bytes(
        r"D:\Target.txt",
        drive_type=2,
        serial=1157238549,
        volume_label="ASFT GUSTAV",
        relative_path=r".\Target.txt",
        working_dir="D:\\",
    )


@pytest.fixture
def directory_lnk_bytes():
    """A directory target with a description and a custom icon."""
    return build_lnk_bytes(
        r"C:\Users\glind\Target",
        attributes=0x10,
        target_size=0,
        icon_index=8,
        description="A description",
        relative_path=r".\Target",
        icon_location=r"C:\WINDOWS\system32\imageres.dll",
    )


@pytest.fixture
def latin1_lnk_bytes():
    """Non-ASCII Latin-1 characters in the target and the description."""
    return build_lnk_bytes(
        "C:\\Users\\glind\\Det h\u00e4r \u00e4r en fil.txt",
        target_size=6,
        description="Det h\u00e4r \u00e4r en kommentar",
        relative_path=".\\Det h\u00e4r \u00e4r en fil.txt",
        working_dir=r"C:\Users\glind",
    )


@pytest.fixture
def emoji_lnk_bytes():
    """Characters above U+FFFF, using the extended LinkInfo header."""
    return build_lnk_bytes(
        "C:\\Users\\glind\\Target\U0001f60a.txt",
        attributes=0x0823,  # read-only, hidden, archive, compressed
        target_size=16,
        extended=True,
        description="This is a description \U0001f60a.",
        relative_path=".\\Target\U0001f60a.txt",
        working_dir=r"C:\Users\glind",
    )


@pytest.fixture
def network_lnk_bytes():
    """A target on a mapped network share."""
    return build_lnk_bytes(
        "Target.txt",
        network=True,
        device="D:",
        share_name=r"\\SERVER\SHARE",
        relative_path=r".\Target.txt",
    )


@pytest.fixture
def basic_lnk_file(tmp_path, basic_lnk_bytes):
    """*basic_lnk_bytes* written to disk."""
    p = tmp_path / "BasicLnkFile.lnk"
    p.write_bytes(basic_lnk_bytes)
    return p

"""Shell Link layout constants and lookup tables used by the parser."""

# ---------------------------------------------------------------------------
# Header
# ---------------------------------------------------------------------------
MAGIC = 0x4C

OFF_FLAGS = 20  # uint8, string-section flag bits
OFF_ATTRIBUTES = 24  # uint16
OFF_TARGET_SIZE = 52  # uint32
OFF_ICON_INDEX = 56  # uint32
OFF_IDLIST_SIZE = 76  # uint16

# LinkInfo starts right after the IDList size field and the IDList itself
LINK_INFO_BASE = 78

# ---------------------------------------------------------------------------
# LinkInfo (offsets relative to the LinkInfo start)
# ---------------------------------------------------------------------------
LI_SIZE = 0  # uint32, also locates the string section
LI_HEADER_SIZE = 4  # uint8 read
LI_FLAGS = 8  # uint8 read
LI_VOLUME_OFFSET = 12
LI_LOCAL_PATH_OFFSET = 16
LI_NETWORK_OFFSET = 20
LI_LOCAL_PATH_UNICODE_OFFSET = 28  # extended header only

LI_FLAG_NETWORK = 0x02

LI_HEADER_LEGACY = 0x1C
LI_HEADER_EXTENDED = 0x24
LI_HEADER_SIZES = {
    LI_HEADER_LEGACY: "legacy",
    LI_HEADER_EXTENDED: "extended",
}

# VolumeID (relative to the volume start)
VOL_DRIVE_TYPE = 4
VOL_SERIAL = 8
VOL_LABEL = 16

# CommonNetworkRelativeLink (relative to the share-info start)
NET_SHARE_NAME = 20

# ---------------------------------------------------------------------------
# String section flags
# ---------------------------------------------------------------------------
HAS_DESCRIPTION = 0x04
HAS_RELATIVE_PATH = 0x08
HAS_WORKING_DIRECTORY = 0x10
HAS_ARGUMENTS = 0x20
HAS_CUSTOM_ICON = 0x40

# ---------------------------------------------------------------------------
# UTF-16
# ---------------------------------------------------------------------------
GENERIC_SURROGATE_MASK = 0xF800
GENERIC_SURROGATE_VALUE = 0xD800
SURROGATE_MASK = 0xFC00
HIGH_SURROGATE_VALUE = 0xD800
LOW_SURROGATE_VALUE = 0xDC00
SURROGATE_CODEPOINT_MASK = 0x03FF
SURROGATE_CODEPOINT_BITS = 10
SURROGATE_CODEPOINT_OFFSET = 0x10000
REPLACEMENT_CODEPOINT = 0xFFFD

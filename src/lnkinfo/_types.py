"""Enumerations shared by the parser and its callers."""

from enum import IntEnum, IntFlag


class VolumeType(IntEnum):
    """Drive type recorded in the LinkInfo VolumeID."""

    UNKNOWN = 0
    NO_ROOT_DIRECTORY = 1
    REMOVABLE = 2
    HARD_DRIVE = 3
    NETWORK_DRIVE = 4
    CD_ROM = 5
    RAM_DRIVE = 6


class Attribute(IntFlag):
    """FILE_ATTRIBUTE_* bits of the link target."""

    READ_ONLY = 0x0001
    HIDDEN = 0x0002
    SYSTEM = 0x0004
    VOLUME_LABEL = 0x0008
    DIRECTORY = 0x0010
    ARCHIVE = 0x0020
    NTFS_EFS = 0x0040
    NORMAL = 0x0080
    TEMPORARY = 0x0100
    SPARSE = 0x0200
    REPARSE_POINT_DATA = 0x0400
    COMPRESSED = 0x0800
    OFFLINE = 0x1000

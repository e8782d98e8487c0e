"""lnkinfo -- read Windows .lnk shortcut files (Shell Link) without a shell API."""

__version__ = "0.1.0"

from ._errors import FormatError, LnkError, OutOfRangeError, ReadError
from ._types import Attribute, VolumeType
from .parser import ParsedLink, VolumeInfo, decode_lnk, format_lnk, parse_lnk
from .shortcut import Shortcut

__all__ = [
    "parse_lnk",
    "decode_lnk",
    "format_lnk",
    "ParsedLink",
    "VolumeInfo",
    "VolumeType",
    "Attribute",
    "Shortcut",
    "LnkError",
    "ReadError",
    "FormatError",
    "OutOfRangeError",
    "__version__",
]

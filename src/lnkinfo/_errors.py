"""Exception hierarchy for lnkinfo."""


class LnkError(Exception):
    """Base class for every error raised by lnkinfo."""


class ReadError(LnkError):
    """Raised when the .lnk byte source cannot be opened or read."""


class FormatError(LnkError):
    """Raised when data does not conform to the Shell Link format."""


class OutOfRangeError(FormatError):
    """Raised when a field offset or length runs past the end of the data."""

"""A .lnk file on disk paired with its most recently decoded contents."""

from pathlib import Path

from .parser import ParsedLink, parse_lnk


class Shortcut:
    """Handle on a .lnk file that can be re-read with :meth:`refresh`.

    The file is parsed on construction.  Each successful :meth:`refresh`
    swaps in a brand-new :class:`ParsedLink`; a failed one raises and keeps
    the previous record.
    """

    __slots__ = ("_path", "_info")

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._info = parse_lnk(self._path)

    def __repr__(self) -> str:
        return f"Shortcut({str(self._path)!r})"

    @property
    def file_path(self) -> Path:
        return self._path

    @property
    def info(self) -> ParsedLink:
        return self._info

    def refresh(self) -> ParsedLink:
        """Re-read the file from disk and return the new record."""
        info = parse_lnk(self._path)
        self._info = info
        return info

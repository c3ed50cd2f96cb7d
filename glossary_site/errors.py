"""Exceptions raised while reading a glossary or writing its pages."""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class GlossaryError(Exception):
    """Base class for glossary failures. ``path`` names the file or folder involved."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class InputNotFoundError(GlossaryError):
    """The glossary source file does not exist."""


class InputUnreadableError(GlossaryError):
    """The glossary source exists but could not be opened, read or decoded."""


class OutputDirectoryError(GlossaryError):
    """The output folder is missing or is not a directory."""


class PageWriteError(GlossaryError):
    """A single HTML page could not be created or written."""

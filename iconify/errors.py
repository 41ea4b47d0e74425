"""Errors raised by iconify. Every one of them ends the run with exit code -1."""


class IconifyError(Exception):
    """Base class for errors reported to the user as a one-line message."""


class UsageError(IconifyError):
    """No arguments, or no default image / output path could be determined."""


class ArgumentError(IconifyError, ValueError):
    """A size override or option was given twice or is not supported."""


class MissingFileError(IconifyError, FileNotFoundError):
    """An input image path does not exist."""


class UnsupportedFormatError(IconifyError):
    """The decoder could not identify the image format."""


class CorruptImageError(IconifyError):
    """The image format was recognised but its content could not be decoded."""

class RC4KitError(Exception):
    """Generic failure reported to the command-line user."""


class KeyFileError(RC4KitError):
    """The key file is missing, unreadable or empty."""


class InputFileError(RC4KitError):
    """The input file cannot be opened for reading."""


class OutputFileError(RC4KitError):
    """The output file cannot be created, including when it already exists."""


class StreamIOError(RC4KitError):
    """Reading or writing failed while data was being streamed."""

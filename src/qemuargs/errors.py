"""Error kinds raised while building command-line strings."""

from enum import Enum


class ErrorKind(Enum):
    """Why a value tree could not be converted."""

    UNSUPPORTED_NESTING = "unsupported-nesting"  # array inside array
    UNSUPPORTED_TYPE = "unsupported-type"        # object or null value


class CommandLineError(Exception):
    """
    Raised when a value tree cannot be expressed on the command line.

    The `.kind` attribute is what callers and tests compare against.
    """

    def __init__(self, kind: ErrorKind, msg: str = "") -> None:
        super().__init__(msg or kind.value)
        self.kind = kind

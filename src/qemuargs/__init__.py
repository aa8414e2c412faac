"""
QEMU Command-Line Argument Builder

Turns JSON-like configuration value trees into the comma-separated
key=value syntax accepted by QEMU options such as -object.

ARCHITECTURAL GUARANTEE:
------------------------
The value tree (qemuargs.values) knows nothing about QEMU.
All text generation lives in qemuargs.backends.

The encoding is one-way: command-line strings are never parsed back.
"""

from .errors import CommandLineError, ErrorKind
from .model import EncryptionInfo
from .backends import (
    build_commandline_json,
    build_luks_opts,
    build_object_arg,
    escape_comma,
    luks_opts,
)

__version__ = "0.1.0"

__all__ = [
    "CommandLineError",
    "ErrorKind",
    "EncryptionInfo",
    "build_commandline_json",
    "build_luks_opts",
    "build_object_arg",
    "escape_comma",
    "luks_opts",
]

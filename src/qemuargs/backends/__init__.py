"""Backends for QEMU command-line output (object properties, LUKS options)."""

from .commandline import (
    buffer_escape_comma,
    build_commandline_json,
    build_object_arg,
    encode_value,
    escape_comma,
)
from .luks import build_luks_opts, luks_opts

__all__ = [
    "buffer_escape_comma",
    "build_commandline_json",
    "build_object_arg",
    "encode_value",
    "escape_comma",
    "build_luks_opts",
    "luks_opts",
]

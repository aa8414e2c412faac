"""
Loading helpers for value trees and encryption records.

Builds qemuargs value trees from native Python data, JSON text or YAML
text, and EncryptionInfo records from plain dicts.

JSON numbers keep their source token ("1.50" stays "1.50"). YAML and
native Python numbers are formatted with str()/repr().
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from qemuargs.model import EncryptionInfo
from qemuargs.values import (
    Array,
    Boolean,
    Null,
    Number,
    Object,
    String,
    Value,
)


def value_from_python(obj: Any) -> Value:
    """
    Convert native Python data into a value tree.

    dict keys must be strings. Value nodes pass through unchanged.
    """
    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Null()
    if isinstance(obj, dict):
        members: Dict[str, Value] = {}
        for k, v in obj.items():
            if not isinstance(k, str):
                raise TypeError(f"Object keys must be strings, got {type(k).__name__}")
            members[k] = value_from_python(v)
        return Object(members)
    if isinstance(obj, (list, tuple)):
        return Array(tuple(value_from_python(v) for v in obj))
    if isinstance(obj, str):
        return String(obj)
    # bool is a subclass of int, check it first
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Number.from_int(obj)
    if isinstance(obj, float):
        return Number(repr(obj))
    raise TypeError(f"Unsupported value type: {type(obj).__name__}")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"JSON constant {token} cannot be used as a number")


def value_from_json(s: str) -> Value:
    d = json.loads(
        s,
        parse_int=Number,
        parse_float=Number,
        parse_constant=_reject_constant,
    )
    return value_from_python(d)


def value_from_yaml(s: str) -> Value:
    d = yaml.safe_load(s)
    return value_from_python(d)


_ENCRYPTION_TEXT_FIELDS = ("cipher_name", "cipher_mode", "cipher_hash", "ivgen_name", "ivgen_hash")


def encryption_from_dict(d: Dict[str, Any]) -> EncryptionInfo:
    """
    Build an EncryptionInfo from a dict.

    Keys may be spelled with underscores or hyphens
    ("cipher_name" or "cipher-name").

    Raises:
        TypeError: if `d` is not a dict or a name/mode/hash field is
            neither None nor a string
    """
    if not isinstance(d, dict):
        raise TypeError(f"Encryption fields must be a mapping, got {type(d).__name__}")
    norm = {str(k).replace("-", "_"): v for k, v in d.items()}
    for name in _ENCRYPTION_TEXT_FIELDS:
        v = norm.get(name)
        if v is not None and not isinstance(v, str):
            raise TypeError(f"Encryption field {name} must be a string, got {type(v).__name__}")
    return EncryptionInfo(
        cipher_name=norm.get("cipher_name"),
        cipher_size=int(norm.get("cipher_size") or 0),
        cipher_mode=norm.get("cipher_mode"),
        cipher_hash=norm.get("cipher_hash"),
        ivgen_name=norm.get("ivgen_name"),
        ivgen_hash=norm.get("ivgen_hash"),
    )


def encryption_from_json(s: str) -> EncryptionInfo:
    """An empty document means no encryption fields."""
    d = json.loads(s) if s.strip() else None
    return encryption_from_dict({} if d is None else d)


def encryption_from_yaml(s: str) -> EncryptionInfo:
    d = yaml.safe_load(s)
    return encryption_from_dict({} if d is None else d)


def format_for_path(path: str | Path) -> str:
    """Input format implied by a file suffix: yaml for .yaml/.yml, else json."""
    return "yaml" if Path(path).suffix.lower() in (".yaml", ".yml") else "json"


def load_props(path: str | Path, fmt: Optional[str] = None) -> Value:
    """Read a value tree from a .json, .yaml or .yml file."""
    path = Path(path)
    text = path.read_text()
    if (fmt or format_for_path(path)) == "yaml":
        return value_from_yaml(text)
    return value_from_json(text)


def load_encryption(path: str | Path, fmt: Optional[str] = None) -> EncryptionInfo:
    """Read an EncryptionInfo from a .json, .yaml or .yml file."""
    path = Path(path)
    text = path.read_text()
    if (fmt or format_for_path(path)) == "yaml":
        return encryption_from_yaml(text)
    return encryption_from_json(text)

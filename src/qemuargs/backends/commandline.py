"""
QEMU command-line generator for value trees.

Converts an Object value into the comma-separated property list used by
options such as -object, -blockdev and -netdev:

    memory-backend-ram,id=mem0,size=1073741824,host-nodes=0-3,policy=bind

Conversion rules:
    - String: key=value, commas in the value doubled
    - Number: key=token, verbatim
    - Boolean: key=yes / key=no
    - Array: bitmap ranges when possible, otherwise key repeated per element
    - Object, Null: rejected

Arrays may not contain arrays.
"""

import logging

from qemuargs.bitmap import Bitmap
from qemuargs.buffer import ArgBuffer
from qemuargs.errors import CommandLineError, ErrorKind
from qemuargs.values import JsonType, Object, Value


logger = logging.getLogger(__name__)


def escape_comma(text: str) -> str:
    """
    Escape a value for the QEMU option parser.

    QEMU uses ',' both as the property separator and as its own escape
    character, so a literal comma is written as ',,'.
    """
    return text.replace(",", ",,")


def buffer_escape_comma(buf: ArgBuffer, text: str) -> None:
    """Append `text` to `buf` with every comma doubled."""
    buf.add(escape_comma(text))


def encode_value(key: str, value: Value, buf: ArgBuffer, nested: bool = False) -> None:
    """
    Append the ",key=value" fragments for one property.

    Args:
        key: Property name, emitted verbatim
        value: Value node to encode
        buf: Buffer to append to
        nested: True while expanding the elements of an array

    Raises:
        CommandLineError: UNSUPPORTED_NESTING for an array inside an array,
            UNSUPPORTED_TYPE for objects and nulls. Fragments appended
            before the failure stay in `buf`.
    """
    kind = value.type

    if kind is JsonType.STRING:
        buf.add_format(",{}=", key)
        buffer_escape_comma(buf, value.value)

    elif kind is JsonType.NUMBER:
        buf.add_format(",{}={}", key, value.token)

    elif kind is JsonType.BOOLEAN:
        buf.add_format(",{}={}", key, "yes" if value.value else "no")

    elif kind is JsonType.ARRAY:
        if nested:
            raise CommandLineError(
                ErrorKind.UNSUPPORTED_NESTING,
                "nested JSON array to commandline conversion is not supported",
            )

        bitmap = Bitmap.from_array(value)
        if bitmap is not None:
            for first, last in bitmap.runs():
                if last > first:
                    buf.add_format(",{}={}-{}", key, first, last)
                else:
                    buf.add_format(",{}={}", key, first)
        else:
            # not a bitmap, repeat the key for each member
            logger.debug("array '%s' is not a bitmap, encoding %d members", key, len(value))
            for elem in value:
                encode_value(key, elem, buf, nested=True)

    elif kind in (JsonType.OBJECT, JsonType.NULL):
        raise CommandLineError(
            ErrorKind.UNSUPPORTED_TYPE,
            "NULL and OBJECT JSON types can't be converted to commandline string",
        )

    else:
        raise TypeError(f"Unsupported value type: {kind}")


def build_commandline_json(props: Value, buf: ArgBuffer) -> None:
    """
    Append every property of an Object to `buf`, in insertion order.

    Args:
        props: Object whose members become properties
        buf: Buffer to append to

    Raises:
        CommandLineError: on the first member that cannot be encoded
    """
    if props.type is not JsonType.OBJECT:
        raise CommandLineError(
            ErrorKind.UNSUPPORTED_TYPE,
            f"properties must be an object, got {props.type.value}",
        )

    for key, value in props.items():
        encode_value(key, value, buf, nested=False)


def build_object_arg(type: str, alias: str, props: Object) -> str:
    """
    Build the argument of a QEMU -object option.

    Args:
        type: QEMU object type (e.g., "secret", "memory-backend-ram")
        alias: Object id
        props: Object properties

    Returns:
        "<type>,id=<alias>" followed by the encoded properties

    Raises:
        CommandLineError: if any property cannot be encoded. No partial
            string is ever returned.

    Example:
        build_object_arg("secret", "sec0", Object({"data": String("abc,def")}))

        returns "secret,id=sec0,data=abc,,def"
    """
    with ArgBuffer() as buf:
        buf.add_format("{},id={}", type, alias)
        build_commandline_json(props, buf)
        arg = buf.finish()

    # property values may hold secrets, log the shape only
    logger.debug("built -object %s,id=%s with %d properties", type, alias, len(props))
    return arg


__all__ = [
    "escape_comma",
    "buffer_escape_comma",
    "encode_value",
    "build_commandline_json",
    "build_object_arg",
]

"""
Value Tree for qemuargs

Configuration handed to the command-line backends is represented as a
small tree of immutable value nodes, mirroring JSON:

    String, Number, Boolean, Array, Object, Null

Every node carries a JsonType tag so backends can dispatch on the tag
instead of guessing from Python types.

ARCHITECTURAL RULE:
    Numbers are kept as their formatted text token.
    No node ever reinterprets "1.50" as 1.5 or "007" as 7.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterator, Tuple


class JsonType(Enum):
    """Kinds of value node."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


class Value(ABC):
    """
    Base class for all value nodes.

    Subclasses set the `type` tag. Structure only: formatting belongs
    in the backends.
    """

    type: ClassVar[JsonType]


@dataclass(frozen=True)
class String(Value):
    """A text scalar, stored unescaped."""

    type: ClassVar[JsonType] = JsonType.STRING

    value: str


@dataclass(frozen=True)
class Number(Value):
    """
    A numeric scalar carried as its decimal text token.

    Examples:
        - Number("1024")
        - Number("0.5")

    Properties:
        token: Already-canonical decimal text, emitted verbatim
    """

    type: ClassVar[JsonType] = JsonType.NUMBER

    token: str

    @classmethod
    def from_int(cls, n: int) -> "Number":
        return cls(str(n))

    def is_unsigned_integer(self) -> bool:
        """True when the token is a plain run of ASCII digits."""
        return bool(self.token) and self.token.isascii() and self.token.isdigit()


@dataclass(frozen=True)
class Boolean(Value):
    type: ClassVar[JsonType] = JsonType.BOOLEAN

    value: bool


@dataclass(frozen=True)
class Array(Value):
    """
    An ordered sequence of values.

    Example:
        [0, 1, 2, 5] becomes

        Array((Number("0"), Number("1"), Number("2"), Number("5")))
    """

    type: ClassVar[JsonType] = JsonType.ARRAY

    items: Tuple[Value, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)


@dataclass(frozen=True)
class Object(Value):
    """
    A string-keyed mapping of values.

    IMPORTANT:
        Iteration follows insertion order. Backends rely on this order
        to produce reproducible command lines, so never sort members.
    """

    type: ClassVar[JsonType] = JsonType.OBJECT

    members: Dict[str, Value] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.members)

    def items(self) -> Iterator[Tuple[str, Value]]:
        return iter(self.members.items())


@dataclass(frozen=True)
class Null(Value):
    type: ClassVar[JsonType] = JsonType.NULL

"""
Bitmap View of Integer Arrays

QEMU accepts lists of integers (host NUMA nodes, CPU sets, ...) as a
repeated key, and ranges keep that repetition short:

    [0, 1, 2, 5, 7, 8, 9]  ->  0-2, 5, 7-9

A Bitmap can only be built from an array of unsigned integer Numbers
in strictly ascending order. Anything else is not a bitmap and the
caller must treat the array as a plain sequence.
"""

from bisect import bisect_left, bisect_right
from typing import Iterator, List, Optional, Sequence, Tuple

from .values import Array, JsonType


class Bitmap:
    """
    Read-only set of non-negative integers.

    Positions are stored sorted; the bitmap is as wide as its highest
    set bit plus one.
    """

    def __init__(self, positions: Sequence[int]) -> None:
        self._bits: Tuple[int, ...] = tuple(positions)

    @classmethod
    def from_array(cls, array: Array) -> Optional["Bitmap"]:
        """
        Interpret an array as a bitmap.

        Returns:
            Bitmap, or None when any element is not an unsigned integer
            or the elements are not strictly ascending
        """
        positions: List[int] = []
        for item in array:
            if item.type is not JsonType.NUMBER or not item.is_unsigned_integer():
                return None
            pos = int(item.token)
            if positions and pos <= positions[-1]:
                return None
            positions.append(pos)
        return cls(positions)

    @property
    def size(self) -> int:
        return self._bits[-1] + 1 if self._bits else 0

    def __len__(self) -> int:
        return len(self._bits)

    def is_set(self, pos: int) -> bool:
        idx = bisect_left(self._bits, pos)
        return idx < len(self._bits) and self._bits[idx] == pos

    def next_set_bit(self, pos: int) -> int:
        """First set bit after `pos`, or -1. Pass -1 to start from 0."""
        idx = bisect_right(self._bits, pos)
        if idx < len(self._bits):
            return self._bits[idx]
        return -1

    def next_clear_bit(self, pos: int) -> int:
        """First clear bit after `pos` within the bitmap width, or -1."""
        candidate = pos + 1
        idx = bisect_left(self._bits, candidate)
        while idx < len(self._bits) and self._bits[idx] == candidate:
            candidate += 1
            idx += 1
        if candidate >= self.size:
            return -1
        return candidate

    def last_set_bit(self) -> int:
        return self._bits[-1] if self._bits else -1

    def runs(self) -> Iterator[Tuple[int, int]]:
        """
        Yield (first, last) for every maximal run of set bits.

        Runs come in ascending order; first == last for a lone bit.
        """
        pos = self.next_set_bit(-1)
        while pos > -1:
            end = self.next_clear_bit(pos)
            if end < 0:
                end = self.last_set_bit() + 1
            yield pos, end - 1
            pos = self.next_set_bit(end - 1)

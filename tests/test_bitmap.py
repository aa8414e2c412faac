"""
Tests for the Bitmap view of integer arrays.
"""

from qemuargs.bitmap import Bitmap
from qemuargs.values import Array, Number, String


def ints(*values):
    return Array(tuple(Number.from_int(v) for v in values))


class TestFromArray:
    def test_ascending_integers(self):
        bitmap = Bitmap.from_array(ints(0, 2, 3))
        assert bitmap is not None
        assert len(bitmap) == 3
        assert bitmap.size == 4

    def test_empty_array_is_empty_bitmap(self):
        bitmap = Bitmap.from_array(Array(()))
        assert bitmap is not None
        assert len(bitmap) == 0
        assert list(bitmap.runs()) == []

    def test_unordered_is_not_bitmap(self):
        assert Bitmap.from_array(ints(2, 1)) is None

    def test_duplicates_are_not_bitmap(self):
        assert Bitmap.from_array(ints(1, 1)) is None

    def test_negative_is_not_bitmap(self):
        assert Bitmap.from_array(Array((Number("-1"),))) is None

    def test_fraction_is_not_bitmap(self):
        assert Bitmap.from_array(Array((Number("1.0"),))) is None

    def test_string_is_not_bitmap(self):
        assert Bitmap.from_array(Array((String("1"),))) is None


class TestBitQueries:
    def setup_method(self):
        self.bitmap = Bitmap([0, 1, 2, 5, 7, 8, 9])

    def test_is_set(self):
        assert self.bitmap.is_set(5)
        assert not self.bitmap.is_set(6)

    def test_next_set_bit(self):
        assert self.bitmap.next_set_bit(-1) == 0
        assert self.bitmap.next_set_bit(2) == 5
        assert self.bitmap.next_set_bit(9) == -1

    def test_next_clear_bit(self):
        assert self.bitmap.next_clear_bit(0) == 3
        assert self.bitmap.next_clear_bit(5) == 6
        assert self.bitmap.next_clear_bit(7) == -1

    def test_last_set_bit(self):
        assert self.bitmap.last_set_bit() == 9
        assert Bitmap([]).last_set_bit() == -1

    def test_runs(self):
        assert list(self.bitmap.runs()) == [(0, 2), (5, 5), (7, 9)]

    def test_large_positions(self):
        """Sparse high positions do not allocate a dense map."""
        bitmap = Bitmap([10**12, 10**12 + 1])
        assert list(bitmap.runs()) == [(10**12, 10**12 + 1)]

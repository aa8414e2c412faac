"""
Tests for ArgBuffer.
"""

import pytest

from qemuargs.buffer import ArgBuffer


def test_add_and_finish():
    buf = ArgBuffer()
    buf.add("secret")
    buf.add_format(",id={}", "sec0")
    assert len(buf) == len("secret,id=sec0")
    assert buf.finish() == "secret,id=sec0"


def test_finish_resets():
    buf = ArgBuffer()
    buf.add("x")
    buf.finish()
    assert buf.content() == ""


def test_context_manager_keeps_content_on_success():
    with ArgBuffer() as buf:
        buf.add("abc")
    assert buf.content() == "abc"


def test_context_manager_discards_partial_content_on_error():
    with pytest.raises(RuntimeError):
        with ArgBuffer() as buf:
            buf.add("partial")
            raise RuntimeError("boom")
    assert buf.content() == ""

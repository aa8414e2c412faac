"""
Argument Builder

ArgBuffer accumulates command-line text for a single build. It is
append-only: nothing written can be removed except by discarding the
whole buffer.

Use it as a context manager so a failed build never leaks a half
written string:

    with ArgBuffer() as buf:
        buf.add("secret,id=sec0")
        build_commandline_json(props, buf)
        return buf.finish()

If an exception escapes the block, the partial content is dropped.
"""

from typing import List


class ArgBuffer:
    """Append-only text accumulator with a single finalize step."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def add(self, text: str) -> None:
        self._parts.append(text)

    def add_format(self, fmt: str, *args: object) -> None:
        """Append `fmt` formatted with str.format(*args)."""
        self._parts.append(fmt.format(*args))

    def content(self) -> str:
        """Current content, without resetting."""
        return "".join(self._parts)

    def finish(self) -> str:
        """Return the accumulated string and reset the buffer."""
        result = self.content()
        self.reset()
        return result

    def reset(self) -> None:
        self._parts = []

    def __len__(self) -> int:
        return sum(len(p) for p in self._parts)

    def __enter__(self) -> "ArgBuffer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.reset()

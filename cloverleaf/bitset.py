"""Fixed-size bit set used to track which entries have been assigned."""

from __future__ import annotations

_WORD_BITS = 32


class BitSet:
    """A set of flags packed into 32-bit words."""

    __slots__ = ("_words",)

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("BitSet size must be non-negative")
        self._words = [0] * (size // _WORD_BITS + 1)

    def _locate(self, idx: int) -> tuple[int, int]:
        if idx < 0:
            raise IndexError(f"bit index {idx} is negative")
        word, bit = divmod(idx, _WORD_BITS)
        if word >= len(self._words):
            raise IndexError(f"bit index {idx} is out of range")
        return word, 1 << bit

    def is_set(self, idx: int) -> bool:
        """Return whether the bit at ``idx`` is set."""
        word, mask = self._locate(idx)
        return bool(self._words[word] & mask)

    def set_bit(self, idx: int) -> None:
        """Set the bit at ``idx``."""
        word, mask = self._locate(idx)
        self._words[word] |= mask

    def num_words(self) -> int:
        """Number of 32-bit words backing the set."""
        return len(self._words)

    def __contains__(self, idx: object) -> bool:
        return isinstance(idx, int) and self.is_set(idx)

    def __repr__(self) -> str:
        return f"BitSet(words={self.num_words()})"
"""Integer parsing and formatting, substring search, byte order and bit sets."""

from __future__ import annotations

from array import array

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUV"


def _digit_value(char: str, base: int) -> int:
    if base != 16:
        return ord(char) - ord("0")
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return 0


def parse_int(text: str, base: int = 10) -> int:
    """Parse ``text`` as an integer in ``base``, with an optional leading '-'.

    Digits are not validated. Outside base 16 each character counts as its
    offset from '0'; in base 16 characters that are not hex digits count as 0.
    An empty string gives 0.
    """
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    result = 0
    for char in digits:
        result = result * base + _digit_value(char, base)
    return -result if negative else result


def format_int(value: int, base: int = 10) -> str:
    """Format ``value`` in ``base`` (2 to 32) with upper-case letter digits.

    Only base 10 shows a minus sign; in any other base the magnitude is shown.
    """
    if not 2 <= base <= 32:
        raise ValueError(f"base must be between 2 and 32, got {base}")
    remaining = abs(value)
    digits: list[str] = []
    while remaining:
        remaining, digit = divmod(remaining, base)
        digits.append(_DIGITS[digit])
    if not digits:
        digits.append("0")
    if value < 0 and base == 10:
        digits.append("-")
    return "".join(reversed(digits))


def find_substring(haystack: str, needle: str) -> str | None:
    """Return ``haystack`` from the first occurrence of ``needle`` on.

    Returns None when there is no match or when ``needle`` is empty.
    """
    if not needle:
        return None
    index = haystack.find(needle)
    return None if index < 0 else haystack[index:]


def swap_endianness(value: int) -> int:
    """Reverse the byte order of the low 32 bits of ``value``."""
    value &= 0xFFFFFFFF
    value = ((value & 0xFFFF0000) >> 16) | ((value & 0x0000FFFF) << 16)
    value = ((value & 0xFF00FF00) >> 8) | ((value & 0x00FF00FF) << 8)
    return value


def is_little_endian() -> bool:
    """Tell whether the machine stores the least significant byte first."""
    return array("I", [1]).tobytes()[0] == 1


class BitArray:
    """A fixed-size set of bits packed into 32-bit words."""

    WORD_BITS = 32

    def __init__(self, size: int = 320) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._words = [0] * -(-size // self.WORD_BITS)

    def __len__(self) -> int:
        return self._size

    def _locate(self, k: int) -> tuple[int, int]:
        if not 0 <= k < self._size:
            raise IndexError(f"bit {k} out of range for {self._size} bits")
        word, bit = divmod(k, self.WORD_BITS)
        return word, 1 << bit

    def set(self, k: int) -> None:
        """Set bit ``k``."""
        word, mask = self._locate(k)
        self._words[word] |= mask

    def clear(self, k: int) -> None:
        """Clear bit ``k``."""
        word, mask = self._locate(k)
        self._words[word] &= ~mask

    def test(self, k: int) -> bool:
        """Tell whether bit ``k`` is set."""
        word, mask = self._locate(k)
        return bool(self._words[word] & mask)

    def set_bits(self) -> list[int]:
        """Return the positions of all set bits in ascending order."""
        return [k for k in range(self._size) if self.test(k)]
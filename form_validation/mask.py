"""
Masked-pattern matching for the `pattern` validator.

A mask is a string of format characters and literals:

    1   digit
    a   letter
    A   letter, upper-cased on input
    *   alphanumeric
    #   alphanumeric, upper-cased on input
    \\   escape: the next character is a literal

Every other character is a literal. "(111) 111-1111" is a US phone mask;
"AAA-1111" a licence plate.
"""

import re
from typing import List, Optional, Tuple

FORMAT_CHARACTERS = {
    "1": re.compile(r"[0-9]"),
    "a": re.compile(r"[A-Za-z]"),
    "A": re.compile(r"[A-Za-z]"),
    "*": re.compile(r"[A-Za-z0-9]"),
    "#": re.compile(r"[A-Za-z0-9]"),
}

ESCAPE_CHAR = "\\"


class MaskPattern:
    """A parsed input mask."""

    def __init__(self, mask: str):
        """
        Parse a mask into literal and editable slots.

        Args:
            mask: Mask string (see module docstring for the format)

        Raises:
            ValueError: If mask is not a string or has no editable characters
        """
        if not isinstance(mask, str) or not mask:
            raise ValueError(f"Mask must be a non-empty string, got {mask!r}")

        self.mask = mask
        # Each slot is (literal, None) or (None, regex)
        self.slots: List[Tuple[Optional[str], Optional[re.Pattern]]] = []

        escaped = False
        for char in mask:
            if escaped:
                self.slots.append((char, None))
                escaped = False
            elif char == ESCAPE_CHAR:
                escaped = True
            elif char in FORMAT_CHARACTERS:
                self.slots.append((None, FORMAT_CHARACTERS[char]))
            else:
                self.slots.append((char, None))

        if escaped:
            # Trailing backslash is kept as a literal
            self.slots.append((ESCAPE_CHAR, None))

        self.editable = [rx for literal, rx in self.slots if rx is not None]
        if not self.editable:
            raise ValueError(f"Mask contains no editable characters: {mask!r}")

    def matches(self, value: str) -> bool:
        """
        Check that value completely fills the mask.

        Accepts either the formatted value ("(555) 123-4567") or just the
        editable characters ("5551234567").
        """
        return self._matches_formatted(value) or self._matches_raw(value)

    def _matches_formatted(self, value: str) -> bool:
        if len(value) != len(self.slots):
            return False
        for char, (literal, rx) in zip(value, self.slots):
            if literal is not None:
                if char != literal:
                    return False
            elif not rx.fullmatch(char):
                return False
        return True

    def _matches_raw(self, value: str) -> bool:
        if len(value) != len(self.editable):
            return False
        return all(rx.fullmatch(char) for char, rx in zip(value, self.editable))


def matches_mask(mask: str, value: str) -> bool:
    """Return True if value satisfies mask."""
    return MaskPattern(mask).matches(value)

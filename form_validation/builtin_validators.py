"""
Built-in validators

Every validator has the same contract:

    validator(value, options) -> False | str

False means the value passed; a string is the failure message, looked up
from the message catalog at call time. Validators never mutate value.

`validators` is the default registry. Override entries per call through
options={"validators": {...}} rather than mutating it.
"""

import re
from collections.abc import Mapping
from typing import Any, Callable, Dict, Union

from .mask import matches_mask
from .message_catalog import current_messages

ValidationOutcome = Union[bool, str]
Validator = Callable[[Any, Any], ValidationOutcome]

EMAIL_RE = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)
NON_WORD_RE = re.compile(r"\W+", re.ASCII)
DIGITS_RE = re.compile(r"\d+", re.ASCII)
ZIPCODE_RE = re.compile(r"\d{5}(-\d{4})?", re.ASCII)
SIMPLE_STRING_RE = re.compile(r"[A-Za-z0-9_-]+")

CREDIT_CARD_MIN_LENGTH = 12
CREDIT_CARD_MAX_LENGTH = 19

# Digit sum of 2*n for n in 0..9
_LUHN_DOUBLED = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def luhn_checksum(number: str) -> bool:
    """
    Check a digit string with the Luhn algorithm.

    Every second digit from the right is doubled and digit-summed. The
    total must be a non-zero multiple of 10.
    """
    if not DIGITS_RE.fullmatch(number):
        return False
    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        total += _LUHN_DOUBLED[digit] if position % 2 else digit
    return total != 0 and total % 10 == 0


def required(value: Any, options: Any = True) -> ValidationOutcome:
    """The value must not be the empty string."""
    if options is True and value == "":
        return current_messages()["required"]
    return False


def email(value: str, options: Any = True) -> ValidationOutcome:
    """The value must be an email address."""
    if options is True:
        return False if EMAIL_RE.fullmatch(value) else current_messages()["email"]
    return False


def creditcard(value: str, options: Any = True) -> ValidationOutcome:
    """The value must be a 12-19 digit card number passing the Luhn check."""
    number = NON_WORD_RE.sub("", value)
    if not CREDIT_CARD_MIN_LENGTH <= len(number) <= CREDIT_CARD_MAX_LENGTH:
        return current_messages()["creditcard"]
    return False if luhn_checksum(number) else current_messages()["creditcard"]


def pattern(value: str, options: Any) -> ValidationOutcome:
    """
    The value must fill an input mask.

    Args:
        value: Value to check
        options: Either the mask string, or a dict with "mask" and an
            optional "placeholder" shown in the failure message

    Raises:
        ValueError: If no usable mask is given
    """
    if isinstance(options, str):
        options = {"placeholder": options, "mask": options}
    elif not isinstance(options, Mapping):
        raise ValueError(f"pattern rule needs a mask, got {options!r}")

    if matches_mask(options.get("mask"), value):
        return False
    shown = options.get("placeholder") or options.get("mask")
    return current_messages()["pattern"].format(pattern=shown)


def numbersonly(value: Any, options: Any = True) -> ValidationOutcome:
    """The value, as a string, must contain only digits."""
    if DIGITS_RE.fullmatch(str(value)):
        return False
    return current_messages()["numbersonly"]


def zipcode(value: str, options: Any = True) -> ValidationOutcome:
    """The value must be a US zip code: 12345 or 12345-6789."""
    return False if ZIPCODE_RE.fullmatch(value) else current_messages()["zipcode"]


def matches(value: Any, options: Any = True) -> ValidationOutcome:
    """The value must be one of the allowed values given as options."""
    if not isinstance(options, (list, tuple, set, frozenset)):
        return False
    return False if value in options else current_messages()["matches"]


def simplestring(value: str, options: Any = True) -> ValidationOutcome:
    """Only letters, digits, underscores and hyphens."""
    if SIMPLE_STRING_RE.fullmatch(value):
        return False
    return current_messages()["simplestring"]


validators: Dict[str, Validator] = {
    "required": required,
    "email": email,
    "creditcard": creditcard,
    "pattern": pattern,
    "numbersonly": numbersonly,
    "zipcode": zipcode,
    "matches": matches,
    "simplestring": simplestring,
}

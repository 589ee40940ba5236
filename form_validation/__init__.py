"""
form-validation-lib: Declarative field validation

Validate a value, or a mapping of values, against a rule set and get back
either False (valid) or an error message per field. Nothing is raised for
invalid data.

- Built-in validators: required, email, creditcard, pattern, numbersonly,
  zipcode, matches, simplestring
- Per-call validator overrides and inline validator functions
- Localizable message catalog, optionally loaded from a YAML file or URL

Example:
    from form_validation import validate

    errors = validate(
        {"emailAddress": "a@b.com", "password": ""},
        {
            "emailAddress": {"validate": True, "email": True, "required": True},
            "password": {"validate": True, "required": True},
        },
    )
    # {"emailAddress": False, "password": "This field is required."}
"""

from .api import ValidationService
from .message_catalog import messages, reset_messages, set_messages, use_messages
from .validation_engine import (
    form_error,
    has_errors,
    recursive_validate,
    rules,
    validate,
    validate_value,
)
from .builtin_validators import validators

__version__ = "0.1.0"
__all__ = [
    "ValidationService",
    "form_error",
    "has_errors",
    "messages",
    "recursive_validate",
    "reset_messages",
    "rules",
    "set_messages",
    "use_messages",
    "validate",
    "validate_value",
    "validators",
]

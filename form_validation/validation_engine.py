"""
Validation Engine

Walks a rule set, resolves each rule name to a validator and reports the
first failure. Results mirror the input one level deep:

    validate("", {"required": True})
    # -> "This field is required."

    validate(
        {"emailAddress": "a@b.com", "password": ""},
        {
            "emailAddress": {"validate": True, "email": True, "required": True},
            "password": {"validate": True, "required": True},
        },
    )
    # -> {"emailAddress": False, "password": "This field is required."}

Failures are data, not exceptions: unknown rule names and missing rule
sets degrade to "no error".
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, NamedTuple, Optional, Union

from .message_catalog import current_messages
from .builtin_validators import validators

logger = logging.getLogger(__name__)

ErrorResult = Union[bool, str]

# Rule-level flags that gate or mark a rule set rather than name a validator
REQUIRED_KEY = "required"
VALIDATE_KEY = "validate"
RULE_LEAF_MARKER = "_validate"


class RuleValue(NamedTuple):
    """
    A rule's value, tagged by how it is dispatched.

    kind is LITERAL for options handed to a registered validator, or
    INLINE when the rule value is itself the validator.
    """

    kind: str
    payload: Any

    LITERAL = "literal"
    INLINE = "inline"

    @classmethod
    def of(cls, rule_opts: Any) -> "RuleValue":
        if callable(rule_opts):
            return cls(cls.INLINE, rule_opts)
        return cls(cls.LITERAL, rule_opts)


def _override_validators(options: Optional[Mapping]) -> Mapping:
    """Return the per-call validator overrides, or an empty mapping."""
    if not isinstance(options, Mapping):
        return {}
    overrides = options.get("validators")
    return overrides if isinstance(overrides, Mapping) else {}


def _resolve(rule_name: str, rule_value: RuleValue, overrides: Mapping):
    """
    Resolve a rule to (validator, options).

    Overrides shadow the built-in registry. Returns (None, None) when no
    callable validator is found.
    """
    if rule_value.kind == RuleValue.INLINE:
        return rule_value.payload, {}

    validator = overrides.get(rule_name) or validators.get(rule_name)
    if not callable(validator):
        return None, None
    return validator, rule_value.payload


def _normalize(outcome: Any) -> ErrorResult:
    """Map a validator's return value onto False or a message."""
    if outcome is False or outcome is None:
        return False
    if isinstance(outcome, str):
        return outcome or False
    return current_messages()["generic"]


def validate_value(value: Any, rules: Mapping, options: Optional[Mapping] = None) -> ErrorResult:
    """
    Validate a single value against a rule set.

    Rules run in declaration order and stop at the first failure. Unless the
    rule set has required=True, an empty string skips every rule.

    Args:
        value: Scalar value to check
        rules: Mapping of rule name to options (or to a validator callable)
        options: Optional {"validators": {name: validator}} overrides for
            this call only

    Returns:
        False if the value passed, otherwise the first failure message
    """
    if not isinstance(rules, Mapping):
        logger.debug("Rule set is not a mapping, nothing to check", extra={"rules": rules})
        return False

    overrides = _override_validators(options)
    gate_open = rules.get(REQUIRED_KEY) is True or value != ""

    error: ErrorResult = False
    for rule_name, rule_opts in rules.items():
        if error is not False:
            break

        validator, validator_opts = _resolve(rule_name, RuleValue.of(rule_opts), overrides)
        if validator is None:
            logger.debug("No validator for rule, skipped", extra={"rule_name": rule_name})
            continue

        if gate_open:
            error = _normalize(validator(value, validator_opts))

    return error


def validate(
    object_or_value: Any,
    rules: Optional[Mapping] = None,
    options: Optional[Mapping] = None,
) -> Union[ErrorResult, Dict[Any, ErrorResult]]:
    """
    Validate a mapping of values or a single value.

    For a mapping, each key with an entry in rules is checked with
    validate_value() and recorded, False included. Keys without a rule entry
    are left out of the result.

    Args:
        object_or_value: Mapping of field name to value, or a single value
        rules: Per-field rule sets for a mapping, or one rule set for a value
        options: Optional {"validators": {...}} overrides for this call only

    Returns:
        Dict of field name to result for a mapping, else a single result
    """
    if not isinstance(rules, Mapping):
        rules = {}

    if isinstance(object_or_value, Mapping):
        errors = {}
        for key, value in object_or_value.items():
            if key not in rules:
                continue
            errors[key] = validate_value(value, rules[key], options)
        return errors

    return validate_value(object_or_value, rules, options)


def recursive_validate(
    nested_values: Mapping,
    nested_rules: Mapping,
    options: Optional[Mapping] = None,
) -> Dict[Any, str]:
    """
    Validate rule leaves of a nested rule map, keeping failures only.

    Only entries with validate=True (or built with rules()) are checked.
    Other entries are group placeholders and are not descended into. A key
    missing from nested_values is checked as the empty string.

    Returns:
        Dict of key to failure message; passing keys are omitted
    """
    if not isinstance(nested_rules, Mapping):
        return {}
    if not isinstance(nested_values, Mapping):
        nested_values = {}

    errors = {}
    for key, leaf_rules in nested_rules.items():
        if not _is_rule_leaf(leaf_rules):
            continue
        # Absent fields are empty, so only required rules see them
        value = nested_values.get(key, "")
        error = validate_value(value, leaf_rules, options)
        if error is not False:
            errors[key] = error
    return errors


def _is_rule_leaf(entry: Any) -> bool:
    if not isinstance(entry, Mapping):
        return False
    return entry.get(VALIDATE_KEY) is True or entry.get(RULE_LEAF_MARKER) is True


def rules(obj: Mapping) -> Dict[str, Any]:
    """Return a copy of obj marked as a rule leaf."""
    return {**obj, RULE_LEAF_MARKER: True}


def has_errors(result: Union[ErrorResult, Mapping]) -> bool:
    """True if a result, or any value of a result map, is a failure."""
    if isinstance(result, Mapping):
        return any(error is not False for error in result.values())
    return result is not False


def form_error(result: Union[ErrorResult, Mapping]) -> ErrorResult:
    """Return the form-level error message if result has any failure."""
    return current_messages()["error"] if has_errors(result) else False


"""
Public API for form-validation-lib

ValidationService is the configured front door over the validation engine.
The plain functions in form_validation.validation_engine remain usable on
their own.
"""

import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

from .config_loader import ConfigLoader
from .message_catalog import use_messages
from . import validation_engine

logger = logging.getLogger(__name__)


class ValidationService:
    """
    Validation front door with instance-level validator overrides and messages.

    Example:
        from form_validation import ValidationService

        service = ValidationService(validators={"username": check_username})
        errors = service.validate(form_data, form_rules)
        if service.form_error(errors):
            ...

    Overrides given here apply to every call on this service. Overrides passed
    per call in options={"validators": {...}} take precedence over them.

    The configured message catalog belongs to this service: it is layered
    over the shared messages during this service's calls only, so other
    services and plain validate() calls are unaffected.
    """

    def __init__(
        self,
        validators: Optional[Mapping[str, Callable]] = None,
        config_loader: Optional[ConfigLoader] = None,
    ):
        """
        Initialize validation service.

        Loads the message catalog named by local-config.yaml, if any.

        Args:
            validators: Validator overrides for every call on this service
            config_loader: ConfigLoader instance (defaults to bundled config)

        Raises:
            ValueError: If the configured catalog is malformed
            RuntimeError: If the configured catalog cannot be read
        """
        self.validators: Dict[str, Callable] = dict(validators or {})
        self.config_loader = config_loader or ConfigLoader()
        self.messages: Dict[str, str] = {}
        self._catalog_loaded_at: Optional[float] = None
        self._load_catalog()

    def _load_catalog(self) -> None:
        catalog = self.config_loader.get_message_catalog()
        if catalog is None:
            logger.debug("No message catalog configured, using shared messages")
            return
        self.messages = dict(catalog)
        self._catalog_loaded_at = time.time()

    def _options(self, options: Optional[Mapping]) -> Dict[str, Any]:
        """Layer per-call options over this service's validators."""
        merged = dict(options or {})
        call_validators = merged.get("validators") or {}
        merged["validators"] = {**self.validators, **call_validators}
        return merged

    def validate(self, object_or_value, rules=None, options=None):
        """
        Validate a mapping of values or a single value.

        See form_validation.validation_engine.validate().
        """
        with use_messages(self.messages):
            return validation_engine.validate(object_or_value, rules, self._options(options))

    def validate_value(self, value, rules, options=None):
        """Validate a single value. See validation_engine.validate_value()."""
        with use_messages(self.messages):
            return validation_engine.validate_value(value, rules, self._options(options))

    def recursive_validate(self, nested_values, nested_rules, options=None):
        """Validate rule leaves, keeping failures only."""
        with use_messages(self.messages):
            return validation_engine.recursive_validate(
                nested_values, nested_rules, self._options(options)
            )

    def form_error(self, result):
        with use_messages(self.messages):
            return validation_engine.form_error(result)

    def reload_messages(self):
        """
        Re-read the configured message catalog from disk.

        Raises:
            ValueError: If the catalog is malformed
            RuntimeError: If the catalog cannot be read
        """
        self._load_catalog()

    def get_catalog_age(self):
        """
        Get seconds since the configured catalog was loaded.

        Returns:
            float: Age in seconds, or None if no catalog is configured
        """
        if self._catalog_loaded_at is None:
            return None
        return time.time() - self._catalog_loaded_at

"""Local configuration and message catalog loading."""

import logging
import os
import urllib.parse
from importlib.resources import files
from typing import Any, Dict, Optional

import yaml
from jsonschema import ValidationError, validate

logger = logging.getLogger(__name__)

# A catalog maps rule names to non-empty message strings
CATALOG_SCHEMA = {
    "type": "object",
    "additionalProperties": {"type": "string", "minLength": 1},
}


class ConfigLoader:
    """Loads local-config.yaml and the message catalog it points at."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize config loader.

        Args:
            config_path: Path to a local config file. Defaults to the
                local-config.yaml bundled in the form_validation package.
        """
        if config_path is None:
            config_path = str(files("form_validation").joinpath("local-config.yaml"))
        self.local_config_path = config_path
        self.local_config = self._load_yaml(config_path) or {}

    def get_local_config(self) -> Dict[str, Any]:
        """Get local configuration."""
        return self.local_config

    def get_message_catalog_uri(self) -> Optional[str]:
        """Get the configured catalog URI, or None to keep bundled messages."""
        return self.local_config.get("message_catalog_uri")

    def get_message_catalog(self) -> Optional[Dict[str, str]]:
        """
        Load the configured message catalog.

        Returns:
            Catalog dict, or None if no catalog is configured
        """
        uri = self.get_message_catalog_uri()
        if not uri:
            return None
        return self.load_message_catalog(uri)

    def load_message_catalog(self, uri: str) -> Dict[str, str]:
        """
        Load and check a message catalog.

        Supports:
        - Relative paths - resolved against the local config directory
        - file:// - Local filesystem (absolute paths)

        Args:
            uri: Catalog URI or relative path

        Returns:
            Mapping of rule name to message

        Raises:
            ValueError: If the URI scheme is unsupported or the catalog is malformed
            RuntimeError: If the catalog cannot be read
        """
        catalog = self._load_config_from_uri(uri)

        try:
            validate(instance=catalog, schema=CATALOG_SCHEMA)
        except ValidationError as e:
            error_path = " -> ".join(str(p) for p in e.path) if e.path else "root"
            raise ValueError(f"Invalid message catalog {uri} at {error_path}: {e.message}") from e

        logger.info("Message catalog loaded", extra={"uri": uri, "entries": len(catalog)})
        return catalog

    def _load_yaml(self, path: str) -> Any:
        """Load YAML file from disk."""
        try:
            with open(path) as f:
                return yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise RuntimeError(f"Failed to read {path}: {e}") from e

    def _load_config_from_uri(self, uri: str) -> Any:
        """Load YAML from a relative path or file:// URI."""
        parsed = urllib.parse.urlparse(uri)

        if not parsed.scheme:
            # Relative path - resolve relative to local config directory
            config_dir = os.path.dirname(os.path.abspath(self.local_config_path))
            return self._load_yaml(os.path.join(config_dir, uri))

        if parsed.scheme == "file":
            return self._load_yaml(urllib.parse.unquote(parsed.path))

        raise ValueError(f"Unsupported URI scheme: {parsed.scheme} in {uri}")

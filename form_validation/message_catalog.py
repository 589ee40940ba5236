"""
Message catalog

Process-wide mapping of rule name to the message a validator returns on
failure. Defaults ship in the bundled messages.yaml.

Validators look messages up at call time, so callers can localize by
overriding entries here rather than replacing validators:

    from form_validation import set_messages

    set_messages({"required": "Ce champ est obligatoire."})

use_messages() layers a catalog over the shared one for a block of calls
without changing it; ValidationService uses it for its configured catalog.
"""

import logging
from collections import ChainMap
from contextlib import contextmanager
from contextvars import ContextVar
from importlib.resources import files
from typing import Dict, Iterator, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)


def _load_bundled_catalog() -> Dict[str, str]:
    """Load the default catalog bundled with the package."""
    catalog_file = files("form_validation").joinpath("messages.yaml")
    with catalog_file.open("r") as f:
        return yaml.safe_load(f)


DEFAULT_MESSAGES: Mapping[str, str] = _load_bundled_catalog()

# Shared by reference; only set_messages() and reset_messages() change it.
messages: Dict[str, str] = dict(DEFAULT_MESSAGES)


def set_messages(overrides: Mapping[str, str], replace: bool = False) -> None:
    """
    Override catalog entries in place.

    Args:
        overrides: Mapping of rule name to message
        replace: If True, drop every entry not in overrides first
    """
    if replace:
        messages.clear()
    messages.update(overrides)
    logger.debug(
        "Message catalog updated",
        extra={"keys": sorted(overrides), "replace": replace},
    )


def reset_messages() -> None:
    """Restore the bundled defaults."""
    set_messages(DEFAULT_MESSAGES, replace=True)


# Catalog layered over `messages` for the current call, if any
_active_catalog: ContextVar[Optional[Mapping[str, str]]] = ContextVar(
    "form_validation_active_catalog", default=None
)


def current_messages() -> Mapping[str, str]:
    """Return the catalog validators should read for the current call."""
    active = _active_catalog.get()
    return messages if active is None else active


@contextmanager
def use_messages(catalog: Mapping[str, str]) -> Iterator[None]:
    """
    Layer catalog over the shared messages for the duration of the block.

    Entries missing from catalog fall through to the shared messages. The
    shared messages are never modified, and the layering is scoped to the
    current thread or task.
    """
    token = _active_catalog.set(ChainMap(dict(catalog), messages))
    try:
        yield
    finally:
        _active_catalog.reset(token)

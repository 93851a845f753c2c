"""Temporary name allocation for synthesized identifiers."""

from __future__ import annotations

import logging

from . import constants

logger = logging.getLogger(__name__)


class NameAllocator:
    """Hands out ``prefix$N`` names from one counter shared by every prefix.

    The counter only grows until :meth:`reset` is called, so names are
    unique within one compilation unit whatever prefixes are mixed.
    """

    def __init__(self):
        self._counter: int = 0

    @property
    def counter(self) -> int:
        return self._counter

    def allocate(self, prefix: str) -> str:
        name = f"{prefix}{constants.NAME_SEPARATOR}{self._counter}"
        self._counter += 1
        logger.debug("Allocated %s", name)
        return name

    def reset(self):
        self._counter = 0


_default_allocator = NameAllocator()


def default_allocator() -> NameAllocator:
    """The process-wide allocator used when a caller does not supply one."""
    return _default_allocator


def reset_module_state():
    """Reset the process-wide allocator between independent compilation runs."""
    _default_allocator.reset()

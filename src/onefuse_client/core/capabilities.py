"""Which operations each resource type supports."""

from __future__ import annotations

from enum import Flag, auto
from typing import Dict

from .errors import UnsupportedOperationError
from .urls import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    MODULE_ENDPOINT_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
)


class Capability(Flag):
    NONE = 0
    CREATE = auto()
    READ = auto()
    UPDATE = auto()
    DELETE = auto()
    LOOKUP = auto()  # filtered collection query

    CRUD = CREATE | READ | UPDATE | DELETE


CAPABILITIES: Dict[str, Capability] = {
    NAMING_RESOURCE_TYPE: Capability.CREATE | Capability.READ | Capability.DELETE,
    MICROSOFT_AD_POLICY_RESOURCE_TYPE: Capability.CRUD,
    MODULE_ENDPOINT_RESOURCE_TYPE: Capability.READ | Capability.LOOKUP,
    WORKSPACE_RESOURCE_TYPE: Capability.LOOKUP,
}


def supports(resource_type: str, capability: Capability) -> bool:
    granted = CAPABILITIES.get(resource_type, Capability.NONE)
    return (granted & capability) == capability


def require_capability(
    resource_type: str, capability: Capability, *, operation: str
) -> None:
    """Raise UnsupportedOperationError before any request is built."""
    if not supports(resource_type, capability):
        raise UnsupportedOperationError(
            operation=operation, resource_type=resource_type
        )


__all__ = ["Capability", "CAPABILITIES", "supports", "require_capability"]

"""
URL construction for the OneFuse REST API.

Collections live at ``scheme://host:port/api/v3/onefuse/<resource_type>/`` and
items at the same URL with ``<id>/`` appended.
"""

from __future__ import annotations

from .config import ConnectionContext

API_VERSION = "/api/v3/"
API_NAMESPACE = "onefuse"

NAMING_RESOURCE_TYPE = "customNames"
NAMING_POLICY_RESOURCE_TYPE = "namingPolicies"
WORKSPACE_RESOURCE_TYPE = "workspaces"
MICROSOFT_AD_POLICY_RESOURCE_TYPE = "microsoftADPolicies"
MODULE_ENDPOINT_RESOURCE_TYPE = "endpoints"


def reference_path(resource_type: str, resource_id: int | str) -> str:
    """
    Relative API path used as a relation value in request bodies.
    Example: reference_path('workspaces', 2) -> '/api/v3/onefuse/workspaces/2/'
    """
    return f"{API_VERSION}{API_NAMESPACE}/{resource_type}/{resource_id}/"


def collection_url(context: ConnectionContext, resource_type: str) -> str:
    return f"{context.base_url}{API_VERSION}{API_NAMESPACE}/{resource_type}/"


def item_url(context: ConnectionContext, resource_type: str, resource_id: int) -> str:
    return f"{collection_url(context, resource_type)}{resource_id}/"


__all__ = [
    "API_VERSION",
    "API_NAMESPACE",
    "NAMING_RESOURCE_TYPE",
    "NAMING_POLICY_RESOURCE_TYPE",
    "WORKSPACE_RESOURCE_TYPE",
    "MICROSOFT_AD_POLICY_RESOURCE_TYPE",
    "MODULE_ENDPOINT_RESOURCE_TYPE",
    "collection_url",
    "item_url",
    "reference_path",
]

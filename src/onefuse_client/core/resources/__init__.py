"""
Resource operations for OneFuse.

Each module holds the plain functions for one resource kind; every function
takes the shared OneFuseClient as its first argument.
"""

from .ad_policies import (
    create_microsoft_ad_policy,
    delete_microsoft_ad_policy,
    get_microsoft_ad_policy,
    update_microsoft_ad_policy,
)
from .custom_names import delete_custom_name, generate_custom_name, get_custom_name
from .endpoints import (
    MICROSOFT_ENDPOINT_TYPE,
    create_microsoft_endpoint,
    delete_microsoft_endpoint,
    get_microsoft_endpoint,
    get_microsoft_endpoint_by_name,
    update_microsoft_endpoint,
)
from .workspaces import (
    DEFAULT_WORKSPACE_NAME,
    find_default_workspace_id,
    find_workspace_by_name,
    list_workspaces,
    resolve_workspace_id,
)

__all__ = [
    "generate_custom_name",
    "get_custom_name",
    "delete_custom_name",
    "create_microsoft_ad_policy",
    "get_microsoft_ad_policy",
    "update_microsoft_ad_policy",
    "delete_microsoft_ad_policy",
    "MICROSOFT_ENDPOINT_TYPE",
    "get_microsoft_endpoint",
    "get_microsoft_endpoint_by_name",
    "create_microsoft_endpoint",
    "update_microsoft_endpoint",
    "delete_microsoft_endpoint",
    "DEFAULT_WORKSPACE_NAME",
    "list_workspaces",
    "find_workspace_by_name",
    "find_default_workspace_id",
    "resolve_workspace_id",
]

"""
Microsoft endpoints (connection endpoints).

Endpoints can be read by id or looked up by name. Create, update and delete
are not supported and are rejected before any request is built.
"""

from __future__ import annotations

from typing import Any, Dict, NoReturn, Optional

from onefuse_client.core.capabilities import Capability, require_capability
from onefuse_client.core.client import OneFuseClient
from onefuse_client.core.codec import decode_record
from onefuse_client.core.errors import (
    ResourceNotFoundError,
    UnsupportedOperationError,
)
from onefuse_client.core.hal import embedded_items
from onefuse_client.core.models import MicrosoftEndpoint
from onefuse_client.core.resources._validation import require_id, require_text
from onefuse_client.core.urls import (
    MODULE_ENDPOINT_RESOURCE_TYPE,
    collection_url,
    item_url,
)

MICROSOFT_ENDPOINT_TYPE = "microsoft"


def _bind_links(endpoint: MicrosoftEndpoint) -> MicrosoftEndpoint:
    return endpoint.model_copy(
        update={
            "workspace_id": endpoint.link_id("workspace"),
            "credential_id": endpoint.link_id("credential"),
        }
    )


def get_microsoft_endpoint(
    client: OneFuseClient, endpoint_id: int, *, timeout: Optional[float] = None
) -> MicrosoftEndpoint:
    operation = "get_microsoft_endpoint"
    require_capability(
        MODULE_ENDPOINT_RESOURCE_TYPE, Capability.READ, operation=operation
    )
    require_id(endpoint_id, operation=operation)
    payload = client.get(
        item_url(client.context, MODULE_ENDPOINT_RESOURCE_TYPE, endpoint_id),
        operation=operation,
        timeout=timeout,
    )
    return _bind_links(decode_record(MicrosoftEndpoint, payload, operation=operation))


def get_microsoft_endpoint_by_name(
    client: OneFuseClient,
    name: str,
    *,
    endpoint_type: str = MICROSOFT_ENDPOINT_TYPE,
    timeout: Optional[float] = None,
) -> MicrosoftEndpoint:
    """
    Look up an endpoint with 'filter=name:<name>;type:<endpoint_type>'.
    The first match wins; an empty result raises ResourceNotFoundError.
    """
    operation = "get_microsoft_endpoint_by_name"
    require_capability(
        MODULE_ENDPOINT_RESOURCE_TYPE, Capability.LOOKUP, operation=operation
    )
    require_text(name, operation=operation, field="name")

    url = collection_url(client.context, MODULE_ENDPOINT_RESOURCE_TYPE)
    payload = client.get(
        url,
        params={"filter": f"name:{name};type:{endpoint_type}"},
        operation=operation,
        timeout=timeout,
    )
    items = embedded_items(payload, MODULE_ENDPOINT_RESOURCE_TYPE)
    if not items:
        raise ResourceNotFoundError(
            f"{operation}: no {endpoint_type} endpoint named '{name}' at {url}",
            query=name,
            resource_type=MODULE_ENDPOINT_RESOURCE_TYPE,
        )
    return _bind_links(decode_record(MicrosoftEndpoint, items[0], operation=operation))


def _reject_write(capability: Capability, operation: str) -> NoReturn:
    require_capability(MODULE_ENDPOINT_RESOURCE_TYPE, capability, operation=operation)
    # granted in CAPABILITIES but no write path exists for endpoints
    raise UnsupportedOperationError(
        operation=operation, resource_type=MODULE_ENDPOINT_RESOURCE_TYPE
    )


def create_microsoft_endpoint(
    client: OneFuseClient, endpoint: MicrosoftEndpoint | Dict[str, Any]
) -> MicrosoftEndpoint:
    _reject_write(Capability.CREATE, "create_microsoft_endpoint")


def update_microsoft_endpoint(
    client: OneFuseClient,
    endpoint_id: int,
    endpoint: MicrosoftEndpoint | Dict[str, Any],
) -> MicrosoftEndpoint:
    _reject_write(Capability.UPDATE, "update_microsoft_endpoint")


def delete_microsoft_endpoint(client: OneFuseClient, endpoint_id: int) -> None:
    _reject_write(Capability.DELETE, "delete_microsoft_endpoint")


__all__ = [
    "MICROSOFT_ENDPOINT_TYPE",
    "get_microsoft_endpoint",
    "get_microsoft_endpoint_by_name",
    "create_microsoft_endpoint",
    "update_microsoft_endpoint",
    "delete_microsoft_endpoint",
]

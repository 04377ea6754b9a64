from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from onefuse_client.core.capabilities import Capability, require_capability
from onefuse_client.core.client import OneFuseClient
from onefuse_client.core.codec import encode_payload
from onefuse_client.core.errors import OneFuseValidationError
from onefuse_client.core.models import CustomName, CustomNamePayload
from onefuse_client.core.resources._validation import require_id
from onefuse_client.core.resources.workspaces import resolve_workspace_id
from onefuse_client.core.urls import (
    NAMING_POLICY_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
    collection_url,
    item_url,
    reference_path,
)

log = logging.getLogger("onefuse_client.resources.custom_names")


def generate_custom_name(
    client: OneFuseClient,
    naming_policy_id: int | str,
    *,
    workspace_id: Optional[int | str] = None,
    template_properties: Optional[Dict[str, Any]] = None,
    timeout: Optional[float] = None,
) -> CustomName:
    """
    Reserve a name from a naming policy.

    When workspace_id is left out the Default workspace is looked up first,
    so the call costs two round trips instead of one.
    """
    operation = "generate_custom_name"
    require_capability(NAMING_RESOURCE_TYPE, Capability.CREATE, operation=operation)
    if naming_policy_id is None or str(naming_policy_id).strip() == "":
        raise OneFuseValidationError(
            "a naming policy id is required",
            operation=operation,
            fields=("naming_policy_id",),
        )

    workspace = resolve_workspace_id(
        client, workspace_id, operation=operation, timeout=timeout
    )
    body = CustomNamePayload(
        naming_policy=reference_path(
            NAMING_POLICY_RESOURCE_TYPE, str(naming_policy_id).strip()
        ),
        template_properties=dict(template_properties or {}),
        workspace=reference_path(WORKSPACE_RESOURCE_TYPE, workspace),
    )

    url = collection_url(client.context, NAMING_RESOURCE_TYPE)
    log.info("reserving custom name from %s", url)
    name = client.request_model(
        CustomName,
        "POST",
        url,
        content=encode_payload(body),
        operation=operation,
        timeout=timeout,
    )
    log.info(
        "custom name reserved: custom_name_id=%s name=%s dnsSuffix=%s",
        name.id,
        name.name,
        name.dns_suffix,
    )
    return name


def get_custom_name(
    client: OneFuseClient, custom_name_id: int, *, timeout: Optional[float] = None
) -> CustomName:
    operation = "get_custom_name"
    require_capability(NAMING_RESOURCE_TYPE, Capability.READ, operation=operation)
    require_id(custom_name_id, operation=operation)
    return client.request_model(
        CustomName,
        "GET",
        item_url(client.context, NAMING_RESOURCE_TYPE, custom_name_id),
        operation=operation,
        timeout=timeout,
    )


def delete_custom_name(
    client: OneFuseClient, custom_name_id: int, *, timeout: Optional[float] = None
) -> None:
    operation = "delete_custom_name"
    require_capability(NAMING_RESOURCE_TYPE, Capability.DELETE, operation=operation)
    require_id(custom_name_id, operation=operation)
    client.delete(
        item_url(client.context, NAMING_RESOURCE_TYPE, custom_name_id),
        operation=operation,
        timeout=timeout,
    )


__all__ = ["generate_custom_name", "get_custom_name", "delete_custom_name"]

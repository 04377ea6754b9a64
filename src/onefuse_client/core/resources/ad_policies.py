"""
Microsoft AD policies (directory-join policies).

Every policy sent to the server references exactly one workspace and one
Microsoft endpoint. A missing workspace is filled in with the Default one
before the payload is built.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from onefuse_client.core.capabilities import Capability, require_capability
from onefuse_client.core.client import OneFuseClient
from onefuse_client.core.codec import decode_record, encode_payload
from onefuse_client.core.errors import OneFuseValidationError
from onefuse_client.core.models import (
    MicrosoftADPolicy,
    MicrosoftADPolicyInput,
    MicrosoftADPolicyPayload,
)
from onefuse_client.core.resources._validation import require_id, require_text
from onefuse_client.core.resources.workspaces import resolve_workspace_id
from onefuse_client.core.urls import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    MODULE_ENDPOINT_RESOURCE_TYPE,
    WORKSPACE_RESOURCE_TYPE,
    collection_url,
    item_url,
    reference_path,
)

log = logging.getLogger("onefuse_client.resources.ad_policies")


def _bind_links(policy: MicrosoftADPolicy) -> MicrosoftADPolicy:
    """Surface the workspace and endpoint relations as plain ids."""
    return policy.model_copy(
        update={
            "workspace_id": policy.link_id("workspace"),
            "microsoft_endpoint_id": policy.link_id("microsoftEndpoint"),
        }
    )


def _to_payload(
    policy: MicrosoftADPolicyInput, *, workspace_id: int
) -> MicrosoftADPolicyPayload:
    endpoint = ""
    if policy.microsoft_endpoint_id:
        endpoint = reference_path(
            MODULE_ENDPOINT_RESOURCE_TYPE, policy.microsoft_endpoint_id
        )
    return MicrosoftADPolicyPayload(
        name=policy.name,
        description=policy.description,
        microsoft_endpoint=endpoint,
        computer_name_letter_case=policy.computer_name_letter_case,
        ou=policy.ou,
        workspace=reference_path(WORKSPACE_RESOURCE_TYPE, workspace_id),
    )


def _coerce_input(
    policy: MicrosoftADPolicyInput | Dict[str, Any], *, operation: str
) -> MicrosoftADPolicyInput:
    if isinstance(policy, MicrosoftADPolicyInput):
        return policy
    try:
        return MicrosoftADPolicyInput.model_validate(policy)
    except ValidationError as exc:
        raise OneFuseValidationError(
            f"invalid policy fields: {exc}", operation=operation
        ) from exc


def _send(
    client: OneFuseClient,
    method: str,
    url: str,
    body: MicrosoftADPolicyPayload,
    *,
    operation: str,
    timeout: Optional[float],
) -> MicrosoftADPolicy:
    payload = client.request(
        method,
        url,
        content=encode_payload(body),
        operation=operation,
        timeout=timeout,
    )
    policy = _bind_links(
        decode_record(MicrosoftADPolicy, payload, operation=operation)
    )
    log.debug("%s: id=%s name=%s", operation, policy.id, policy.name)
    return policy


def create_microsoft_ad_policy(
    client: OneFuseClient,
    policy: MicrosoftADPolicyInput | Dict[str, Any],
    *,
    timeout: Optional[float] = None,
) -> MicrosoftADPolicy:
    """
    POST a new policy to /api/v3/onefuse/microsoftADPolicies/.
    Requires a name and a microsoft_endpoint_id; workspace_id is optional.
    """
    operation = "create_microsoft_ad_policy"
    require_capability(
        MICROSOFT_AD_POLICY_RESOURCE_TYPE, Capability.CREATE, operation=operation
    )
    policy = _coerce_input(policy, operation=operation)
    require_text(policy.name, operation=operation, field="name")
    if not policy.microsoft_endpoint_id:
        raise OneFuseValidationError(
            "a microsoft_endpoint_id is required",
            operation=operation,
            fields=("microsoft_endpoint_id",),
        )

    workspace_id = resolve_workspace_id(
        client, policy.workspace_id, operation=operation, timeout=timeout
    )
    return _send(
        client,
        "POST",
        collection_url(client.context, MICROSOFT_AD_POLICY_RESOURCE_TYPE),
        _to_payload(policy, workspace_id=workspace_id),
        operation=operation,
        timeout=timeout,
    )


def get_microsoft_ad_policy(
    client: OneFuseClient, policy_id: int, *, timeout: Optional[float] = None
) -> MicrosoftADPolicy:
    operation = "get_microsoft_ad_policy"
    require_capability(
        MICROSOFT_AD_POLICY_RESOURCE_TYPE, Capability.READ, operation=operation
    )
    require_id(policy_id, operation=operation)
    payload = client.get(
        item_url(client.context, MICROSOFT_AD_POLICY_RESOURCE_TYPE, policy_id),
        operation=operation,
        timeout=timeout,
    )
    return _bind_links(decode_record(MicrosoftADPolicy, payload, operation=operation))


def update_microsoft_ad_policy(
    client: OneFuseClient,
    policy_id: int,
    policy: MicrosoftADPolicyInput | Dict[str, Any],
    *,
    timeout: Optional[float] = None,
) -> MicrosoftADPolicy:
    """
    PUT the policy to its item URL.
    An empty name fails before any request (including the Default workspace
    lookup) is issued.
    """
    operation = "update_microsoft_ad_policy"
    require_capability(
        MICROSOFT_AD_POLICY_RESOURCE_TYPE, Capability.UPDATE, operation=operation
    )
    require_id(policy_id, operation=operation)
    policy = _coerce_input(policy, operation=operation)
    require_text(policy.name, operation=operation, field="name")

    workspace_id = resolve_workspace_id(
        client, policy.workspace_id, operation=operation, timeout=timeout
    )
    return _send(
        client,
        "PUT",
        item_url(client.context, MICROSOFT_AD_POLICY_RESOURCE_TYPE, policy_id),
        _to_payload(policy, workspace_id=workspace_id),
        operation=operation,
        timeout=timeout,
    )


def delete_microsoft_ad_policy(
    client: OneFuseClient, policy_id: int, *, timeout: Optional[float] = None
) -> None:
    operation = "delete_microsoft_ad_policy"
    require_capability(
        MICROSOFT_AD_POLICY_RESOURCE_TYPE, Capability.DELETE, operation=operation
    )
    require_id(policy_id, operation=operation)
    client.delete(
        item_url(client.context, MICROSOFT_AD_POLICY_RESOURCE_TYPE, policy_id),
        operation=operation,
        timeout=timeout,
    )


__all__ = [
    "create_microsoft_ad_policy",
    "get_microsoft_ad_policy",
    "update_microsoft_ad_policy",
    "delete_microsoft_ad_policy",
]

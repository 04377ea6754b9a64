from __future__ import annotations

import logging
from typing import List, Optional

from onefuse_client.core.client import OneFuseClient
from onefuse_client.core.codec import decode_record
from onefuse_client.core.errors import (
    DefaultWorkspaceNotFoundError,
    OneFuseDecodeError,
    OneFuseValidationError,
)
from onefuse_client.core.hal import embedded_items
from onefuse_client.core.models import Workspace
from onefuse_client.core.urls import WORKSPACE_RESOURCE_TYPE, collection_url

DEFAULT_WORKSPACE_NAME = "Default"

log = logging.getLogger("onefuse_client.resources.workspaces")


def list_workspaces(
    client: OneFuseClient,
    *,
    name: str,
    exact: bool = True,
    timeout: Optional[float] = None,
) -> List[Workspace]:
    """
    List workspaces matching a name filter ('name.exact:<name>' or 'name:<name>').
    Only the first page the server returns is read.
    """
    field = "name.exact" if exact else "name"
    payload = client.get(
        collection_url(client.context, WORKSPACE_RESOURCE_TYPE),
        params={"filter": f"{field}:{name}"},
        operation="list_workspaces",
        timeout=timeout,
    )
    return [
        decode_record(Workspace, item, operation="list_workspaces")
        for item in embedded_items(payload, WORKSPACE_RESOURCE_TYPE)
    ]


def find_workspace_by_name(
    client: OneFuseClient, name: str, *, timeout: Optional[float] = None
) -> Optional[Workspace]:
    """First workspace whose name matches exactly, or None."""
    workspaces = list_workspaces(client, name=name, exact=True, timeout=timeout)
    return workspaces[0] if workspaces else None


def find_default_workspace_id(
    client: OneFuseClient, *, timeout: Optional[float] = None
) -> int:
    """
    Resolve the ID of the workspace named "Default".

    Raises DefaultWorkspaceNotFoundError when the filtered list is empty, so
    callers can report it as a configuration problem.
    """
    workspace = find_workspace_by_name(client, DEFAULT_WORKSPACE_NAME, timeout=timeout)
    if workspace is None:
        raise DefaultWorkspaceNotFoundError(
            "Unable to find default workspace: no workspace named "
            f"'{DEFAULT_WORKSPACE_NAME}' at "
            f"{collection_url(client.context, WORKSPACE_RESOURCE_TYPE)}",
            query=DEFAULT_WORKSPACE_NAME,
        )
    if workspace.id <= 0:
        raise OneFuseDecodeError(
            "find_default_workspace_id: default workspace record has no usable id"
        )
    log.debug("default workspace resolved: id=%s", workspace.id)
    return workspace.id


def resolve_workspace_id(
    client: OneFuseClient,
    workspace_id: Optional[int | str],
    *,
    operation: str,
    timeout: Optional[float] = None,
) -> int:
    """Return the caller's workspace, or the Default one when it was left out."""
    if workspace_id is None or str(workspace_id).strip() == "":
        return find_default_workspace_id(client, timeout=timeout)

    raw = str(workspace_id).strip()
    if not (raw.isascii() and raw.isdigit()):
        raise OneFuseValidationError(
            f"workspace_id must be a numeric id, got {workspace_id!r}",
            operation=operation,
            fields=("workspace_id",),
        )
    return int(raw)


__all__ = [
    "DEFAULT_WORKSPACE_NAME",
    "list_workspaces",
    "find_workspace_by_name",
    "find_default_workspace_id",
    "resolve_workspace_id",
]

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from . import resources
from .capabilities import Capability, supports
from .client import OneFuseClient
from .config import ConnectionContext
from .models import (
    CustomName,
    MicrosoftADPolicy,
    MicrosoftADPolicyInput,
    MicrosoftEndpoint,
    Workspace,
)


class OneFuseAPIClient:
    """
    Typed CRUD surface over the OneFuse API, one group of methods per
    resource kind. Holds no state besides the immutable ConnectionContext and
    the pooled HTTP client; reuse it for sequential calls and close it (or use
    it as a context manager) when done.
    """

    def __init__(
        self,
        context: ConnectionContext,
        *,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
    ):
        self.client = OneFuseClient(
            context, timeout_seconds=timeout_seconds, logger=logger, http=http
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> "OneFuseAPIClient":
        return cls(ConnectionContext.from_env(), **kwargs)

    @property
    def context(self) -> ConnectionContext:
        return self.client.context

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "OneFuseAPIClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def supports(resource_type: str, capability: Capability) -> bool:
        return supports(resource_type, capability)

    # --- Workspaces ---

    def find_default_workspace_id(self, *, timeout: Optional[float] = None) -> int:
        return resources.find_default_workspace_id(self.client, timeout=timeout)

    def find_workspace_by_name(
        self, name: str, *, timeout: Optional[float] = None
    ) -> Optional[Workspace]:
        return resources.find_workspace_by_name(self.client, name, timeout=timeout)

    # --- Custom names ---

    def generate_custom_name(
        self,
        naming_policy_id: int | str,
        *,
        workspace_id: Optional[int | str] = None,
        template_properties: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CustomName:
        return resources.generate_custom_name(
            self.client,
            naming_policy_id,
            workspace_id=workspace_id,
            template_properties=template_properties,
            timeout=timeout,
        )

    def get_custom_name(
        self, custom_name_id: int, *, timeout: Optional[float] = None
    ) -> CustomName:
        return resources.get_custom_name(self.client, custom_name_id, timeout=timeout)

    def delete_custom_name(
        self, custom_name_id: int, *, timeout: Optional[float] = None
    ) -> None:
        resources.delete_custom_name(self.client, custom_name_id, timeout=timeout)

    # --- Microsoft AD policies ---

    def create_microsoft_ad_policy(
        self,
        policy: MicrosoftADPolicyInput | Dict[str, Any],
        *,
        timeout: Optional[float] = None,
    ) -> MicrosoftADPolicy:
        return resources.create_microsoft_ad_policy(
            self.client, policy, timeout=timeout
        )

    def get_microsoft_ad_policy(
        self, policy_id: int, *, timeout: Optional[float] = None
    ) -> MicrosoftADPolicy:
        return resources.get_microsoft_ad_policy(
            self.client, policy_id, timeout=timeout
        )

    def update_microsoft_ad_policy(
        self,
        policy_id: int,
        policy: MicrosoftADPolicyInput | Dict[str, Any],
        *,
        timeout: Optional[float] = None,
    ) -> MicrosoftADPolicy:
        return resources.update_microsoft_ad_policy(
            self.client, policy_id, policy, timeout=timeout
        )

    def delete_microsoft_ad_policy(
        self, policy_id: int, *, timeout: Optional[float] = None
    ) -> None:
        resources.delete_microsoft_ad_policy(self.client, policy_id, timeout=timeout)

    # --- Microsoft endpoints ---

    def get_microsoft_endpoint(
        self, endpoint_id: int, *, timeout: Optional[float] = None
    ) -> MicrosoftEndpoint:
        return resources.get_microsoft_endpoint(
            self.client, endpoint_id, timeout=timeout
        )

    def get_microsoft_endpoint_by_name(
        self,
        name: str,
        *,
        endpoint_type: str = resources.MICROSOFT_ENDPOINT_TYPE,
        timeout: Optional[float] = None,
    ) -> MicrosoftEndpoint:
        return resources.get_microsoft_endpoint_by_name(
            self.client, name, endpoint_type=endpoint_type, timeout=timeout
        )

    def create_microsoft_endpoint(
        self, endpoint: MicrosoftEndpoint | Dict[str, Any]
    ) -> MicrosoftEndpoint:
        return resources.create_microsoft_endpoint(self.client, endpoint)

    def update_microsoft_endpoint(
        self, endpoint_id: int, endpoint: MicrosoftEndpoint | Dict[str, Any]
    ) -> MicrosoftEndpoint:
        return resources.update_microsoft_endpoint(self.client, endpoint_id, endpoint)

    def delete_microsoft_endpoint(self, endpoint_id: int) -> None:
        resources.delete_microsoft_endpoint(self.client, endpoint_id)


def create_client_from_env(**kwargs: Any) -> OneFuseAPIClient:
    """Create a OneFuseAPIClient from ONEFUSE_* environment variables."""
    return OneFuseAPIClient.from_env(**kwargs)


__all__ = ["OneFuseAPIClient", "create_client_from_env"]

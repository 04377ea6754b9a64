"""
Wire mappings for OneFuse resources.

Each resource kind has one declarative pydantic model; field aliases are the
JSON keys used on the wire. Record models decode server responses, payload
models encode request bodies.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)

from . import hal


class Link(BaseModel):
    href: str
    title: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class BaseHALModel(BaseModel):
    """
    Base record that handles HAL+JSON patterns.

    Every field has a zero-value default and a field that fails to parse is
    reset to it, so a partially mismatched body still decodes. Only a body
    that is not a JSON object at all is a decode failure (see codec).
    """

    links: Dict[str, Any] = Field(default_factory=dict, alias="_links")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="wrap")
    @classmethod
    def _zero_on_mismatch(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            field = cls.model_fields[info.field_name]
            return field.get_default(call_default_factory=True)

    def link(self, rel: str) -> Optional[Link]:
        raw = hal.get_link({"_links": self.links}, rel)
        if raw is None or not isinstance(raw.get("href"), str):
            return None
        return Link.model_validate(raw)

    def link_href(self, rel: str) -> Optional[str]:
        return hal.get_link_href({"_links": self.links}, rel)

    def link_id(self, rel: str) -> Optional[int]:
        return hal.link_id({"_links": self.links}, rel)

    @property
    def self_href(self) -> Optional[str]:
        return self.link_href("self")


# --- Records (decoded responses) ---


class Workspace(BaseHALModel):
    id: int = 0
    name: str = ""


class CustomName(BaseHALModel):
    id: int = 0
    version: int = 0
    name: str = ""
    dns_suffix: str = Field(default="", alias="dnsSuffix")


class MicrosoftEndpoint(BaseHALModel):
    id: int = 0
    type: str = ""
    name: str = ""
    description: str = ""
    host: str = ""
    port: int = 0
    ssl: bool = False
    microsoft_version: int = Field(default=0, alias="microsoftVersion")

    # Resolved from _links by the endpoint resource functions
    workspace_id: Optional[int] = Field(default=None, exclude=True)
    credential_id: Optional[int] = Field(default=None, exclude=True)


class MicrosoftADPolicy(BaseHALModel):
    id: int = 0
    name: str = ""
    description: str = ""
    computer_name_letter_case: str = Field(default="", alias="computerNameLetterCase")
    ou: str = ""

    # Resolved from _links by the policy resource functions
    workspace_id: Optional[int] = Field(default=None, exclude=True)
    microsoft_endpoint_id: Optional[int] = Field(default=None, exclude=True)


# --- Input Models (caller intents) ---


class MicrosoftADPolicyInput(BaseModel):
    """
    What a caller supplies to create or update a Microsoft AD policy.
    workspace_id may be left out; the Default workspace is used then.
    """

    name: str = ""
    description: str = ""
    microsoft_endpoint_id: Optional[int] = None
    computer_name_letter_case: str = ""
    ou: str = ""
    workspace_id: Optional[int | str] = None

    model_config = ConfigDict(extra="forbid")


# --- Payload Models (encoded request bodies) ---


class MicrosoftADPolicyPayload(BaseModel):
    name: str = ""
    description: str = ""
    microsoft_endpoint: str = Field(default="", alias="microsoftEndpoint")
    computer_name_letter_case: str = Field(default="", alias="computerNameLetterCase")
    ou: str = ""
    workspace: str = ""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class CustomNamePayload(BaseModel):
    naming_policy: str = Field(alias="namingPolicy")
    template_properties: Dict[str, Any] = Field(alias="templateProperties")
    workspace: str

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


__all__ = [
    "Link",
    "BaseHALModel",
    "Workspace",
    "CustomName",
    "MicrosoftEndpoint",
    "MicrosoftADPolicy",
    "MicrosoftADPolicyInput",
    "MicrosoftADPolicyPayload",
    "CustomNamePayload",
]

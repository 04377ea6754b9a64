"""Core surface for onefuse-client."""

from .api import OneFuseAPIClient, create_client_from_env
from .capabilities import CAPABILITIES, Capability, require_capability, supports
from .client import CLIENT_SOURCE, OneFuseClient
from .codec import decode_json, decode_record, encode_payload
from .config import ConnectionContext, MissingConnectionSettingError, load_env_config
from .errors import (
    DefaultWorkspaceNotFoundError,
    LinkResolutionError,
    OneFuseClientError,
    OneFuseDecodeError,
    OneFuseHTTPClientError,
    OneFuseHTTPError,
    OneFuseHTTPServerError,
    OneFuseTransportError,
    OneFuseValidationError,
    ResolutionError,
    ResourceNotFoundError,
    UnsupportedOperationError,
)
from .hal import (
    embedded_items,
    get_embedded,
    get_link,
    get_link_href,
    get_link_title,
    link_id,
    parse_id_from_href,
)
from .models import (
    CustomName,
    Link,
    MicrosoftADPolicy,
    MicrosoftADPolicyInput,
    MicrosoftEndpoint,
    Workspace,
)
from .responses import Classification, Verdict, classify_response
from .urls import collection_url, item_url, reference_path

__all__ = [
    # Facade / client
    "OneFuseAPIClient",
    "OneFuseClient",
    "CLIENT_SOURCE",
    "create_client_from_env",
    # Config
    "ConnectionContext",
    "MissingConnectionSettingError",
    "load_env_config",
    # Capabilities
    "Capability",
    "CAPABILITIES",
    "supports",
    "require_capability",
    # Exceptions
    "OneFuseClientError",
    "OneFuseTransportError",
    "OneFuseHTTPError",
    "OneFuseHTTPClientError",
    "OneFuseHTTPServerError",
    "OneFuseDecodeError",
    "OneFuseValidationError",
    "LinkResolutionError",
    "ResolutionError",
    "DefaultWorkspaceNotFoundError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    # HAL utilities
    "get_link",
    "get_link_href",
    "get_link_title",
    "get_embedded",
    "embedded_items",
    "parse_id_from_href",
    "link_id",
    # Codec / models
    "encode_payload",
    "decode_json",
    "decode_record",
    "Link",
    "Workspace",
    "CustomName",
    "MicrosoftEndpoint",
    "MicrosoftADPolicy",
    "MicrosoftADPolicyInput",
    # Responses / URLs
    "Verdict",
    "Classification",
    "classify_response",
    "collection_url",
    "item_url",
    "reference_path",
]

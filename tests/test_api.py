import json

import pytest
import respx
from httpx import Response
from onefuse_client import OneFuseAPIClient
from onefuse_client.core.capabilities import Capability
from onefuse_client.core.errors import UnsupportedOperationError
from onefuse_client.core.urls import (
    MICROSOFT_AD_POLICY_RESOURCE_TYPE,
    NAMING_RESOURCE_TYPE,
)

BASE = "https://onefuse.example.com:8443/api/v3/onefuse"


@pytest.fixture
def api(context):
    return OneFuseAPIClient(context)


def test_supports_reflects_capability_table(api):
    assert api.supports(MICROSOFT_AD_POLICY_RESOURCE_TYPE, Capability.CRUD)
    assert api.supports(NAMING_RESOURCE_TYPE, Capability.CREATE)
    assert not api.supports(NAMING_RESOURCE_TYPE, Capability.UPDATE)
    assert not api.supports("unknownThings", Capability.READ)


@respx.mock
def test_facade_create_read_delete_policy(api, load_fixture):
    respx.get(f"{BASE}/workspaces/").mock(
        return_value=Response(200, json=load_fixture("workspace_list.json"))
    )
    create = respx.post(f"{BASE}/microsoftADPolicies/").mock(
        return_value=Response(201, json=load_fixture("microsoft_ad_policy.json"))
    )
    respx.get(f"{BASE}/microsoftADPolicies/7/").mock(
        return_value=Response(200, json=load_fixture("microsoft_ad_policy.json"))
    )
    delete = respx.delete(f"{BASE}/microsoftADPolicies/7/").mock(
        return_value=Response(204)
    )

    with api:
        created = api.create_microsoft_ad_policy(
            {
                "name": "prod-ad",
                "microsoft_endpoint_id": 42,
                "computer_name_letter_case": "Lowercase",
            }
        )
        read = api.get_microsoft_ad_policy(created.id)
        api.delete_microsoft_ad_policy(read.id)

    assert json.loads(create.calls[0].request.content)["workspace"] == (
        "/api/v3/onefuse/workspaces/2/"
    )
    assert read.microsoft_endpoint_id == 42
    assert delete.called


@respx.mock
def test_facade_custom_name_lifecycle(api, load_fixture):
    respx.post(f"{BASE}/customNames/").mock(
        return_value=Response(201, json=load_fixture("custom_name.json"))
    )
    respx.get(f"{BASE}/customNames/31/").mock(
        return_value=Response(200, json=load_fixture("custom_name.json"))
    )
    respx.delete(f"{BASE}/customNames/31/").mock(return_value=Response(204))

    with api:
        reserved = api.generate_custom_name(9, workspace_id=2)
        fetched = api.get_custom_name(reserved.id)
        api.delete_custom_name(fetched.id)

    assert fetched.dns_suffix == "corp.example.com"


@respx.mock
def test_facade_endpoint_lookup_and_default_workspace(api, load_fixture):
    respx.get(f"{BASE}/endpoints/").mock(
        return_value=Response(200, json=load_fixture("endpoint_list.json"))
    )
    respx.get(f"{BASE}/workspaces/").mock(
        return_value=Response(200, json=load_fixture("workspace_list.json"))
    )

    with api:
        endpoint = api.get_microsoft_endpoint_by_name("corp-dc01")
        workspace_id = api.find_default_workspace_id()
        workspace = api.find_workspace_by_name("Default")

    assert endpoint.id == 42
    assert workspace_id == 2
    assert workspace.name == "Default"


def test_facade_endpoint_mutations_unsupported(api):
    with api:
        with pytest.raises(UnsupportedOperationError):
            api.create_microsoft_endpoint({"name": "x"})
        with pytest.raises(UnsupportedOperationError):
            api.update_microsoft_endpoint(1, {"name": "x"})
        with pytest.raises(UnsupportedOperationError):
            api.delete_microsoft_endpoint(1)


def test_facade_exposes_context(api, context):
    assert api.context is context
    api.close()

import json

import pytest
from onefuse_client.core.codec import decode_record, encode_payload
from onefuse_client.core.errors import OneFuseDecodeError
from onefuse_client.core.models import (
    CustomName,
    CustomNamePayload,
    MicrosoftADPolicy,
    MicrosoftADPolicyPayload,
    MicrosoftEndpoint,
    Workspace,
)


def test_microsoft_ad_policy_parses_fixture(load_fixture):
    policy = MicrosoftADPolicy.model_validate(load_fixture("microsoft_ad_policy.json"))

    assert policy.id == 7
    assert policy.name == "prod-ad"
    assert policy.description == "Production domain join"
    assert policy.computer_name_letter_case == "Lowercase"
    assert policy.ou == "OU=Servers,DC=corp,DC=example,DC=com"
    assert policy.link_id("workspace") == 2
    assert policy.link_id("microsoftEndpoint") == 42
    assert policy.link("microsoftEndpoint").title == "corp-dc01"
    assert policy.self_href == "/api/v3/onefuse/microsoftADPolicies/7/"


def test_microsoft_endpoint_parses_fixture(load_fixture):
    raw = load_fixture("endpoint_list.json")["_embedded"]["endpoints"][0]
    endpoint = MicrosoftEndpoint.model_validate(raw)

    assert endpoint.id == 42
    assert endpoint.type == "microsoft"
    assert endpoint.description == "Primary domain controller"
    assert endpoint.host == "dc01.corp.example.com"
    assert endpoint.port == 636
    assert endpoint.ssl is True
    assert endpoint.microsoft_version == 2016
    assert endpoint.link_id("credential") == 5


def test_custom_name_parses_fixture(load_fixture):
    name = CustomName.model_validate(load_fixture("custom_name.json"))

    assert name.id == 31
    assert name.version == 1
    assert name.name == "web-prd-001"
    assert name.dns_suffix == "corp.example.com"


def test_workspace_parses_fixture(load_fixture):
    raw = load_fixture("workspace_list.json")["_embedded"]["workspaces"][0]
    ws = Workspace.model_validate(raw)

    assert ws.id == 2
    assert ws.name == "Default"
    assert ws.self_href == "/api/v3/onefuse/workspaces/2/"


def test_mismatched_fields_fall_back_to_zero_values():
    policy = MicrosoftADPolicy.model_validate(
        {"id": "not-a-number", "name": "prod-ad", "ou": ["wrong"], "_links": "bad"}
    )

    assert policy.id == 0
    assert policy.name == "prod-ad"
    assert policy.ou == ""
    assert policy.links == {}


def test_decode_record_rejects_non_object_and_empty():
    with pytest.raises(OneFuseDecodeError):
        decode_record(MicrosoftADPolicy, ["prod-ad"], operation="get")
    with pytest.raises(OneFuseDecodeError) as exc:
        decode_record(MicrosoftADPolicy, {}, operation="create_microsoft_ad_policy")
    assert "create_microsoft_ad_policy" in str(exc.value)


def test_policy_payload_uses_wire_keys_and_omits_defaults():
    body = MicrosoftADPolicyPayload(
        name="prod-ad",
        microsoft_endpoint="/api/v3/onefuse/endpoints/42/",
        computer_name_letter_case="Uppercase",
        workspace="/api/v3/onefuse/workspaces/2/",
    )

    assert json.loads(encode_payload(body)) == {
        "name": "prod-ad",
        "microsoftEndpoint": "/api/v3/onefuse/endpoints/42/",
        "computerNameLetterCase": "Uppercase",
        "workspace": "/api/v3/onefuse/workspaces/2/",
    }


def test_policy_fixture_round_trips_through_payload(load_fixture):
    raw = load_fixture("microsoft_ad_policy.json")
    policy = MicrosoftADPolicy.model_validate(raw)
    body = MicrosoftADPolicyPayload(
        name=policy.name,
        description=policy.description,
        computer_name_letter_case=policy.computer_name_letter_case,
        ou=policy.ou,
        microsoft_endpoint=policy.link_href("microsoftEndpoint"),
        workspace=policy.link_href("workspace"),
    )

    encoded = json.loads(encode_payload(body))

    for key in ("name", "description", "computerNameLetterCase", "ou"):
        assert encoded[key] == raw[key]
    assert encoded["microsoftEndpoint"] == raw["_links"]["microsoftEndpoint"]["href"]
    assert encoded["workspace"] == raw["_links"]["workspace"]["href"]


def test_custom_name_payload_always_sends_template_properties():
    body = CustomNamePayload(
        naming_policy="/api/v3/onefuse/namingPolicies/9/",
        template_properties={},
        workspace="/api/v3/onefuse/workspaces/2/",
    )

    assert json.loads(encode_payload(body)) == {
        "namingPolicy": "/api/v3/onefuse/namingPolicies/9/",
        "templateProperties": {},
        "workspace": "/api/v3/onefuse/workspaces/2/",
    }


def test_resolved_ids_are_not_serialized():
    policy = MicrosoftADPolicy(id=7, name="x", workspace_id=2)
    dumped = policy.model_dump(by_alias=True)
    assert "workspace_id" not in dumped
    assert "microsoft_endpoint_id" not in dumped

import pytest
import respx
from httpx import Response
from onefuse_client.core.client import OneFuseClient
from onefuse_client.core.errors import (
    DefaultWorkspaceNotFoundError,
    OneFuseDecodeError,
    OneFuseHTTPServerError,
    OneFuseValidationError,
    ResolutionError,
)
from onefuse_client.core.resources.workspaces import (
    find_default_workspace_id,
    find_workspace_by_name,
    list_workspaces,
    resolve_workspace_id,
)

WORKSPACES = "https://onefuse.example.com:8443/api/v3/onefuse/workspaces/"


@pytest.fixture
def client(context):
    return OneFuseClient(context)


@respx.mock
def test_find_default_workspace_id(client, load_fixture):
    route = respx.get(WORKSPACES).mock(
        return_value=Response(200, json=load_fixture("workspace_list.json"))
    )

    with client:
        assert find_default_workspace_id(client) == 2

    assert route.call_count == 1
    assert route.calls[0].request.url.params["filter"] == "name.exact:Default"


@respx.mock
def test_find_default_workspace_empty_collection(client):
    respx.get(WORKSPACES).mock(
        return_value=Response(200, json={"count": 0, "_embedded": {"workspaces": []}})
    )

    with client:
        with pytest.raises(DefaultWorkspaceNotFoundError) as exc:
            find_default_workspace_id(client)

    assert isinstance(exc.value, ResolutionError)
    assert exc.value.query == "Default"
    assert "Unable to find default workspace" in str(exc.value)


@respx.mock
def test_find_default_workspace_missing_embedded_block(client):
    respx.get(WORKSPACES).mock(return_value=Response(200, json={"count": 0}))

    with client:
        with pytest.raises(DefaultWorkspaceNotFoundError):
            find_default_workspace_id(client)


@respx.mock
def test_find_default_workspace_without_usable_id(client):
    respx.get(WORKSPACES).mock(
        return_value=Response(
            200, json={"_embedded": {"workspaces": [{"name": "Default"}]}}
        )
    )

    with client:
        with pytest.raises(OneFuseDecodeError):
            find_default_workspace_id(client)


@respx.mock
def test_find_default_workspace_server_error_propagates(client):
    respx.get(WORKSPACES).mock(return_value=Response(503, text="maintenance"))

    with client:
        with pytest.raises(OneFuseHTTPServerError) as exc:
            find_default_workspace_id(client)

    assert "maintenance" in str(exc.value)


@respx.mock
def test_list_workspaces_non_exact_filter(client):
    route = respx.get(WORKSPACES).mock(
        return_value=Response(
            200,
            json={
                "_embedded": {
                    "workspaces": [
                        {"id": 3, "name": "Team A"},
                        {"id": 4, "name": "Team B"},
                    ]
                }
            },
        )
    )

    with client:
        workspaces = list_workspaces(client, name="Team", exact=False)

    assert [w.id for w in workspaces] == [3, 4]
    assert route.calls[0].request.url.params["filter"] == "name:Team"


@respx.mock
def test_find_workspace_by_name_none_when_absent(client):
    respx.get(WORKSPACES).mock(
        return_value=Response(200, json={"_embedded": {"workspaces": []}})
    )

    with client:
        assert find_workspace_by_name(client, "Nope") is None


@respx.mock
def test_resolve_workspace_id_skips_lookup_when_supplied(client):
    route = respx.get(WORKSPACES).mock(return_value=Response(200, json={}))

    with client:
        assert resolve_workspace_id(client, "5", operation="op") == 5
        assert resolve_workspace_id(client, 6, operation="op") == 6

    assert not route.called


@respx.mock
def test_resolve_workspace_id_looks_up_default_when_blank(client, load_fixture):
    route = respx.get(WORKSPACES).mock(
        return_value=Response(200, json=load_fixture("workspace_list.json"))
    )

    with client:
        assert resolve_workspace_id(client, "", operation="op") == 2

    assert route.call_count == 1


@pytest.mark.parametrize("raw", ["Default", "\u00b2", "\u0664\u0662", "-5", "5.0"])
def test_resolve_workspace_id_rejects_non_numeric(client, raw):
    with pytest.raises(OneFuseValidationError) as exc:
        resolve_workspace_id(client, raw, operation="create_microsoft_ad_policy")

    assert exc.value.fields == ("workspace_id",)

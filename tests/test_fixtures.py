def test_fixtures_are_valid_json(load_fixture):
    """Ensure we can load our sample data."""
    workspaces = load_fixture("workspace_list.json")
    assert workspaces["_embedded"]["workspaces"][0]["name"] == "Default"

    endpoints = load_fixture("endpoint_list.json")
    assert len(endpoints["_embedded"]["endpoints"]) >= 1

    policy = load_fixture("microsoft_ad_policy.json")
    assert set(policy["_links"]) == {"self", "workspace", "microsoftEndpoint"}

    assert load_fixture("custom_name.json")["dnsSuffix"]

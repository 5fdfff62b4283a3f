import json

from spaceapi.record import build_space_record, split_channels


def _fill(store, **values):
    for key, value in values.items():
        store[f"test-section-{key}"] = value


def test_location_keys_are_nested(memory_registry, memory_store):
    _fill(memory_store, address="1 Main St", lat="1.0", lon="2.0")
    record = build_space_record(memory_registry)
    assert record == {"location": {"address": "1 Main St", "lat": "1.0", "lon": "2.0"}}


def test_full_record_keeps_registry_order(memory_registry, memory_store):
    _fill(
        memory_store,
        api="0.13", space="Test Space", logo="https://example.org/logo.png",
        url="https://example.org", address="1 Main St", lat="1.0", lon="2.0",
        issue_report_channels="email,irc",
    )
    record = build_space_record(memory_registry)
    assert list(record) == ["api", "space", "logo", "url", "location", "issue_report_channels"]
    assert record["issue_report_channels"] == ["email", "irc"]
    for key in ("address", "lat", "lon"):
        assert key not in record


def test_scenario_document(memory_registry, memory_store):
    _fill(
        memory_store,
        api="0.13", space="Test Space", address="1 Main St", lat="1.0", lon="2.0",
        issue_report_channels="email,irc",
    )
    assert json.dumps(build_space_record(memory_registry), separators=(",", ":")) == (
        '{"api":"0.13","space":"Test Space",'
        '"location":{"address":"1 Main St","lat":"1.0","lon":"2.0"},'
        '"issue_report_channels":["email","irc"]}'
    )


def test_single_channel_is_still_a_list(memory_registry, memory_store):
    _fill(memory_store, issue_report_channels="email")
    assert build_space_record(memory_registry) == {"issue_report_channels": ["email"]}


def test_empty_channels_give_empty_list(memory_registry, memory_store):
    _fill(memory_store, issue_report_channels="")
    assert build_space_record(memory_registry) == {"issue_report_channels": []}


def test_values_are_not_html_escaped(memory_registry, memory_store):
    _fill(memory_store, space="Bits & <Bytes>")
    assert build_space_record(memory_registry)["space"] == "Bits & <Bytes>"


def test_empty_store_gives_empty_document(memory_registry):
    assert build_space_record(memory_registry) == {}


def test_split_channels():
    assert split_channels("") == []
    assert split_channels(None) == []
    assert split_channels("a") == ["a"]
    assert split_channels("a,b,c") == ["a", "b", "c"]

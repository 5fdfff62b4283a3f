import pytest

from spaceapi.dispatch import JsonDocument, PassThrough, Redirect, dispatch


@pytest.fixture
def filled_registry(memory_registry, memory_store):
    memory_store.update({
        "test-section-api": "0.13",
        "test-section-space": "Test Space",
        "test-section-issue_report_channels": "email,irc",
    })
    return memory_registry


def test_absent_fragment_passes_through(filled_registry):
    assert isinstance(dispatch(None, filled_registry), PassThrough)


@pytest.mark.parametrize("fragment", ["", "/", "/index", "/v1"])
def test_empty_path_or_version_redirects(filled_registry, fragment):
    assert isinstance(dispatch(fragment, filled_registry), Redirect)


@pytest.mark.parametrize("version", ["v2", "V1", "v1.0", "v10", "1", "latest", " v1"])
def test_unknown_versions_redirect(filled_registry, version):
    assert isinstance(dispatch(f"{version}/index", filled_registry), Redirect)


@pytest.mark.parametrize("action", ["version", "name", "INDEX", "", "status"])
def test_unknown_actions_redirect(filled_registry, action):
    assert isinstance(dispatch(f"v1/{action}", filled_registry), Redirect)


def test_index_returns_document(filled_registry):
    outcome = dispatch("v1/index", filled_registry)
    assert isinstance(outcome, JsonDocument)
    assert outcome.payload == {
        "api": "0.13",
        "space": "Test Space",
        "issue_report_channels": ["email", "irc"],
    }


def test_missing_action_defaults_to_index(filled_registry):
    assert dispatch("v1", filled_registry) == dispatch("v1/index", filled_registry)


def test_extra_segments_are_ignored(filled_registry):
    assert dispatch("v1/index/extra", filled_registry) == dispatch("v1/index", filled_registry)


def test_redirect_reason_names_the_version(filled_registry):
    assert "v2" in dispatch("v2", filled_registry).reason

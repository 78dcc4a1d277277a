"""
Unit tests for env_loader and runtime_paths.
"""

import pytest

from ga_reports.services import env_loader
from ga_reports.services.runtime_paths import resolve_runtime_path


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run from an empty directory with no cached .env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(env_loader, "CANDIDATES", ["ga-reports-test.env"])
    monkeypatch.delenv("GA_VIEW_ID", raising=False)
    # load_dotenv writes into os.environ; make sure it is undone on teardown
    monkeypatch.setenv("GA_TEST_ONLY_KEY", "")
    monkeypatch.delenv("GA_TEST_ONLY_KEY")
    env_loader._load_env.cache_clear()
    yield
    env_loader._load_env.cache_clear()


def test_env_file_value_is_used(tmp_path, monkeypatch):
    (tmp_path / "ga-reports-test.env").write_text("GA_TEST_ONLY_KEY=from-file\n")

    assert env_loader.get_env_variable_value("GA_TEST_ONLY_KEY") == "from-file"
    assert env_loader.env_source_path() == str(tmp_path / "ga-reports-test.env")


def test_process_env_wins_over_file(tmp_path, monkeypatch):
    (tmp_path / "ga-reports-test.env").write_text("GA_TEST_ONLY_KEY=from-file\n")
    monkeypatch.setenv("GA_TEST_ONLY_KEY", "from-env")

    assert env_loader.get_env_variable_value("GA_TEST_ONLY_KEY") == "from-env"


def test_default_when_missing():
    assert env_loader.get_env_variable_value("GA_TEST_MISSING_KEY", "fallback") == "fallback"


def test_required_missing_raises():
    with pytest.raises(RuntimeError, match="GA_VIEW_ID"):
        env_loader.get_view_id()


def test_explicit_view_id_wins(monkeypatch):
    monkeypatch.setenv("GA_VIEW_ID", "from-env")
    assert env_loader.get_view_id("explicit") == "explicit"
    assert env_loader.get_view_id() == "from-env"


def test_resolve_runtime_path(tmp_path):
    (tmp_path / "resources").mkdir()
    key = tmp_path / "resources" / "key.json"
    key.write_text("{}")

    assert resolve_runtime_path("resources/key.json") == str(key)
    assert resolve_runtime_path(key) == str(key)
    assert resolve_runtime_path("resources/does-not-exist.json") is None

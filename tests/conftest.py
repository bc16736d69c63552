import json

import pytest

from config_store import open_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("FRIENDSVERIFIER_CONFIG", "FRIENDSVERIFIER_AUDIT_LOG", "FRIENDSVERIFIER_AUDIT_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "friendsverifier.json"


@pytest.fixture
def doc(config_path):
    return open_config(config_path)


@pytest.fixture
def english_config(config_path):
    """Config file pinned to English so CLI output is predictable."""
    config_path.write_text(json.dumps({"Users": "{}", "Language": "en-US"}), encoding="utf-8")
    return config_path

import importlib

import pytest

from gelato_tasks import config


@pytest.fixture
def reload_config(monkeypatch):
    # load_dotenv writes os.environ; setenv first so teardown removes what it adds
    for name in ("GELATO_NETWORK", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield lambda: importlib.reload(config)
    monkeypatch.undo()
    importlib.reload(config)


def test_dotenv_read_from_working_directory(tmp_path, monkeypatch, reload_config):
    (tmp_path / ".env").write_text("GELATO_NETWORK=kovan\nLOG_LEVEL=debug\n")
    monkeypatch.chdir(tmp_path)

    reload_config()

    assert config.DEFAULT_NETWORK == "kovan"
    assert config.LOG_LEVEL == "DEBUG"


def test_defaults_without_dotenv(tmp_path, monkeypatch, reload_config):
    monkeypatch.chdir(tmp_path)

    reload_config()

    assert config.DEFAULT_NETWORK == "rinkeby"
    assert config.LOG_LEVEL == "INFO"

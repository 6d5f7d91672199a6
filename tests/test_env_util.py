import pytest

from util import env_util


@pytest.fixture(autouse=True)
def no_dotenv(monkeypatch):
    monkeypatch.setattr(env_util, "load_dotenv", lambda: False)


def test_port_defaults_to_3000(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)

    assert env_util.get_port() == 3000


def test_blank_port_uses_default(monkeypatch):
    monkeypatch.setenv("PORT", "  ")

    assert env_util.get_port() == env_util.DEFAULT_PORT


def test_port_read_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")

    assert env_util.get_port() == 8080


@pytest.mark.parametrize("value", ["abc", "0", "70000", "-1", "80.5"])
def test_invalid_port_raises(monkeypatch, value):
    monkeypatch.setenv("PORT", value)

    with pytest.raises(RuntimeError) as exc_info:
        env_util.get_port()

    assert value in str(exc_info.value)


def test_app_uses_port_from_environment(monkeypatch):
    from app import create_app

    monkeypatch.setenv("PORT", "5050")

    assert create_app().state.port == 5050

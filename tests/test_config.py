from tlyrics import ClientConfig
from tlyrics.core.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


def test_defaults():
    config = ClientConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.request_headers()["User-Agent"].startswith("tlyrics/")


def test_trailing_slash_stripped():
    assert ClientConfig(base_url="https://lrclib.net/").base_url == "https://lrclib.net"


def test_from_env(monkeypatch):
    monkeypatch.setenv("TLYRICS_BASE_URL", "http://localhost:3000/")
    monkeypatch.setenv("TLYRICS_USER_AGENT", "ua/2")
    monkeypatch.setenv("TLYRICS_TIMEOUT", "2.5")

    config = ClientConfig.from_env()
    assert config.base_url == "http://localhost:3000"
    assert config.user_agent == "ua/2"
    assert config.timeout == 2.5


def test_from_env_bad_timeout_falls_back(monkeypatch):
    monkeypatch.delenv("TLYRICS_BASE_URL", raising=False)
    for raw in ("abc", "-1", "0"):
        monkeypatch.setenv("TLYRICS_TIMEOUT", raw)
        assert ClientConfig.from_env().timeout == DEFAULT_TIMEOUT


def test_user_agent_carries_package_version():
    import tlyrics
    from tlyrics.core import __version__

    assert tlyrics.__version__ == __version__
    assert ClientConfig().user_agent == f"tlyrics/{__version__}"

from strqueue.registry import QueueRegistry, get_registry
from strqueue.settings import ULONG_MAX, Settings
from strqueue.tracing import LogTracer, Tracer


def test_settings_defaults(monkeypatch):
    for key in ("DEBUG", "LOG_LEVEL", "MAX_HANDLE", "SYNCHRONIZED"):
        monkeypatch.delenv(f"STRQUEUE_{key}", raising=False)
    settings = Settings()
    assert settings.debug is False
    assert settings.log_level == "INFO"
    assert settings.max_handle == ULONG_MAX == 18446744073709551615
    assert settings.synchronized is False


def test_settings_env(monkeypatch):
    monkeypatch.setenv("STRQUEUE_DEBUG", "1")
    monkeypatch.setenv("STRQUEUE_SYNCHRONIZED", "true")
    monkeypatch.setenv("STRQUEUE_MAX_HANDLE", "10")
    settings = Settings()
    assert settings.debug is True
    assert settings.synchronized is True
    assert settings.max_handle == 10

    registry = get_registry()
    assert isinstance(registry.tracer, LogTracer)
    assert registry.max_handle == 10

    # explicit arguments win
    registry = QueueRegistry(tracer=Tracer(), max_handle=3)
    assert type(registry.tracer) is Tracer
    assert registry.max_handle == 3

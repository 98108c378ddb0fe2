import importlib
import importlib.metadata as metadata
import builtins
import io
import logging


def test_version_fallback(monkeypatch):
    # Force PackageNotFoundError
    monkeypatch.setattr(metadata, "version", lambda _: (_ for _ in ()).throw(metadata.PackageNotFoundError))

    # Fake pyproject.toml content
    fake_toml = b"[project]\nversion = '0.1.0'\n"
    monkeypatch.setattr(builtins, "open", lambda *_: io.BytesIO(fake_toml))

    # Reload the module so the fallback branch executes
    import quantypes
    importlib.reload(quantypes)

    assert quantypes.__version__ == "0.1.0"


def test_reload_keeps_a_single_null_handler():
    import quantypes
    importlib.reload(quantypes)
    importlib.reload(quantypes)

    handlers = logging.getLogger("quantypes").handlers
    assert sum(isinstance(h, logging.NullHandler) for h in handlers) == 1


def test_package_logger_has_null_handler():
    import quantypes

    handlers = logging.getLogger("quantypes").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
    assert quantypes.__license__ == "MIT"

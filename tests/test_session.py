import pytest
from sqlalchemy.exc import OperationalError

from adaptlearn.core.config import settings
from adaptlearn.db import session as session_module


@pytest.fixture(autouse=True)
def _restore_session_module():
    engine, factory = session_module.engine, session_module.SessionLocal
    yield
    session_module.engine, session_module.SessionLocal = engine, factory


def _fail_first_ping(monkeypatch):
    original = session_module._verify_database_connection
    calls = []

    def _verify(target):
        calls.append(str(target.url))
        if len(calls) == 1:
            raise OperationalError("SELECT 1", {}, Exception("unreachable"))
        original(target)

    monkeypatch.setattr(session_module, "_verify_database_connection", _verify)
    return calls


def test_sqlite_engine_is_configured(tmp_path):
    database_path = tmp_path / "local.db"

    session_module.configure_database(f"sqlite:///{database_path}")

    assert session_module.engine.url.drivername == "sqlite"
    assert session_module.engine.url.database.endswith("local.db")
    with session_module.SessionLocal() as db:
        assert db.bind is session_module.engine


def test_connection_error_triggers_sqlite_fallback(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    monkeypatch.delenv("DISABLE_SQLITE_FALLBACK", raising=False)
    monkeypatch.setattr(session_module, "SQLITE_FALLBACK_URL", f"sqlite:///{tmp_path / 'fallback.db'}")
    calls = _fail_first_ping(monkeypatch)

    session_module.configure_database(f"sqlite:///{tmp_path / 'primary.db'}")

    assert len(calls) == 2
    assert session_module.engine.url.database.endswith("fallback.db")


def test_fallback_can_be_disabled(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    monkeypatch.setenv("DISABLE_SQLITE_FALLBACK", "1")
    _fail_first_ping(monkeypatch)

    with pytest.raises(OperationalError):
        session_module.configure_database(f"sqlite:///{tmp_path / 'primary.db'}")


def test_no_fallback_outside_development(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    monkeypatch.delenv("DISABLE_SQLITE_FALLBACK", raising=False)
    _fail_first_ping(monkeypatch)

    with pytest.raises(OperationalError):
        session_module.configure_database(f"sqlite:///{tmp_path / 'primary.db'}")


def test_unreachable_database_fails_on_first_ping(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    missing_dir = tmp_path / "missing"

    with pytest.raises(OperationalError):
        session_module.configure_database(f"sqlite:///{missing_dir / 'primary.db'}")

    assert not hasattr(settings, "DATABASE_CONNECTION_MAX_RETRIES")

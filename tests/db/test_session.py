# tests/db/test_session.py
from sqlalchemy import inspect
from sqlalchemy.orm import Session

from devstreams.db.session import create_db_engine, create_session_factory, init_db


def test_init_db_creates_tables(tmp_path):
    db_path = tmp_path / "test.db"
    engine = init_db(create_db_engine(f"sqlite:///{db_path}"))

    assert db_path.exists()

    tables = inspect(engine).get_table_names()
    assert "StreamSessions" in tables
    assert "Channels" in tables
    engine.dispose()


def test_session_factory_binds_engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    factory = create_session_factory(engine)

    with factory() as session:
        assert isinstance(session, Session)
        assert session.get_bind() is engine
    engine.dispose()


def test_sqlite_engine_allows_cross_thread_use(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=True)

    assert engine.echo is True
    assert engine.dialect.name == "sqlite"
    engine.dispose()

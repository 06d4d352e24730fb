# tests/services/conftest.py
import pytest
from sqlalchemy.orm import sessionmaker

from tiredd_core.db.session import Base, build_engine


@pytest.fixture()
def file_sessions(tmp_path):
    """Sessions bound to a file-backed database shared across threads."""
    engine = build_engine(f"sqlite:///{tmp_path / 'store.db'}")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autocommit=False, autoflush=False)
    finally:
        engine.dispose()

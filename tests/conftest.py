import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="pms-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ.setdefault("RATE_LIMIT", "10000/minute")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from pms.db import Base, SessionLocal, engine  # noqa: E402
from pms.main import app  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

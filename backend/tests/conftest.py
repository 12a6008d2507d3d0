import os

# Use in-memory sqlite for tests; must be set before supercoach is imported
os.environ["DATABASE_URL"] = "sqlite+pysqlite:///:memory:"
os.environ["GEMINI_API_KEY"] = ""

import pytest  # noqa: E402


@pytest.fixture
def client():
    from fastapi.testclient import TestClient  # noqa: WPS433
    from supercoach.db import Base, engine  # noqa: WPS433
    from supercoach.main import app  # noqa: WPS433

    # Fresh tables per test
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    app.dependency_overrides.clear()
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

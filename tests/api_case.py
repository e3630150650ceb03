"""Base TestCase wiring the app to a fresh in-memory SQLite database per test."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from contactkeeper.core.database import get_db
from contactkeeper.main import app
from contactkeeper.models import Base


class ApiTestCase(unittest.TestCase):
    """Each test gets an empty schema; app.dependency_overrides points get_db at it."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(bind=self.engine)
        self.SessionTesting = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    def session(self) -> Session:
        return self.SessionTesting()

    def register(
        self,
        name: str = "Test User",
        email: str = "test@example.com",
        password: str = "testpass123",
    ) -> dict[str, Any]:
        response = self.client.post(
            "/api/user", json={"name": name, "email": email, "password": password}
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def auth_headers(self, **kwargs: str) -> dict[str, str]:
        token = self.register(**kwargs)["token"]
        return {"Authorization": f"Bearer {token}"}

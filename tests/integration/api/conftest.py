"""API test configuration and fixtures.

Each test gets a fresh application wired to its own SQLite file. The
lifespan runs for real (schema creation, role seeding); only the mailer
is replaced so reset links can be read back.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from authsrv.infrastructure.email import EmailService
from authsrv.presentation.api.app import create_app
from authsrv_config import Settings
from authsrv_identity import JWTService
from tests.shared.fixtures.api import JWT_SECRET
from tests.shared.fixtures.database import sqlite_url
from tests.shared.fixtures.factories import PROFILE_UPLOAD_URL


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        db_url=sqlite_url(tmp_path),
        jwt_secret_key=JWT_SECRET,
        profile_upload_url=PROFILE_UPLOAD_URL,
        upload_server_url=None,
        frontend_base_url="https://app.example.com",
    )


@pytest.fixture
def email_service():
    return MagicMock(spec=EmailService)


@pytest.fixture
def client(api_settings, email_service, fast_hashing):
    app = create_app(api_settings)
    with TestClient(app) as test_client:
        app.state.email_service = email_service
        yield test_client


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key=JWT_SECRET)


@pytest.fixture
def admin_headers(jwt_service):
    """Bearer header for an admin; the token alone grants the role."""
    token = jwt_service.create_access_token(account_id=9999, role_name="Admin")
    return {"Authorization": f"Bearer {token}"}

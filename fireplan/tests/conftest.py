from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from fireplan.app import create_app
from fireplan.config import Settings


@pytest.fixture()
def settings() -> Settings:
    return Settings(APP_ENV="testing", LOG_LEVEL="DEBUG", _env_file=None)


@pytest.fixture()
def client(settings: Settings) -> FlaskClient:
    app = create_app(settings)
    with app.test_client() as test_client:
        yield test_client

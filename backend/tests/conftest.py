"""
Pytest configuration and fixtures
"""
import uuid

import pytest
from flask_jwt_extended import create_access_token

from sitecanvas import create_app
from sitecanvas.application.sites.create_website import create_website
from sitecanvas.application.sites.publish_website import publish_website
from sitecanvas.components import get_registry
from sitecanvas.extensions import db as _db
import sitecanvas.models  # noqa: F401
from factories import make_pages


@pytest.fixture(scope="function")
def app():
    """Fresh app and in-memory schema per test"""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return _db.session


@pytest.fixture
def registry(app):
    return get_registry()


@pytest.fixture
def user_id():
    return str(uuid.uuid4())


@pytest.fixture
def auth_headers(app):
    def _headers(identity, role="owner"):
        token = create_access_token(identity=identity, additional_claims={"role": role})
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def make_website(session, user_id):
    def _make(subdomain="shop", name="Shop", owner=None):
        return create_website(
            user_id=owner or user_id,
            name=name,
            subdomain=subdomain,
            global_settings={"siteName": name},
            session=session,
        )
    return _make


@pytest.fixture
def publish(session, user_id):
    def _publish(website, pages=None, global_settings=None, **kwargs):
        return publish_website(
            website_id=website.id,
            pages=pages if pages is not None else make_pages(),
            global_settings=global_settings,
            actor_id=user_id,
            session=session,
            **kwargs,
        )
    return _publish

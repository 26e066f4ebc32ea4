import io
from contextlib import contextmanager

import pytest
from sqlalchemy.exc import OperationalError
from werkzeug.datastructures import FileStorage

from hotel_cms import create_app
from hotel_cms.extensions import db
from hotel_cms.models.admin import Admin
from hotel_cms.models.section import Section

ADMIN_USERNAME = "reception"
ADMIN_PASSWORD = "corintel-2024"


@pytest.fixture
def app(tmp_path):
    app = create_app("testing")
    app.config["MEDIA_ROOT"] = str(tmp_path / "media")

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def make_image():
    def _make(filename="photo.jpg", size=256, content_type="image/jpeg"):
        return FileStorage(
            stream=io.BytesIO(b"\x89" * size),
            filename=filename,
            content_type=content_type,
        )
    return _make


@pytest.fixture
def make_section(app):
    """Insert a section with explicit flags, bypassing the template catalog."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        section = Section()
        section.code = overrides.pop("code", f"test_section_{counter['n']}")
        section.name = overrides.pop("name", "Test section")
        section.page = overrides.pop("page", "home")
        section.template = overrides.pop("template", "text_image")
        section.image_mode = overrides.pop("image_mode", "optional")
        section.position = overrides.pop("position", counter["n"])
        section.is_dynamic = overrides.pop("is_dynamic", True)
        for field, value in overrides.items():
            setattr(section, field, value)

        db.session.add(section)
        db.session.commit()
        return section

    return _make


@pytest.fixture
def admin(app):
    admin = Admin()
    admin.username = ADMIN_USERNAME
    admin.set_password(ADMIN_PASSWORD)
    db.session.add(admin)
    db.session.commit()
    return admin


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client, admin):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200

    # Double-submit CSRF header sent with every following request
    client.environ_base["HTTP_X_CSRF_TOKEN"] = response.get_json()["csrf_token"]
    return client


@pytest.fixture
def failing_commit(app, monkeypatch):
    """Make commits fail the way a lost database connection would, inside a `with` block."""
    def _commit():
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    @contextmanager
    def _failing():
        monkeypatch.setattr(db.session, "commit", _commit)
        try:
            yield
        finally:
            monkeypatch.undo()

    return _failing

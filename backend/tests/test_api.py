import io
import json

from hotel_cms.application.cms.features import create_feature
from hotel_cms.application.cms.overlay import save_overlay
from hotel_cms.application.cms.sections import create_dynamic_section, get_section, seed_static_sections
from hotel_cms.extensions import db
from hotel_cms.models.section import Section

from conftest import ADMIN_PASSWORD, ADMIN_USERNAME


def image_upload(name="photo.jpg"):
    return io.BytesIO(b"\x89PNG" * 64), name


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"
    assert response.get_json()["database"] == "ok"


def test_login_sets_cookie_and_returns_csrf_token(client, admin):
    response = client.post(
        "/api/v1/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["admin"]["username"] == ADMIN_USERNAME
    assert body["csrf_token"]
    assert any("access_token_cookie" in h for h in response.headers.getlist("Set-Cookie"))


def test_login_with_wrong_password(client, admin):
    response = client.post("/api/v1/auth/login", json={"username": ADMIN_USERNAME, "password": "nope"})
    assert response.status_code == 401


def test_login_of_disabled_admin(client, admin):
    admin.is_active = False
    db.session.commit()

    response = client.post(
        "/api/v1/auth/login",
        json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 403


def test_me(auth_client):
    response = auth_client.get("/api/v1/auth/me")
    assert response.status_code == 200
    assert response.get_json()["admin"]["username"] == ADMIN_USERNAME


def test_admin_endpoints_require_login(client):
    assert client.get("/api/v1/sections").status_code == 401
    assert client.post("/api/v1/sections", json={"page": "home"}).status_code == 401


def test_missing_csrf_header_is_rejected_before_any_change(client, admin):
    client.post("/api/v1/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})

    response = client.post(
        "/api/v1/sections",
        json={"page": "home", "template": "cards", "name": "Chambres"},
    )

    assert response.status_code == 403
    assert response.get_json()["error"] == "SessionExpired"
    assert Section.query.count() == 0


def test_logout_clears_session(auth_client):
    assert auth_client.post("/api/v1/auth/logout").status_code == 200
    assert auth_client.get("/api/v1/sections").status_code == 401


def test_create_and_list_sections(auth_client):
    seed_static_sections()

    response = auth_client.post(
        "/api/v1/sections",
        json={"page": "home", "template": "checklist", "name": "Inclus", "has_gallery": True},
    )

    assert response.status_code == 201
    section = response.get_json()["section"]
    assert section["code"] == "home_inclus"
    assert section["position"] == 1
    # Flags come from the template, never from the request
    assert section["capabilities"]["has_gallery"] is False
    assert section["capabilities"]["has_features"] is True
    assert section["capabilities"]["pins_check_icon"] is True

    pages = auth_client.get("/api/v1/sections").get_json()
    assert [p["page"] for p in pages] == ["home", "services", "activities", "contact"]
    assert [s["code"] for s in pages[0]["sections"]] == ["home_hero", "home_inclus"]


def test_validation_error_is_json(auth_client):
    response = auth_client.post("/api/v1/sections", json={"page": "home", "template": "hero", "name": "X"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"


def test_unknown_section_is_json_404(auth_client):
    response = auth_client.get("/api/v1/sections/nowhere")

    assert response.status_code == 404
    assert response.get_json() == {"error": "NotFoundError", "message": "Section 'nowhere' not found"}


def test_block_upload_and_reorder_with_form_fields(auth_client, app):
    section = create_dynamic_section(page="home", template_code="cards", name="Chambres")

    ids = []
    for title in ("Double", "Twin"):
        response = auth_client.post(
            f"/api/v1/sections/{section.code}/blocks",
            data={"title": title, "image": image_upload()},
            content_type="multipart/form-data",
        )
        assert response.status_code == 201
        block = response.get_json()["block"]
        assert block["image_url"].startswith("/media/uploads/content/")
        ids.append(block["id"])

    image = auth_client.get(response.get_json()["block"]["image_url"])
    assert image.status_code == 200

    response = auth_client.post(
        f"/api/v1/sections/{section.code}/blocks/reorder",
        data={"block_ids": json.dumps(list(reversed(ids)))},
    )
    assert response.status_code == 200

    blocks = auth_client.get(f"/api/v1/sections/{section.code}/blocks").get_json()
    assert [b["title"] for b in blocks] == ["Twin", "Double"]


def test_block_without_required_image(auth_client):
    section = create_dynamic_section(page="home", template_code="cards", name="Chambres")

    response = auth_client.post(f"/api/v1/sections/{section.code}/blocks", data={"title": "Double"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"


def test_block_upload_with_bad_extension(auth_client):
    section = create_dynamic_section(page="home", template_code="cards", name="Chambres")

    response = auth_client.post(
        f"/api/v1/sections/{section.code}/blocks",
        data={"title": "Double", "image": image_upload("menu.pdf")},
        content_type="multipart/form-data",
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "UploadError"


def test_reorder_with_malformed_payload(auth_client):
    section = create_dynamic_section(page="home", template_code="cards", name="Chambres")

    response = auth_client.post(
        f"/api/v1/sections/{section.code}/blocks/reorder",
        data={"block_ids": "not json"},
    )

    assert response.status_code == 400


def test_feature_with_form_translations(auth_client):
    section = create_dynamic_section(page="home", template_code="features_bar", name="Atouts")

    response = auth_client.post(
        f"/api/v1/sections/{section.code}/features",
        data={"icon_code": "wifi", "label": "Wi-Fi gratuit", "label_en": "Free Wi-Fi", "label_es": ""},
    )

    assert response.status_code == 201
    feature = response.get_json()["feature"]
    assert feature["translations"] == {"en": {"label": "Free Wi-Fi"}, "es": None, "it": None}
    assert feature["icon_svg"]


def test_overlay_round_trip_over_http(auth_client):
    seed_static_sections()

    response = auth_client.put(
        "/api/v1/sections/home_hero/overlay",
        json={
            "subtitle": "Bienvenue",
            "title": "Hôtel Corintel",
            "description": "",
            "translations": {"en": {"subtitle": "Welcome", "title": "", "description": ""}},
        },
    )

    assert response.status_code == 200
    overlay = response.get_json()["overlay"]
    assert overlay["title"] == "Hôtel Corintel"
    assert overlay["translations"]["en"]["subtitle"] == "Welcome"
    assert overlay["translations"]["it"] == {"subtitle": "", "title": "", "description": ""}


def test_appearance_endpoint(auth_client):
    section = create_dynamic_section(page="home", template_code="text_image", name="Histoire")

    response = auth_client.put(
        f"/api/v1/sections/{section.code}/appearance",
        json={"background_color": "#fff", "image_position": "left"},
    )

    assert response.status_code == 200
    body = response.get_json()["section"]
    assert body["background_color"] == "#fff"
    assert body["image_position"] == "left"


def test_public_section_is_localized_with_french_fallback(client, app):
    section = create_dynamic_section(page="home", template_code="checklist", name="Inclus")
    create_feature(
        section_code=section.code,
        icon_code="",
        label="Petit-déjeuner",
        translations={"en": {"label": "Breakfast"}},
    )
    create_feature(section_code=section.code, icon_code="wifi", label="Wi-Fi")
    create_feature(section_code=section.code, icon_code="bed", label="Caché", is_active=False)
    save_overlay(
        section_code=section.code,
        subtitle="",
        title="Inclus",
        description="",
        translations={"en": {"title": "Included"}},
    )

    english = client.get(f"/api/v1/public/sections/{section.code}?lang=en").get_json()
    assert [f["label"] for f in english["features"]] == ["Breakfast", "Wi-Fi"]
    assert english["overlay"]["title"] == "Included"

    spanish = client.get(f"/api/v1/public/sections/{section.code}?lang=es").get_json()
    assert [f["label"] for f in spanish["features"]] == ["Petit-déjeuner", "Wi-Fi"]
    assert spanish["overlay"]["title"] == "Inclus"

    unknown = client.get(f"/api/v1/public/sections/{section.code}?lang=de").get_json()
    assert unknown["language"] == "fr"


def test_catalog(auth_client):
    templates = auth_client.get("/api/v1/catalog/templates").get_json()
    assert "hero" not in {t["code"] for t in templates}
    assert "gallery" in {t["code"] for t in templates}

    pages = auth_client.get("/api/v1/catalog/pages").get_json()
    assert [p["code"] for p in pages["pages"]] == ["home", "services", "activities", "contact"]

    icons = auth_client.get("/api/v1/catalog/icons").get_json()
    assert icons


def test_audit_trail_records_admin_actions(auth_client, admin):
    auth_client.post("/api/v1/sections", json={"page": "home", "template": "cards", "name": "Chambres"})

    items = auth_client.get("/api/v1/audit?entity_type=section").get_json()["items"]

    assert [i["action"] for i in items] == ["section.create"]
    assert items[0]["actor_id"] == admin.id
    assert items[0]["actor_username"] == ADMIN_USERNAME
    assert items[0]["entity_id"] == "home_chambres"


def test_openapi_document_is_served(client):
    response = client.get("/openapi/cms.yaml")
    assert response.status_code == 200
    assert b"openapi" in response.data


def test_appearance_is_all_or_nothing(auth_client):
    section = create_dynamic_section(page="home", template_code="text_image", name="Histoire")

    response = auth_client.put(
        f"/api/v1/sections/{section.code}/appearance",
        json={"background_color": "#FFFFFF", "image_position": "center"},
    )

    assert response.status_code == 400
    assert get_section(section.code).background_color is None


def test_appearance_rejected_on_template_without_image_positioning(auth_client):
    section = create_dynamic_section(page="home", template_code="text_only", name="Intro")

    response = auth_client.put(
        f"/api/v1/sections/{section.code}/appearance",
        json={"background_color": "#FFFFFF", "image_position": "left"},
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "ValidationError"
    section = get_section(section.code)
    assert section.background_color is None
    assert section.image_position is None


def test_login_rejects_non_object_bodies(client, admin):
    for body in ([], "reception", 42, {"username": ADMIN_USERNAME, "password": 42}):
        response = client.post("/api/v1/auth/login", json=body)
        assert response.status_code == 400
        assert response.get_json()["error"] == "ValidationError"

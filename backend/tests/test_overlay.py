import pytest

from hotel_cms.application.cms.overlay import get_overlay, save_overlay
from hotel_cms.application.cms.sections import create_dynamic_section, seed_static_sections
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.models.overlay import SectionOverlay, SectionOverlayTranslation


def test_overlay_of_a_fresh_section_is_all_empty_strings(app):
    seed_static_sections()

    overlay = get_overlay("home_hero")

    assert overlay == {
        "subtitle": "",
        "title": "",
        "description": "",
        "translations": {
            language: {"subtitle": "", "title": "", "description": ""}
            for language in ("en", "es", "it")
        },
    }


def test_overlay_saved_on_a_seeded_hero(app):
    seed_static_sections()

    save_overlay(
        section_code="home_hero",
        subtitle="Bienvenue",
        title="Hôtel Corintel",
        description="Au cœur de la ville",
        translations={
            "en": {"subtitle": "Welcome", "title": "Hotel Corintel", "description": ""},
            "es": {"subtitle": "", "title": "", "description": ""},
        },
    )

    overlay = get_overlay("home_hero")
    assert overlay["title"] == "Hôtel Corintel"
    assert overlay["translations"]["en"] == {"subtitle": "Welcome", "title": "Hotel Corintel", "description": ""}
    assert overlay["translations"]["es"] == {"subtitle": "", "title": "", "description": ""}
    assert overlay["translations"]["it"] == {"subtitle": "", "title": "", "description": ""}


def test_overlay_keeps_a_row_for_every_language(app):
    seed_static_sections()

    save_overlay(section_code="contact_hero", subtitle="", title="Contact", description="", translations={})

    assert SectionOverlay.query.count() == 1
    rows = SectionOverlayTranslation.query.all()
    assert sorted(row.language for row in rows) == ["en", "es", "it"]
    assert all(row.title == "" for row in rows)


def test_overlay_save_is_an_upsert(app):
    seed_static_sections()

    save_overlay(section_code="services_hero", subtitle="a", title="b", description="c",
                 translations={"en": {"title": "B"}})
    save_overlay(section_code="services_hero", subtitle="", title="B2", description="",
                 translations={"en": {"title": ""}, "it": {"title": "T"}})

    assert SectionOverlay.query.count() == 1
    assert SectionOverlayTranslation.query.count() == 3

    overlay = get_overlay("services_hero")
    assert overlay["subtitle"] == ""
    assert overlay["title"] == "B2"
    assert overlay["translations"]["en"]["title"] == ""
    assert overlay["translations"]["it"]["title"] == "T"


def test_overlay_requires_the_capability(app):
    section = create_dynamic_section(page="home", template_code="features_bar", name="Atouts")

    with pytest.raises(ValidationError):
        save_overlay(section_code=section.code, subtitle="", title="T", description="")

    assert SectionOverlay.query.count() == 0


def test_overlay_of_unknown_section(app):
    with pytest.raises(NotFoundError):
        get_overlay("nowhere")

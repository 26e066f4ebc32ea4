# hotel_cms/application/cms/overlay.py
from typing import Any, Dict, Optional

from hotel_cms.extensions import db
from hotel_cms.models.mixins import translation_for
from hotel_cms.models.overlay import SectionOverlay, SectionOverlayTranslation
from hotel_cms.domain.languages import TRANSLATION_LANGUAGES
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.transaction import transactional
from .sections import get_section, require_capability
from .translations import Translations, clean_text

OVERLAY_FIELDS = ("subtitle", "title", "description")


def get_overlay(section_code: str) -> Dict[str, Any]:
    """
    Header texts of a section in French plus every translation language.
    Missing rows read as empty strings, never None.
    """
    section = get_section(section_code)
    overlay = section.overlay

    data: Dict[str, Any] = {
        field: (getattr(overlay, field) or "") if overlay else "" for field in OVERLAY_FIELDS
    }

    translations = {}
    for language in TRANSLATION_LANGUAGES:
        row = translation_for(overlay, language) if overlay else None
        translations[language] = {
            field: (getattr(row, field) or "") if row else "" for field in OVERLAY_FIELDS
        }
    data["translations"] = translations

    return data


def save_overlay(
    *,
    section_code: str,
    subtitle: str,
    title: str,
    description: str,
    translations: Optional[Translations] = None,
    actor_id: Optional[str] = None,
) -> SectionOverlay:
    """
    Upsert the French texts and rewrite every language row.

    Unlike feature/service/gallery translations, an empty language is kept
    as a row of empty strings.
    """
    section = get_section(section_code)
    require_capability(section, "has_overlay")

    translations = translations or {}

    with transactional():
        overlay = section.overlay
        if overlay is None:
            overlay = SectionOverlay()
            overlay.section = section
            db.session.add(overlay)

        overlay.subtitle = clean_text(subtitle)
        overlay.title = clean_text(title)
        overlay.description = clean_text(description)

        for language in TRANSLATION_LANGUAGES:
            values = translations.get(language) or {}
            row = translation_for(overlay, language)
            if row is None:
                row = SectionOverlayTranslation()
                row.language = language
                overlay.translations.append(row)

            for field in OVERLAY_FIELDS:
                setattr(row, field, clean_text(values.get(field)))

        log_action(
            actor_id=actor_id,
            action="overlay.save",
            entity_type="section",
            entity_id=section.code,
            payload={},
        )

    return overlay

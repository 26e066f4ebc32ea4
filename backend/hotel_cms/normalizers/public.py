# hotel_cms/normalizers/public.py
"""
Localized, read-only view of a section for the public site.

French text lives on the parent rows. For any other language, a missing
translation row or an empty translated field falls back to French.
"""
from hotel_cms.domain.icons import get_icon
from hotel_cms.domain.languages import DEFAULT_LANGUAGE
from hotel_cms.models.mixins import translation_for
from .media import media_url


def localized(entity, field, language):
    if entity is None:
        return ""

    default = getattr(entity, field) or ""
    if language == DEFAULT_LANGUAGE:
        return default

    row = translation_for(entity, language)
    value = getattr(row, field) if row is not None else ""
    return value or default


def localize_section(section, *, language, blocks, features, services, gallery_items):
    overlay = section.overlay

    return {
        "code": section.code,
        "template": section.template,
        "language": language,
        "background_color": section.background_color,
        "image_position": section.image_position,
        "overlay": {
            field: localized(overlay, field, language) if overlay else ""
            for field in ("subtitle", "title", "description")
        },
        "blocks": [
            {
                "title": b.title,
                "description": b.description,
                "image_url": media_url(b.image_filename),
                "image_alt": b.image_alt,
                "link_url": b.link_url,
                "link_text": b.link_text,
            }
            for b in blocks
        ],
        "features": [
            {
                "icon_svg": (get_icon(f.icon_code) or {}).get("svg"),
                "label": localized(f, "label", language),
            }
            for f in features
        ],
        "services": [
            {
                "icon_svg": (get_icon(s.icon_code) or {}).get("svg"),
                "label": localized(s, "label", language),
                "description": localized(s, "description", language),
            }
            for s in services
        ],
        "gallery": [
            {
                "image_url": media_url(g.image_filename),
                "image_alt": g.image_alt,
                "title": localized(g, "title", language),
                "description": localized(g, "description", language),
            }
            for g in gallery_items
        ],
    }

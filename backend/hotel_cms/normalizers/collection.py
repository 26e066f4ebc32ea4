from hotel_cms.domain.icons import get_icon
from hotel_cms.domain.languages import TRANSLATION_LANGUAGES
from hotel_cms.models.mixins import translation_for
from .media import media_url


def normalize_translations(entity, fields):
    """Stored translations per language; a language without a row maps to None."""
    translations = {}
    for language in TRANSLATION_LANGUAGES:
        row = translation_for(entity, language)
        translations[language] = (
            {field: getattr(row, field) for field in fields} if row else None
        )
    return translations


def normalize_feature(feature):
    icon = get_icon(feature.icon_code) or {}
    return {
        "id": feature.id,
        "position": feature.position,
        "icon_code": feature.icon_code,
        "icon_svg": icon.get("svg"),
        "label": feature.label,
        "is_active": feature.is_active,
        "translations": normalize_translations(feature, ("label",)),
    }


def normalize_service(service):
    icon = get_icon(service.icon_code) or {}
    return {
        "id": service.id,
        "position": service.position,
        "icon_code": service.icon_code,
        "icon_svg": icon.get("svg"),
        "label": service.label,
        "description": service.description,
        "is_active": service.is_active,
        "translations": normalize_translations(service, ("label", "description")),
    }


def normalize_gallery_item(item):
    return {
        "id": item.id,
        "position": item.position,
        "image_filename": item.image_filename,
        "image_url": media_url(item.image_filename),
        "title": item.title,
        "description": item.description,
        "image_alt": item.image_alt,
        "is_active": item.is_active,
        "translations": normalize_translations(item, ("title", "description")),
    }

# hotel_cms/application/cms/translations.py
from typing import Dict, Mapping, Optional, Sequence

from hotel_cms.domain.languages import TRANSLATION_LANGUAGES
from hotel_cms.models.mixins import translation_for

Translations = Mapping[str, Mapping[str, Optional[str]]]


def clean_text(value: Optional[str]) -> str:
    return (value or "").strip()


def replace_translations(
    parent,
    translation_model,
    submitted: Optional[Translations],
    *,
    fields: Sequence[str],
    primary: str,
) -> Dict[str, Dict[str, str]]:
    """
    Overwrite the translation set of a feature, service or gallery item.

    Every translation language is rewritten: a language whose primary field
    is empty loses its row (readers fall back to French), the others are
    upserted with exactly the submitted text. Returns what is now stored.
    """
    submitted = submitted or {}
    stored: Dict[str, Dict[str, str]] = {}

    for language in TRANSLATION_LANGUAGES:
        values = submitted.get(language) or {}
        existing = translation_for(parent, language)

        if not clean_text(values.get(primary)):
            if existing is not None:
                parent.translations.remove(existing)
            continue

        if existing is None:
            existing = translation_model()
            existing.language = language
            parent.translations.append(existing)

        for field in fields:
            setattr(existing, field, clean_text(values.get(field)))
        stored[language] = {field: getattr(existing, field) for field in fields}

    return stored

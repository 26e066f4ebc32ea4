# hotel_cms/api/v1/forms.py
"""
Request parsing shared by the admin views.

Views accept either multipart/urlencoded forms (the admin panel posts
forms with file inputs) or JSON bodies, and hand explicit values to the
application layer.
"""
from typing import Any, Dict, Mapping, Optional, Sequence

from flask import request
from flask_jwt_extended import get_jwt_identity
from werkzeug.datastructures import FileStorage

from hotel_cms.domain.languages import TRANSLATION_LANGUAGES
from hotel_cms.utils.order import parse_id_list

TRUTHY = {"1", "true", "on", "yes"}


def request_data() -> Mapping[str, Any]:
    if request.form or request.files:
        return request.form
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def text(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    return str(value)


def flag(data: Mapping[str, Any], key: str, default: bool) -> bool:
    if key not in data:
        return default
    value = data.get(key)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def translations_from(data: Mapping[str, Any], fields: Sequence[str]) -> Dict[str, Dict[str, str]]:
    """
    Collect per-language values either from a nested JSON object
    {"translations": {"en": {"label": ...}}} or from flat form keys
    such as "label_en".
    """
    nested = data.get("translations")
    if not isinstance(nested, dict):
        nested = {}

    result: Dict[str, Dict[str, str]] = {}
    for language in TRANSLATION_LANGUAGES:
        values = nested.get(language)
        if not isinstance(values, dict):
            values = {}

        entry = {}
        for field in fields:
            value = values[field] if field in values else data.get(f"{field}_{language}")
            entry[field] = "" if value is None else str(value)
        result[language] = entry
    return result


def uploaded(name: str = "image") -> Optional[FileStorage]:
    file = request.files.get(name)
    if file is None or not file.filename:
        return None
    return file


def ordered_ids(form_field: str):
    """Ordering submitted as a JSON-encoded form field or as a JSON body."""
    if request.form:
        return parse_id_list(request.form.get(form_field) or request.form.get("ids"))
    return parse_id_list(request.get_json(silent=True))


def actor_id() -> str:
    return get_jwt_identity()

# hotel_cms/api/v1/public.py
from flask import jsonify, request
from hotel_cms.application.cms.blocks import list_blocks
from hotel_cms.application.cms.features import list_features
from hotel_cms.application.cms.gallery import list_gallery_items
from hotel_cms.application.cms.sections import get_section
from hotel_cms.application.cms.services import list_services
from hotel_cms.domain.languages import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from hotel_cms.normalizers.public import localize_section
from . import v1_bp


@v1_bp.route("/public/sections/<code>", methods=["GET"])
def public_section(code):
    """Active content of one section, localized for the public site."""
    language = request.args.get("lang", DEFAULT_LANGUAGE)
    if language not in SUPPORTED_LANGUAGES:
        language = DEFAULT_LANGUAGE

    section = get_section(code)

    return jsonify(localize_section(
        section,
        language=language,
        blocks=list_blocks(code, active_only=True),
        features=list_features(code, active_only=True) if section.has_features else [],
        services=list_services(code, active_only=True) if section.has_services else [],
        gallery_items=list_gallery_items(code, active_only=True) if section.has_gallery else [],
    ))

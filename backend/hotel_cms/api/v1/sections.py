# hotel_cms/api/v1/sections.py
from flask import jsonify
from hotel_cms.application.cms import sections as registry
from hotel_cms.application.cms.overlay import get_overlay
from hotel_cms.normalizers.collection import (
    normalize_feature,
    normalize_gallery_item,
    normalize_service,
)
from hotel_cms.normalizers.section import normalize_section, normalize_sections_by_page
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, ordered_ids, request_data, text
from . import v1_bp


@v1_bp.route("/sections", methods=["GET"])
@admin_required
def list_sections():
    return jsonify(normalize_sections_by_page(registry.list_sections()))


@v1_bp.route("/sections/<code>", methods=["GET"])
@admin_required
def get_section(code):
    section = registry.get_section(code)

    data = normalize_section(section, admin=True, include_blocks=True)
    data["features"] = [normalize_feature(f) for f in section.features]
    data["services"] = [normalize_service(s) for s in section.services]
    data["gallery"] = [normalize_gallery_item(g) for g in section.gallery_items]
    if section.has_overlay:
        data["overlay"] = get_overlay(code)

    return jsonify(data)


@v1_bp.route("/sections", methods=["POST"])
@admin_required
def create_section():
    data = request_data()

    section = registry.create_dynamic_section(
        page=text(data, "page"),
        template_code=text(data, "template"),
        name=text(data, "name"),
        actor_id=actor_id(),
    )

    return jsonify({
        "section": normalize_section(section),
        "message": "Section created successfully"
    }), 201


@v1_bp.route("/sections/<code>", methods=["PUT"])
@admin_required
def rename_section(code):
    data = request_data()

    section = registry.rename_dynamic_section(
        code=code,
        name=text(data, "name"),
        actor_id=actor_id(),
    )

    return jsonify({
        "section": normalize_section(section),
        "message": "Section renamed successfully"
    }), 200


@v1_bp.route("/sections/<code>", methods=["DELETE"])
@admin_required
def delete_section(code):
    registry.delete_dynamic_section(code=code, actor_id=actor_id())
    return jsonify({"message": "Section deleted"}), 200


@v1_bp.route("/sections/<code>/appearance", methods=["PUT"])
@admin_required
def update_appearance(code):
    data = request_data()

    section = registry.set_appearance(
        code=code,
        background_color=text(data, "background_color") if "background_color" in data else registry.UNCHANGED,
        image_position=text(data, "image_position") if "image_position" in data else registry.UNCHANGED,
        actor_id=actor_id(),
    )

    return jsonify({
        "section": normalize_section(section),
        "message": "Section appearance updated"
    }), 200


@v1_bp.route("/pages/<page>/sections/reorder", methods=["POST"])
@admin_required
def reorder_sections(page):
    registry.reorder_sections(
        page=page,
        ordered_codes=ordered_ids("section_codes"),
        actor_id=actor_id(),
    )
    return jsonify({"success": True}), 200

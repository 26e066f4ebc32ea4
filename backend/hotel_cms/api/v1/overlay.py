# hotel_cms/api/v1/overlay.py
from flask import jsonify
from hotel_cms.application.cms import overlay as store
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, request_data, text, translations_from
from . import v1_bp


@v1_bp.route("/sections/<code>/overlay", methods=["GET"])
@admin_required
def get_overlay(code):
    return jsonify(store.get_overlay(code))


@v1_bp.route("/sections/<code>/overlay", methods=["PUT"])
@admin_required
def save_overlay(code):
    data = request_data()

    store.save_overlay(
        section_code=code,
        subtitle=text(data, "subtitle"),
        title=text(data, "title"),
        description=text(data, "description"),
        translations=translations_from(data, store.OVERLAY_FIELDS),
        actor_id=actor_id(),
    )

    return jsonify({
        "overlay": store.get_overlay(code),
        "message": "Section texts saved successfully"
    }), 200

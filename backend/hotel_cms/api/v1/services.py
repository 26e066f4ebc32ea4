# hotel_cms/api/v1/services.py
from flask import jsonify
from hotel_cms.application.cms import services as store
from hotel_cms.normalizers.collection import normalize_service
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, flag, ordered_ids, request_data, text, translations_from
from . import v1_bp


@v1_bp.route("/sections/<code>/services", methods=["GET"])
@admin_required
def list_services(code):
    return jsonify([normalize_service(s) for s in store.list_services(code)])


@v1_bp.route("/sections/<code>/services", methods=["POST"])
@admin_required
def create_service(code):
    data = request_data()

    service = store.create_service(
        section_code=code,
        icon_code=text(data, "icon_code"),
        label=text(data, "label"),
        description=text(data, "description"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", True),
        actor_id=actor_id(),
    )

    return jsonify({
        "service": normalize_service(service),
        "message": "Service created successfully"
    }), 201


@v1_bp.route("/services/<service_id>", methods=["PUT"])
@admin_required
def update_service(service_id):
    data = request_data()
    current = store.get_service(service_id)

    service = store.update_service(
        service_id=service_id,
        icon_code=text(data, "icon_code"),
        label=text(data, "label"),
        description=text(data, "description"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", current.is_active),
        actor_id=actor_id(),
    )

    return jsonify({
        "service": normalize_service(service),
        "message": "Service updated successfully"
    }), 200


@v1_bp.route("/services/<service_id>", methods=["DELETE"])
@admin_required
def delete_service(service_id):
    store.delete_service(service_id=service_id, actor_id=actor_id())
    return jsonify({"message": "Service deleted"}), 200


@v1_bp.route("/sections/<code>/services/reorder", methods=["POST"])
@admin_required
def reorder_services(code):
    store.reorder_services(
        section_code=code,
        ordered_ids=ordered_ids("service_ids"),
        actor_id=actor_id(),
    )
    return jsonify({"success": True}), 200

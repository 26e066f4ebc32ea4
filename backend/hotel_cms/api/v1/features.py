# hotel_cms/api/v1/features.py
from flask import jsonify
from hotel_cms.application.cms import features as store
from hotel_cms.normalizers.collection import normalize_feature
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, flag, ordered_ids, request_data, text, translations_from
from . import v1_bp


@v1_bp.route("/sections/<code>/features", methods=["GET"])
@admin_required
def list_features(code):
    return jsonify([normalize_feature(f) for f in store.list_features(code)])


@v1_bp.route("/sections/<code>/features", methods=["POST"])
@admin_required
def create_feature(code):
    data = request_data()

    feature = store.create_feature(
        section_code=code,
        icon_code=text(data, "icon_code"),
        label=text(data, "label"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", True),
        actor_id=actor_id(),
    )

    return jsonify({
        "feature": normalize_feature(feature),
        "message": "Feature created successfully"
    }), 201


@v1_bp.route("/features/<feature_id>", methods=["PUT"])
@admin_required
def update_feature(feature_id):
    data = request_data()
    current = store.get_feature(feature_id)

    feature = store.update_feature(
        feature_id=feature_id,
        icon_code=text(data, "icon_code"),
        label=text(data, "label"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", current.is_active),
        actor_id=actor_id(),
    )

    return jsonify({
        "feature": normalize_feature(feature),
        "message": "Feature updated successfully"
    }), 200


@v1_bp.route("/features/<feature_id>", methods=["DELETE"])
@admin_required
def delete_feature(feature_id):
    store.delete_feature(feature_id=feature_id, actor_id=actor_id())
    return jsonify({"message": "Feature deleted"}), 200


@v1_bp.route("/sections/<code>/features/reorder", methods=["POST"])
@admin_required
def reorder_features(code):
    store.reorder_features(
        section_code=code,
        ordered_ids=ordered_ids("feature_ids"),
        actor_id=actor_id(),
    )
    return jsonify({"success": True}), 200

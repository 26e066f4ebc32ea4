# hotel_cms/api/v1/gallery.py
from flask import jsonify
from hotel_cms.application.cms import gallery as store
from hotel_cms.normalizers.collection import normalize_gallery_item
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, flag, ordered_ids, request_data, text, translations_from, uploaded
from . import v1_bp


@v1_bp.route("/sections/<code>/gallery", methods=["GET"])
@admin_required
def list_gallery_items(code):
    return jsonify([normalize_gallery_item(g) for g in store.list_gallery_items(code)])


@v1_bp.route("/sections/<code>/gallery", methods=["POST"])
@admin_required
def create_gallery_item(code):
    data = request_data()

    item = store.create_gallery_item(
        section_code=code,
        title=text(data, "title"),
        image=uploaded("image"),
        description=text(data, "description"),
        image_alt=text(data, "image_alt"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", True),
        actor_id=actor_id(),
    )

    return jsonify({
        "item": normalize_gallery_item(item),
        "message": "Gallery item created successfully"
    }), 201


@v1_bp.route("/gallery/<item_id>", methods=["PUT"])
@admin_required
def update_gallery_item(item_id):
    data = request_data()
    current = store.get_gallery_item(item_id)

    item = store.update_gallery_item(
        item_id=item_id,
        title=text(data, "title"),
        description=text(data, "description"),
        image_alt=text(data, "image_alt"),
        image=uploaded("image"),
        translations=translations_from(data, store.TRANSLATED_FIELDS),
        is_active=flag(data, "is_active", current.is_active),
        actor_id=actor_id(),
    )

    return jsonify({
        "item": normalize_gallery_item(item),
        "message": "Gallery item updated successfully"
    }), 200


@v1_bp.route("/gallery/<item_id>", methods=["DELETE"])
@admin_required
def delete_gallery_item(item_id):
    store.delete_gallery_item(item_id=item_id, actor_id=actor_id())
    return jsonify({"message": "Gallery item deleted"}), 200


@v1_bp.route("/sections/<code>/gallery/reorder", methods=["POST"])
@admin_required
def reorder_gallery_items(code):
    store.reorder_gallery_items(
        section_code=code,
        ordered_ids=ordered_ids("item_ids"),
        actor_id=actor_id(),
    )
    return jsonify({"success": True}), 200

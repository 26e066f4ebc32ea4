# hotel_cms/api/v1/blocks.py
from flask import jsonify
from hotel_cms.application.cms import blocks as store
from hotel_cms.application.cms.blocks import BlockFields
from hotel_cms.normalizers.block import normalize_block
from hotel_cms.utils.decorators import admin_required
from .forms import actor_id, flag, ordered_ids, request_data, text, uploaded
from . import v1_bp


def _block_fields(data, current=None):
    """Submitted fields; on update, absent keys keep the block's current values."""
    def value(key):
        return text(data, key, getattr(current, key) if current is not None else "")

    return BlockFields(
        title=value("title"),
        description=value("description"),
        image_alt=value("image_alt"),
        link_url=value("link_url"),
        link_text=value("link_text"),
        is_active=flag(data, "is_active", current.is_active if current is not None else True),
    )


@v1_bp.route("/sections/<code>/blocks", methods=["GET"])
@admin_required
def list_blocks(code):
    return jsonify([
        normalize_block(b, admin=True) for b in store.list_blocks(code)
    ])


@v1_bp.route("/sections/<code>/blocks", methods=["POST"])
@admin_required
def create_block(code):
    data = request_data()

    block = store.create_block(
        section_code=code,
        fields=_block_fields(data),
        image=uploaded("image"),
        actor_id=actor_id(),
    )

    return jsonify({
        "block": normalize_block(block, admin=True),
        "message": "Block created successfully"
    }), 201


@v1_bp.route("/blocks/<block_id>", methods=["PUT"])
@admin_required
def update_block(block_id):
    data = request_data()
    current = store.get_block(block_id)

    block = store.update_block(
        block_id=block_id,
        fields=_block_fields(data, current),
        image=uploaded("image"),
        remove_image=flag(data, "remove_image", False),
        actor_id=actor_id(),
    )

    return jsonify({
        "block": normalize_block(block, admin=True),
        "message": "Block updated successfully"
    }), 200


@v1_bp.route("/blocks/<block_id>", methods=["DELETE"])
@admin_required
def delete_block(block_id):
    store.delete_block(block_id=block_id, actor_id=actor_id())
    return jsonify({"message": "Block deleted"}), 200


@v1_bp.route("/sections/<code>/blocks/reorder", methods=["POST"])
@admin_required
def reorder_blocks(code):
    store.reorder_blocks(
        section_code=code,
        ordered_ids=ordered_ids("block_ids"),
        actor_id=actor_id(),
    )
    return jsonify({"success": True}), 200

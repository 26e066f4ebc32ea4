from flask import jsonify
from hotel_cms.domain.icons import icons_by_category
from hotel_cms.domain.pages import PAGES
from hotel_cms.domain.templates import IMAGE_POSITIONS, creatable_templates
from hotel_cms.utils.decorators import admin_required
from . import v1_bp


@v1_bp.route("/catalog/templates", methods=["GET"])
@admin_required
def list_templates():
    return jsonify([
        {"code": code, **template}
        for code, template in creatable_templates().items()
    ])


@v1_bp.route("/catalog/icons", methods=["GET"])
@admin_required
def list_icons():
    return jsonify(icons_by_category())


@v1_bp.route("/catalog/pages", methods=["GET"])
@admin_required
def list_pages():
    return jsonify({
        "pages": [{"code": code, "name": name} for code, name in PAGES.items()],
        "image_positions": list(IMAGE_POSITIONS),
    })

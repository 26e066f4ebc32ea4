from flask import current_app, jsonify
from flask_jwt_extended import (
    create_access_token,
    get_csrf_token,
    get_current_user,
    set_access_cookies,
    unset_jwt_cookies,
)
from hotel_cms.extensions import db, jwt
from hotel_cms.models.admin import Admin
from hotel_cms.models.base import utc_now
from hotel_cms.utils.decorators import admin_required
from .forms import request_data
from . import v1_bp


@jwt.user_lookup_loader
def load_admin(_jwt_header, jwt_data):
    return db.session.get(Admin, jwt_data["sub"])


def _admin_payload(admin):
    return {
        "id": admin.id,
        "username": admin.username,
        "email": admin.email,
        "last_login_at": admin.last_login_at.isoformat() if admin.last_login_at else None,
    }


@v1_bp.route("/auth/login", methods=["POST"])
def login():
    data = request_data()
    if not data:
        return jsonify({"error": "ValidationError", "message": "Invalid request body"}), 400

    username = str(data.get("username") or "").strip()
    password = data.get("password")
    if not isinstance(password, str):
        password = ""

    if not username or not password:
        return jsonify({"error": "ValidationError", "message": "Username and password required"}), 400

    admin = Admin.query.filter_by(username=username).first()

    if not admin or not admin.check_password(password):
        current_app.logger.warning(f"Failed admin login for '{username}'")
        return jsonify({"error": "Unauthorized", "message": "Invalid credentials"}), 401

    if not admin.is_active:
        return jsonify({"error": "Forbidden", "message": "Admin account disabled"}), 403

    admin.last_login_at = utc_now()
    db.session.commit()

    access_token = create_access_token(identity=admin.id)

    response = jsonify({
        "admin": _admin_payload(admin),
        "csrf_token": get_csrf_token(access_token),
    })
    set_access_cookies(response, access_token)

    current_app.logger.info(f"Admin '{username}' logged in")
    return response, 200


@v1_bp.route("/auth/logout", methods=["POST"])
@admin_required
def logout():
    response = jsonify({"message": "Logged out"})
    unset_jwt_cookies(response)
    return response, 200


@v1_bp.route("/auth/me", methods=["GET"])
@admin_required
def me():
    return jsonify({"admin": _admin_payload(get_current_user())}), 200

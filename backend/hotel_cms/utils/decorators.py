from functools import wraps
from flask import jsonify
from flask_jwt_extended import get_current_user, verify_jwt_in_request


def admin_required(fn):
    """
    Gate for every admin endpoint. Verifies the JWT cookie and, on mutating
    methods, the CSRF double-submit header before the view runs.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()

        admin = get_current_user()
        if not admin.is_active:
            return jsonify({"error": "Forbidden", "message": "Admin account disabled"}), 403

        return fn(*args, **kwargs)
    return wrapper

from flask import current_app, jsonify
from flask_jwt_extended.exceptions import CSRFError
from werkzeug.exceptions import RequestEntityTooLarge
from hotel_cms.domain.exceptions import CMSError, PersistenceError


def register_error_handlers(app):
    @app.errorhandler(CMSError)
    def handle_cms_error(error):
        if isinstance(error, PersistenceError):
            message = "Something went wrong while saving. Please try again."
        else:
            message = error.message

        response = jsonify({
            "error": type(error).__name__,
            "message": message
        })
        response.status_code = error.status_code
        return response

    @app.errorhandler(CSRFError)
    def handle_csrf_error(error):
        current_app.logger.warning(f"Rejected request with invalid CSRF token: {error}")
        response = jsonify({
            "error": "SessionExpired",
            "message": "Your session has expired. Please reload the page and try again."
        })
        response.status_code = 403
        return response

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(error):
        response = jsonify({
            "error": "UploadError",
            "message": "File is too large (max 5 MB)."
        })
        response.status_code = 413
        return response

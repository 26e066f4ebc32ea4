from flask import url_for


def media_url(relative_path):
    if not relative_path:
        return None
    return url_for("media", filename=relative_path)

from hotel_cms.extensions import db


class PositionMixin:
    """Dense 0-based ordering among the children of one parent."""

    position = db.Column(db.Integer, nullable=False, default=0)


class ActiveMixin:
    is_active = db.Column(db.Boolean, nullable=False, default=True)


class TranslationMixin:
    language = db.Column(db.String(5), nullable=False)


def translation_for(parent, language):
    """Translation row of `parent` for `language`, or None."""
    for translation in parent.translations:
        if translation.language == language:
            return translation
    return None

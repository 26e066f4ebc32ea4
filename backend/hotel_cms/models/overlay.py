from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import TranslationMixin


class SectionOverlay(BaseModel):
    __tablename__ = "section_overlays"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False, unique=True)
    subtitle = db.Column(db.String(255), nullable=False, default="")
    title = db.Column(db.String(255), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")

    section = db.relationship("Section", back_populates="overlay")
    translations = db.relationship(
        "SectionOverlayTranslation",
        back_populates="overlay",
        cascade="all, delete-orphan",
    )


class SectionOverlayTranslation(BaseModel, TranslationMixin):
    __tablename__ = "section_overlay_translations"

    overlay_id = db.Column(db.String(36), db.ForeignKey("section_overlays.id"), nullable=False)
    subtitle = db.Column(db.String(255), nullable=False, default="")
    title = db.Column(db.String(255), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")

    overlay = db.relationship("SectionOverlay", back_populates="translations")

    __table_args__ = (
        db.UniqueConstraint("overlay_id", "language", name="uq_overlay_translation_language"),
    )

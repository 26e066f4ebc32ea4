from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import ActiveMixin, PositionMixin, TranslationMixin


class SectionGalleryItem(BaseModel, PositionMixin, ActiveMixin):
    __tablename__ = "section_gallery_items"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    image_filename = db.Column(db.String(512), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")
    image_alt = db.Column(db.String(255), nullable=False, default="")

    section = db.relationship("Section", back_populates="gallery_items")
    translations = db.relationship(
        "SectionGalleryItemTranslation",
        back_populates="item",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.Index("idx_gallery_section_position", "section_id", "position"),
    )


class SectionGalleryItemTranslation(BaseModel, TranslationMixin):
    __tablename__ = "section_gallery_item_translations"

    item_id = db.Column(db.String(36), db.ForeignKey("section_gallery_items.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    item = db.relationship("SectionGalleryItem", back_populates="translations")

    __table_args__ = (
        db.UniqueConstraint("item_id", "language", name="uq_gallery_translation_language"),
    )

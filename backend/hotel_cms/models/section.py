from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import PositionMixin


class Section(BaseModel, PositionMixin):
    __tablename__ = "sections"

    code = db.Column(db.String(100), unique=True, nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    page = db.Column(db.String(50), nullable=False, index=True)
    template = db.Column(db.String(50), nullable=False)  # see domain.templates

    image_mode = db.Column(db.String(20), nullable=False, default="optional")
    has_title = db.Column(db.Boolean, nullable=False, default=False)
    has_description = db.Column(db.Boolean, nullable=False, default=False)
    has_link = db.Column(db.Boolean, nullable=False, default=False)
    has_features = db.Column(db.Boolean, nullable=False, default=False)
    has_services = db.Column(db.Boolean, nullable=False, default=False)
    has_gallery = db.Column(db.Boolean, nullable=False, default=False)
    has_overlay = db.Column(db.Boolean, nullable=False, default=False)
    max_blocks = db.Column(db.Integer, nullable=True)

    background_color = db.Column(db.String(7), nullable=True)
    image_position = db.Column(db.String(10), nullable=True)
    is_dynamic = db.Column(db.Boolean, nullable=False, default=False)

    blocks = db.relationship(
        "ContentBlock",
        back_populates="section",
        order_by="ContentBlock.position",
        cascade="all, delete-orphan",
    )
    features = db.relationship(
        "SectionFeature",
        back_populates="section",
        order_by="SectionFeature.position",
        cascade="all, delete-orphan",
    )
    services = db.relationship(
        "SectionService",
        back_populates="section",
        order_by="SectionService.position",
        cascade="all, delete-orphan",
    )
    gallery_items = db.relationship(
        "SectionGalleryItem",
        back_populates="section",
        order_by="SectionGalleryItem.position",
        cascade="all, delete-orphan",
    )
    overlay = db.relationship(
        "SectionOverlay",
        back_populates="section",
        uselist=False,
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.Index("idx_section_page_position", "page", "position"),
    )

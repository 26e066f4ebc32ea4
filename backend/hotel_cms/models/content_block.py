from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import ActiveMixin, PositionMixin


class ContentBlock(BaseModel, PositionMixin, ActiveMixin):
    __tablename__ = "content_blocks"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    title = db.Column(db.String(255), nullable=False, default="")
    description = db.Column(db.Text, nullable=False, default="")
    image_filename = db.Column(db.String(512), nullable=True)  # relative to MEDIA_ROOT
    image_alt = db.Column(db.String(255), nullable=False, default="")
    link_url = db.Column(db.String(512), nullable=False, default="")
    link_text = db.Column(db.String(255), nullable=False, default="")

    # Relationship to parent Section
    section = db.relationship("Section", back_populates="blocks")

    __table_args__ = (
        db.Index("idx_block_section_position", "section_id", "position"),
    )

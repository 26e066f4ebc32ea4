from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import ActiveMixin, PositionMixin, TranslationMixin


class SectionService(BaseModel, PositionMixin, ActiveMixin):
    __tablename__ = "section_services"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    icon_code = db.Column(db.String(50), nullable=False)
    label = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    section = db.relationship("Section", back_populates="services")
    translations = db.relationship(
        "SectionServiceTranslation",
        back_populates="service",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.Index("idx_service_section_position", "section_id", "position"),
    )


class SectionServiceTranslation(BaseModel, TranslationMixin):
    __tablename__ = "section_service_translations"

    service_id = db.Column(db.String(36), db.ForeignKey("section_services.id"), nullable=False)
    label = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default="")

    service = db.relationship("SectionService", back_populates="translations")

    __table_args__ = (
        db.UniqueConstraint("service_id", "language", name="uq_service_translation_language"),
    )

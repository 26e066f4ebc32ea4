from hotel_cms.extensions import db
from .base import BaseModel
from .mixins import ActiveMixin, PositionMixin, TranslationMixin


class SectionFeature(BaseModel, PositionMixin, ActiveMixin):
    __tablename__ = "section_features"

    section_id = db.Column(db.String(36), db.ForeignKey("sections.id"), nullable=False)
    icon_code = db.Column(db.String(50), nullable=False)
    label = db.Column(db.String(255), nullable=False)

    section = db.relationship("Section", back_populates="features")
    translations = db.relationship(
        "SectionFeatureTranslation",
        back_populates="feature",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        db.Index("idx_feature_section_position", "section_id", "position"),
    )


class SectionFeatureTranslation(BaseModel, TranslationMixin):
    __tablename__ = "section_feature_translations"

    feature_id = db.Column(db.String(36), db.ForeignKey("section_features.id"), nullable=False)
    label = db.Column(db.String(255), nullable=False)

    feature = db.relationship("SectionFeature", back_populates="translations")

    __table_args__ = (
        db.UniqueConstraint("feature_id", "language", name="uq_feature_translation_language"),
    )

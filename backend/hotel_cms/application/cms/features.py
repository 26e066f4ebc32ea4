# hotel_cms/application/cms/features.py
from typing import List, Optional

from hotel_cms.extensions import db
from hotel_cms.models.feature import SectionFeature, SectionFeatureTranslation
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.domain.icons import is_known_icon
from hotel_cms.domain.invariants.block import assert_dense_positions
from hotel_cms.domain.templates import CHECK_ICON
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.order import apply_order, compact_order, next_position
from hotel_cms.utils.transaction import transactional
from .sections import get_section, require_capability, section_capabilities
from .translations import Translations, clean_text, replace_translations

TRANSLATED_FIELDS = ("label",)


def resolve_icon(section, icon_code: Optional[str]) -> str:
    """
    Validated icon code for a feature or service of `section`.
    Checklist sections fall back to the check mark when no icon is sent.
    """
    icon_code = clean_text(icon_code)
    if not icon_code and section_capabilities(section)["pins_check_icon"]:
        icon_code = CHECK_ICON

    if not icon_code:
        raise ValidationError("Please choose an icon.")
    if not is_known_icon(icon_code):
        raise ValidationError(f"Unknown icon '{icon_code}'.")
    return icon_code


def get_feature(feature_id: Optional[str]) -> SectionFeature:
    feature = db.session.get(SectionFeature, str(feature_id)) if feature_id else None
    if not feature:
        raise NotFoundError(f"Feature '{feature_id}' not found")
    return feature


def list_features(section_code: str, active_only: bool = False) -> List[SectionFeature]:
    section = get_section(section_code)

    query = SectionFeature.query.filter_by(section_id=section.id)
    if active_only:
        query = query.filter_by(is_active=True)

    return query.order_by(SectionFeature.position.asc()).all()


def create_feature(
    *,
    section_code: str,
    icon_code: Optional[str],
    label: str,
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionFeature:
    section = get_section(section_code)
    require_capability(section, "has_features")

    icon_code = resolve_icon(section, icon_code)
    label = clean_text(label)
    if not label:
        raise ValidationError("Please enter a label.")

    feature = SectionFeature()
    with transactional():
        feature.section_id = section.id
        feature.icon_code = icon_code
        feature.label = label
        feature.is_active = bool(is_active)
        feature.position = next_position(SectionFeature, section_id=section.id)

        db.session.add(feature)
        replace_translations(
            feature,
            SectionFeatureTranslation,
            translations,
            fields=TRANSLATED_FIELDS,
            primary="label",
        )
        db.session.flush()

        log_action(
            actor_id=actor_id,
            action="feature.create",
            entity_type="feature",
            entity_id=feature.id,
            payload={"section": section.code, "icon": icon_code},
        )

    return feature


def update_feature(
    *,
    feature_id: str,
    icon_code: Optional[str],
    label: str,
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionFeature:
    feature = get_feature(feature_id)

    icon_code = resolve_icon(feature.section, icon_code)
    label = clean_text(label)
    if not label:
        raise ValidationError("Please enter a label.")

    with transactional():
        feature.icon_code = icon_code
        feature.label = label
        feature.is_active = bool(is_active)
        languages = replace_translations(
            feature,
            SectionFeatureTranslation,
            translations,
            fields=TRANSLATED_FIELDS,
            primary="label",
        )

        log_action(
            actor_id=actor_id,
            action="feature.update",
            entity_type="feature",
            entity_id=feature.id,
            payload={"languages": sorted(languages)},
        )

    return feature


def delete_feature(*, feature_id: str, actor_id: Optional[str] = None) -> None:
    feature = get_feature(feature_id)
    section_id = feature.section_id

    with transactional():
        db.session.delete(feature)
        db.session.flush()

        compact_order(SectionFeature.query.filter_by(section_id=section_id).all())

        log_action(
            actor_id=actor_id,
            action="feature.delete",
            entity_type="feature",
            entity_id=str(feature_id),
            payload={"section_id": section_id},
        )


def reorder_features(*, section_code: str, ordered_ids: List[str], actor_id: Optional[str] = None) -> List[SectionFeature]:
    section = get_section(section_code)

    with transactional():
        ordered = apply_order(
            SectionFeature.query.filter_by(section_id=section.id).all(),
            ordered_ids,
        )
        assert_dense_positions(ordered, "Feature")

        log_action(
            actor_id=actor_id,
            action="feature.reorder",
            entity_type="section",
            entity_id=section.code,
            payload={"count": len(ordered_ids)},
        )

    return ordered

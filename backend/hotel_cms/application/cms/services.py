# hotel_cms/application/cms/services.py
from typing import List, Optional

from hotel_cms.extensions import db
from hotel_cms.models.service import SectionService, SectionServiceTranslation
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.domain.invariants.block import assert_dense_positions
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.order import apply_order, compact_order, next_position
from hotel_cms.utils.transaction import transactional
from .features import resolve_icon
from .sections import get_section, require_capability
from .translations import Translations, clean_text, replace_translations

TRANSLATED_FIELDS = ("label", "description")


def get_service(service_id: Optional[str]) -> SectionService:
    service = db.session.get(SectionService, str(service_id)) if service_id else None
    if not service:
        raise NotFoundError(f"Service '{service_id}' not found")
    return service


def list_services(section_code: str, active_only: bool = False) -> List[SectionService]:
    section = get_section(section_code)

    query = SectionService.query.filter_by(section_id=section.id)
    if active_only:
        query = query.filter_by(is_active=True)

    return query.order_by(SectionService.position.asc()).all()


def create_service(
    *,
    section_code: str,
    icon_code: Optional[str],
    label: str,
    description: str = "",
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionService:
    section = get_section(section_code)
    require_capability(section, "has_services")

    icon_code = resolve_icon(section, icon_code)
    label = clean_text(label)
    if not label:
        raise ValidationError("Please enter a service name.")

    service = SectionService()
    with transactional():
        service.section_id = section.id
        service.icon_code = icon_code
        service.label = label
        service.description = clean_text(description)
        service.is_active = bool(is_active)
        service.position = next_position(SectionService, section_id=section.id)

        db.session.add(service)
        replace_translations(
            service,
            SectionServiceTranslation,
            translations,
            fields=TRANSLATED_FIELDS,
            primary="label",
        )
        db.session.flush()

        log_action(
            actor_id=actor_id,
            action="service.create",
            entity_type="service",
            entity_id=service.id,
            payload={"section": section.code, "icon": icon_code},
        )

    return service


def update_service(
    *,
    service_id: str,
    icon_code: Optional[str],
    label: str,
    description: str = "",
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionService:
    service = get_service(service_id)

    icon_code = resolve_icon(service.section, icon_code)
    label = clean_text(label)
    if not label:
        raise ValidationError("Please enter a service name.")

    with transactional():
        service.icon_code = icon_code
        service.label = label
        service.description = clean_text(description)
        service.is_active = bool(is_active)
        languages = replace_translations(
            service,
            SectionServiceTranslation,
            translations,
            fields=TRANSLATED_FIELDS,
            primary="label",
        )

        log_action(
            actor_id=actor_id,
            action="service.update",
            entity_type="service",
            entity_id=service.id,
            payload={"languages": sorted(languages)},
        )

    return service


def delete_service(*, service_id: str, actor_id: Optional[str] = None) -> None:
    service = get_service(service_id)
    section_id = service.section_id

    with transactional():
        db.session.delete(service)
        db.session.flush()

        compact_order(SectionService.query.filter_by(section_id=section_id).all())

        log_action(
            actor_id=actor_id,
            action="service.delete",
            entity_type="service",
            entity_id=str(service_id),
            payload={"section_id": section_id},
        )


def reorder_services(*, section_code: str, ordered_ids: List[str], actor_id: Optional[str] = None) -> List[SectionService]:
    section = get_section(section_code)

    with transactional():
        ordered = apply_order(
            SectionService.query.filter_by(section_id=section.id).all(),
            ordered_ids,
        )
        assert_dense_positions(ordered, "Service")

        log_action(
            actor_id=actor_id,
            action="service.reorder",
            entity_type="section",
            entity_id=section.code,
            payload={"count": len(ordered_ids)},
        )

    return ordered

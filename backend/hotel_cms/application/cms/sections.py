# hotel_cms/application/cms/sections.py
import re
import unicodedata
from collections import OrderedDict
from typing import Any, Dict, List, Optional

from flask import current_app

from hotel_cms.extensions import db
from hotel_cms.models.section import Section
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.domain.pages import PAGES, is_known_page
from hotel_cms.domain.templates import (
    IMAGE_POSITIONS,
    get_template,
    section_flags_for,
)
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.media import delete_file
from hotel_cms.utils.order import apply_order, compact_order, next_position
from hotel_cms.utils.transaction import transactional

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")

# Section.code column width, with room left for a "_<n>" suffix
CODE_MAX_LENGTH = 100
CODE_SUFFIX_ROOM = 6

# Fixed page headers, always present
STATIC_SECTIONS = (
    {"code": "home_hero", "name": "Accueil - Bandeau", "page": "home", "max_blocks": 3},
    {"code": "services_hero", "name": "Services - Bandeau", "page": "services"},
    {"code": "activities_hero", "name": "Activités - Bandeau", "page": "activities"},
    {"code": "contact_hero", "name": "Contact - Bandeau", "page": "contact"},
)

CAPABILITY_LABELS = {
    "has_features": "features",
    "has_services": "services",
    "has_gallery": "gallery items",
    "has_overlay": "header texts",
}


def get_section(code: Optional[str]) -> Section:
    section = Section.query.filter_by(code=code).first() if code else None
    if not section:
        raise NotFoundError(f"Section '{code}' not found")
    return section


def section_capabilities(section: Section) -> Dict[str, Any]:
    """
    Authoritative capability view of a section.

    Stored flags were fixed from the template when the section was created;
    the extra capabilities are read from the template catalog.
    """
    template = get_template(section.template) or {}
    return {
        "template": section.template,
        "image_mode": section.image_mode,
        "has_title": section.has_title,
        "has_description": section.has_description,
        "has_link": section.has_link,
        "has_features": section.has_features,
        "has_services": section.has_services,
        "has_gallery": section.has_gallery,
        "has_overlay": section.has_overlay,
        "max_blocks": section.max_blocks,
        "supports_image_position": template.get("supports_image_position", False),
        "pins_check_icon": template.get("pins_check_icon", False),
    }


def require_capability(section: Section, flag: str) -> None:
    if not section_capabilities(section).get(flag):
        label = CAPABILITY_LABELS.get(flag, flag)
        raise ValidationError(f"Section '{section.code}' does not accept {label}.")


def list_sections() -> "OrderedDict[str, List[Section]]":
    """All sections grouped by page, pages in navigation order."""
    sections = Section.query.order_by(Section.page.asc(), Section.position.asc()).all()

    grouped: Dict[str, List[Section]] = {}
    for section in sections:
        grouped.setdefault(section.page, []).append(section)

    known = [page for page in PAGES if page in grouped]
    unknown = sorted(page for page in grouped if page not in PAGES)

    return OrderedDict((page, grouped[page]) for page in known + unknown)


def slugify(value: str) -> str:
    value = unicodedata.normalize("NFKD", value).encode("ascii", "ignore").decode("ascii")
    value = re.sub(r"[^a-z0-9]+", "_", value.lower()).strip("_")
    return value or "section"


def _unique_code(base: str) -> str:
    taken = {
        code for (code,) in db.session.query(Section.code).filter(Section.code.like(f"{base}%"))
    }
    if base not in taken:
        return base

    suffix = 2
    while f"{base}_{suffix}" in taken:
        suffix += 1
    return f"{base}_{suffix}"


def create_dynamic_section(
    *,
    page: str,
    template_code: str,
    name: str,
    actor_id: Optional[str] = None,
) -> Section:
    """
    Create an admin-managed section from a catalog template.

    Capability flags come from the template definition only.
    """
    page = (page or "").strip()
    template_code = (template_code or "").strip()
    name = (name or "").strip()

    if not page or not is_known_page(page):
        raise ValidationError("Please choose a valid page.")

    template = get_template(template_code)
    if not template or not template["creatable"]:
        raise ValidationError("Please choose a valid section template.")

    if not name:
        raise ValidationError("Section name is required.")

    section = Section()
    base = f"{page}_{slugify(name)}"[: CODE_MAX_LENGTH - CODE_SUFFIX_ROOM].rstrip("_")
    section.code = _unique_code(base)
    section.name = name
    section.page = page
    section.template = template_code
    section.is_dynamic = True
    for field, value in section_flags_for(template_code).items():
        setattr(section, field, value)

    with transactional():
        section.position = next_position(Section, page=page)
        db.session.add(section)
        db.session.flush()

        log_action(
            actor_id=actor_id,
            action="section.create",
            entity_type="section",
            entity_id=section.code,
            payload={"page": page, "template": template_code, "position": section.position},
        )

    current_app.logger.info(f"Created section {section.code} ({template_code}) on page {page}")
    return section


def _get_dynamic_section(code: str) -> Section:
    section = get_section(code)
    if not section.is_dynamic:
        raise ValidationError(f"Section '{code}' is a fixed section and cannot be changed this way.")
    return section


def rename_dynamic_section(*, code: str, name: str, actor_id: Optional[str] = None) -> Section:
    section = _get_dynamic_section(code)

    name = (name or "").strip()
    if not name:
        raise ValidationError("Section name is required.")

    with transactional():
        old_name = section.name
        section.name = name

        log_action(
            actor_id=actor_id,
            action="section.rename",
            entity_type="section",
            entity_id=section.code,
            payload={"from": old_name, "to": name},
        )

    return section


def delete_dynamic_section(*, code: str, actor_id: Optional[str] = None) -> None:
    """
    Delete a dynamic section with every block, feature, service, gallery
    item, overlay and translation it owns, in one transaction. Image files
    are removed once the rows are gone.
    """
    section = _get_dynamic_section(code)
    page = section.page

    files = [b.image_filename for b in section.blocks if b.image_filename]
    files += [g.image_filename for g in section.gallery_items if g.image_filename]

    with transactional():
        db.session.delete(section)
        db.session.flush()

        compact_order(Section.query.filter_by(page=page).all())

        log_action(
            actor_id=actor_id,
            action="section.delete",
            entity_type="section",
            entity_id=code,
            payload={"page": page, "files": len(files)},
        )

    for path in files:
        delete_file(path)

    current_app.logger.info(f"Deleted section {code} and {len(files)} image file(s)")


def reorder_sections(*, page: str, ordered_codes: List[str], actor_id: Optional[str] = None) -> List[Section]:
    if not is_known_page(page) and not Section.query.filter_by(page=page).first():
        raise NotFoundError(f"Page '{page}' not found")

    with transactional():
        ordered = apply_order(
            Section.query.filter_by(page=page).all(),
            ordered_codes,
            key=lambda s: s.code,
        )

        log_action(
            actor_id=actor_id,
            action="section.reorder",
            entity_type="page",
            entity_id=page,
            payload={"count": len(ordered_codes)},
        )

    return ordered


# Marks an appearance field that was not submitted
UNCHANGED = object()


def set_appearance(
    *,
    code: str,
    background_color: Any = UNCHANGED,
    image_position: Any = UNCHANGED,
    actor_id: Optional[str] = None,
) -> Section:
    """
    Update background colour and image position together.

    Both settings exist only on templates that support image positioning.
    Every submitted value is checked before anything is written, so a
    rejected field leaves the other one untouched as well.
    """
    section = get_section(code)

    changes: Dict[str, Optional[str]] = {}
    if background_color is not UNCHANGED:
        changes["background_color"] = (background_color or "").strip() or None
    if image_position is not UNCHANGED:
        changes["image_position"] = (image_position or "").strip() or None

    if not changes:
        return section

    if not section_capabilities(section)["supports_image_position"]:
        raise ValidationError(
            f"Section '{code}' does not support a background colour or image positioning."
        )

    color = changes.get("background_color")
    if color is not None and not HEX_COLOR.match(color):
        raise ValidationError("Background colour must be a hex value such as #F5F0E8.")

    position = changes.get("image_position")
    if position is not None and position not in IMAGE_POSITIONS:
        raise ValidationError(f"Image position must be one of: {', '.join(IMAGE_POSITIONS)}.")

    with transactional():
        for field, value in changes.items():
            setattr(section, field, value)

        log_action(
            actor_id=actor_id,
            action="section.appearance",
            entity_type="section",
            entity_id=code,
            payload=changes,
        )

    return section


def set_background_color(*, code: str, color: Optional[str], actor_id: Optional[str] = None) -> Section:
    return set_appearance(code=code, background_color=color, actor_id=actor_id)


def set_image_position(*, code: str, position: Optional[str], actor_id: Optional[str] = None) -> Section:
    return set_appearance(code=code, image_position=position, actor_id=actor_id)


def seed_static_sections() -> int:
    """Create the fixed hero sections that are missing. Returns how many were created."""
    created = 0

    with transactional():
        for fixed in STATIC_SECTIONS:
            if Section.query.filter_by(code=fixed["code"]).first():
                continue

            section = Section()
            section.code = fixed["code"]
            section.name = fixed["name"]
            section.page = fixed["page"]
            section.template = "hero"
            section.is_dynamic = False
            for field, value in section_flags_for("hero").items():
                setattr(section, field, value)
            if "max_blocks" in fixed:
                section.max_blocks = fixed["max_blocks"]

            section.position = next_position(Section, page=fixed["page"])
            db.session.add(section)
            db.session.flush()
            created += 1

    return created

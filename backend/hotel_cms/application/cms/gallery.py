# hotel_cms/application/cms/gallery.py
from typing import List, Optional

from werkzeug.datastructures import FileStorage

from hotel_cms.extensions import db
from hotel_cms.models.gallery_item import SectionGalleryItem, SectionGalleryItemTranslation
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.domain.invariants.block import assert_dense_positions
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.media import delete_file, has_upload, save_upload
from hotel_cms.utils.order import apply_order, compact_order, next_position
from hotel_cms.utils.transaction import transactional
from .sections import get_section, require_capability
from .translations import Translations, clean_text, replace_translations

TRANSLATED_FIELDS = ("title", "description")


def get_gallery_item(item_id: Optional[str]) -> SectionGalleryItem:
    item = db.session.get(SectionGalleryItem, str(item_id)) if item_id else None
    if not item:
        raise NotFoundError(f"Gallery item '{item_id}' not found")
    return item


def list_gallery_items(section_code: str, active_only: bool = False) -> List[SectionGalleryItem]:
    section = get_section(section_code)

    query = SectionGalleryItem.query.filter_by(section_id=section.id)
    if active_only:
        query = query.filter_by(is_active=True)

    return query.order_by(SectionGalleryItem.position.asc()).all()


def create_gallery_item(
    *,
    section_code: str,
    title: str,
    image: Optional[FileStorage],
    description: str = "",
    image_alt: str = "",
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionGalleryItem:
    """
    Add a photo to a gallery section. The picture is stored before the row
    is committed and removed again if the commit fails.
    """
    section = get_section(section_code)
    require_capability(section, "has_gallery")

    title = clean_text(title)
    if not title:
        raise ValidationError("Please enter a title.")
    if not has_upload(image):
        raise ValidationError("A picture is required for a gallery item.")

    image_filename = save_upload(image, "gallery")

    item = SectionGalleryItem()
    try:
        with transactional():
            item.section_id = section.id
            item.image_filename = image_filename
            item.title = title
            item.description = clean_text(description)
            item.image_alt = clean_text(image_alt)
            item.is_active = bool(is_active)
            item.position = next_position(SectionGalleryItem, section_id=section.id)

            db.session.add(item)
            replace_translations(
                item,
                SectionGalleryItemTranslation,
                translations,
                fields=TRANSLATED_FIELDS,
                primary="title",
            )
            db.session.flush()

            log_action(
                actor_id=actor_id,
                action="gallery.create",
                entity_type="gallery_item",
                entity_id=item.id,
                payload={"section": section.code},
            )
    except Exception:
        delete_file(image_filename)
        raise

    return item


def update_gallery_item(
    *,
    item_id: str,
    title: str,
    description: str = "",
    image_alt: str = "",
    image: Optional[FileStorage] = None,
    translations: Optional[Translations] = None,
    is_active: bool = True,
    actor_id: Optional[str] = None,
) -> SectionGalleryItem:
    item = get_gallery_item(item_id)

    title = clean_text(title)
    if not title:
        raise ValidationError("Please enter a title.")

    old_filename = item.image_filename
    new_filename = save_upload(image, "gallery") if has_upload(image) else None

    try:
        with transactional():
            if new_filename:
                item.image_filename = new_filename
            item.title = title
            item.description = clean_text(description)
            item.image_alt = clean_text(image_alt)
            item.is_active = bool(is_active)
            languages = replace_translations(
                item,
                SectionGalleryItemTranslation,
                translations,
                fields=TRANSLATED_FIELDS,
                primary="title",
            )

            log_action(
                actor_id=actor_id,
                action="gallery.update",
                entity_type="gallery_item",
                entity_id=item.id,
                payload={"languages": sorted(languages), "image_replaced": bool(new_filename)},
            )
    except Exception:
        if new_filename:
            delete_file(new_filename)
        raise

    if new_filename and old_filename:
        delete_file(old_filename)

    return item


def delete_gallery_item(*, item_id: str, actor_id: Optional[str] = None) -> None:
    item = get_gallery_item(item_id)
    section_id = item.section_id
    image_filename = item.image_filename

    with transactional():
        db.session.delete(item)
        db.session.flush()

        compact_order(SectionGalleryItem.query.filter_by(section_id=section_id).all())

        log_action(
            actor_id=actor_id,
            action="gallery.delete",
            entity_type="gallery_item",
            entity_id=str(item_id),
            payload={"section_id": section_id},
        )

    delete_file(image_filename)


def reorder_gallery_items(*, section_code: str, ordered_ids: List[str], actor_id: Optional[str] = None) -> List[SectionGalleryItem]:
    section = get_section(section_code)

    with transactional():
        ordered = apply_order(
            SectionGalleryItem.query.filter_by(section_id=section.id).all(),
            ordered_ids,
        )
        assert_dense_positions(ordered, "Gallery item")

        log_action(
            actor_id=actor_id,
            action="gallery.reorder",
            entity_type="section",
            entity_id=section.code,
            payload={"count": len(ordered_ids)},
        )

    return ordered

# hotel_cms/application/cms/blocks.py
from dataclasses import dataclass
from typing import List, Optional

from werkzeug.datastructures import FileStorage

from hotel_cms.extensions import db
from hotel_cms.models.content_block import ContentBlock
from hotel_cms.domain.exceptions import NotFoundError, ValidationError
from hotel_cms.domain.invariants.block import assert_block_image, assert_dense_positions
from hotel_cms.domain.templates import IMAGE_FORBIDDEN, IMAGE_REQUIRED
from hotel_cms.utils.audit import log_action
from hotel_cms.utils.media import delete_file, has_upload, save_upload
from hotel_cms.utils.order import apply_order, compact_order, next_position
from hotel_cms.utils.transaction import transactional
from .sections import get_section


@dataclass
class BlockFields:
    """Editable text fields of a content block, as submitted by the admin."""

    title: str = ""
    description: str = ""
    image_alt: str = ""
    link_url: str = ""
    link_text: str = ""
    is_active: bool = True


def _apply_fields(block: ContentBlock, section, fields: BlockFields) -> None:
    # Fields the section does not expose are stored empty, whatever was submitted
    block.title = (fields.title or "").strip() if section.has_title else ""
    block.description = (fields.description or "").strip() if section.has_description else ""
    block.link_url = (fields.link_url or "").strip() if section.has_link else ""
    block.link_text = (fields.link_text or "").strip() if section.has_link else ""
    block.image_alt = (fields.image_alt or "").strip() if section.image_mode != IMAGE_FORBIDDEN else ""
    block.is_active = bool(fields.is_active)


def get_block(block_id: Optional[str]) -> ContentBlock:
    block = db.session.get(ContentBlock, str(block_id)) if block_id else None
    if not block:
        raise NotFoundError(f"Content block '{block_id}' not found")
    return block


def list_blocks(section_code: str, active_only: bool = False) -> List[ContentBlock]:
    section = get_section(section_code)

    query = ContentBlock.query.filter_by(section_id=section.id)
    if active_only:
        query = query.filter_by(is_active=True)

    return query.order_by(ContentBlock.position.asc()).all()


def create_block(
    *,
    section_code: str,
    fields: BlockFields,
    image: Optional[FileStorage] = None,
    actor_id: Optional[str] = None,
) -> ContentBlock:
    """
    Append a content block to a section.

    Everything is validated before the upload is written. The file is
    written first and the row committed afterwards; a failed commit removes
    the new file again.
    """
    section = get_section(section_code)
    with_image = has_upload(image)

    if section.max_blocks is not None:
        count = ContentBlock.query.filter_by(section_id=section.id).count()
        if count >= section.max_blocks:
            raise ValidationError(
                f"This section is limited to {section.max_blocks} block(s)."
            )

    if section.image_mode == IMAGE_FORBIDDEN and with_image:
        raise ValidationError("This section does not accept images.")

    if section.image_mode == IMAGE_REQUIRED and not with_image:
        raise ValidationError("An image is required for this section.")

    image_filename = save_upload(image, "content") if with_image else None

    block = ContentBlock()
    try:
        with transactional():
            block.section_id = section.id
            block.position = next_position(ContentBlock, section_id=section.id)
            block.image_filename = image_filename
            _apply_fields(block, section, fields)

            assert_block_image(section, block.image_filename)

            db.session.add(block)
            db.session.flush()

            log_action(
                actor_id=actor_id,
                action="block.create",
                entity_type="block",
                entity_id=block.id,
                payload={"section": section.code, "position": block.position},
            )
    except Exception:
        if image_filename:
            delete_file(image_filename)
        raise

    return block


def update_block(
    *,
    block_id: str,
    fields: BlockFields,
    image: Optional[FileStorage] = None,
    remove_image: bool = False,
    actor_id: Optional[str] = None,
) -> ContentBlock:
    """
    Update a block's fields and optionally replace or remove its image.

    A replaced image is deleted only after the new one is stored and the
    row committed.
    """
    block = get_block(block_id)
    section = block.section
    with_image = has_upload(image)

    if with_image and section.image_mode == IMAGE_FORBIDDEN:
        raise ValidationError("This section does not accept images.")

    if remove_image and section.image_mode == IMAGE_REQUIRED:
        raise ValidationError("The image cannot be removed: it is required for this section.")

    old_filename = block.image_filename
    if not with_image:
        # Validate the outcome before touching anything
        assert_block_image(section, None if remove_image else old_filename)

    new_filename = save_upload(image, "content") if with_image else None

    try:
        with transactional():
            if new_filename:
                block.image_filename = new_filename
            elif remove_image:
                block.image_filename = None
            _apply_fields(block, section, fields)

            assert_block_image(section, block.image_filename)

            log_action(
                actor_id=actor_id,
                action="block.update",
                entity_type="block",
                entity_id=block.id,
                payload={
                    "section": section.code,
                    "image": "replaced" if new_filename else ("removed" if remove_image else "kept"),
                },
            )
    except Exception:
        if new_filename:
            delete_file(new_filename)
        raise

    if old_filename and old_filename != block.image_filename:
        delete_file(old_filename)

    return block


def delete_block(*, block_id: str, actor_id: Optional[str] = None) -> None:
    block = get_block(block_id)
    section_id = block.section_id
    image_filename = block.image_filename

    with transactional():
        db.session.delete(block)
        db.session.flush()

        compact_order(ContentBlock.query.filter_by(section_id=section_id).all())

        log_action(
            actor_id=actor_id,
            action="block.delete",
            entity_type="block",
            entity_id=str(block_id),
            payload={"section_id": section_id},
        )

    if image_filename:
        delete_file(image_filename)


def reorder_blocks(*, section_code: str, ordered_ids: List[str], actor_id: Optional[str] = None) -> List[ContentBlock]:
    section = get_section(section_code)

    with transactional():
        ordered = apply_order(
            ContentBlock.query.filter_by(section_id=section.id).all(),
            ordered_ids,
        )
        assert_dense_positions(ordered, "Block")

        log_action(
            actor_id=actor_id,
            action="block.reorder",
            entity_type="section",
            entity_id=section.code,
            payload={"count": len(ordered_ids)},
        )

    return ordered

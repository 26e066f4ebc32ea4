from .media import media_url


def normalize_block(block, admin=False):
    base = {
        "id": block.id,
        "position": block.position,
        "title": block.title,
        "description": block.description,
        "image_filename": block.image_filename,
        "image_url": media_url(block.image_filename),
        "image_alt": block.image_alt,
        "link_url": block.link_url,
        "link_text": block.link_text,
        "is_active": block.is_active,
    }

    if admin:
        base["created_at"] = block.created_at.isoformat() if block.created_at else None
        base["updated_at"] = block.updated_at.isoformat() if block.updated_at else None

    return base

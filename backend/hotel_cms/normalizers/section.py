from hotel_cms.application.cms.sections import section_capabilities
from hotel_cms.domain.pages import page_name
from .block import normalize_block


def normalize_section(section, admin=False, include_blocks=False):
    data = {
        "code": section.code,
        "name": section.name,
        "page": section.page,
        "page_name": page_name(section.page),
        "template": section.template,
        "position": section.position,
        "is_dynamic": section.is_dynamic,
        "background_color": section.background_color,
        "image_position": section.image_position,
        "capabilities": section_capabilities(section),
    }

    if include_blocks:
        data["blocks"] = [
            normalize_block(b, admin=admin) for b in section.blocks
        ]

    return data


def normalize_sections_by_page(grouped):
    return [
        {
            "page": page,
            "page_name": page_name(page),
            "sections": [normalize_section(s) for s in sections],
        }
        for page, sections in grouped.items()
    ]

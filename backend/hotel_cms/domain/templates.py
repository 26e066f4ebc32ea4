"""
Section template catalog.

A template fixes, at section creation time, which sub-entities a section
accepts and how its content blocks treat images. Sections copy these flags
into their own columns; the catalog remains the reference for the extra
capabilities (image positioning and background colour, pinned checklist icon).
"""
from typing import Any, Dict, Optional

IMAGE_REQUIRED = "required"
IMAGE_OPTIONAL = "optional"
IMAGE_FORBIDDEN = "forbidden"

IMAGE_MODES = (IMAGE_REQUIRED, IMAGE_OPTIONAL, IMAGE_FORBIDDEN)

IMAGE_POSITIONS = ("left", "right", "top", "bottom")

CHECK_ICON = "check"

_NO_FLAGS: Dict[str, Any] = {
    "has_title": False,
    "has_description": False,
    "has_link": False,
    "has_features": False,
    "has_services": False,
    "has_gallery": False,
    "has_overlay": False,
    "max_blocks": None,
    "supports_image_position": False,
    "pins_check_icon": False,
}


def _template(name: str, description: str, *, image_mode: str, creatable: bool = True, **flags) -> Dict[str, Any]:
    unknown = set(flags) - set(_NO_FLAGS)
    if unknown:
        raise ValueError(f"Unknown template flags: {sorted(unknown)}")
    if image_mode not in IMAGE_MODES:
        raise ValueError(f"Unknown image mode: {image_mode}")

    return {
        "name": name,
        "description": description,
        "image_mode": image_mode,
        "creatable": creatable,
        **_NO_FLAGS,
        **flags,
    }


TEMPLATES: Dict[str, Dict[str, Any]] = {
    # Fixed page headers, seeded only
    "hero": _template(
        "Bandeau d'en-tête",
        "Full-width header images with an overlay title.",
        image_mode=IMAGE_REQUIRED,
        creatable=False,
        has_overlay=True,
        max_blocks=1,
    ),
    "text_image": _template(
        "Texte et image",
        "A title, a paragraph and an optional picture beside it.",
        image_mode=IMAGE_OPTIONAL,
        has_title=True,
        has_description=True,
        has_link=True,
        has_overlay=True,
        max_blocks=1,
        supports_image_position=True,
    ),
    "text_only": _template(
        "Texte seul",
        "Free text blocks without pictures.",
        image_mode=IMAGE_FORBIDDEN,
        has_title=True,
        has_description=True,
        has_link=True,
        has_overlay=True,
    ),
    "cards": _template(
        "Cartes illustrées",
        "A grid of cards, each with a picture, a title and a short text.",
        image_mode=IMAGE_REQUIRED,
        has_title=True,
        has_description=True,
        has_link=True,
        has_overlay=True,
    ),
    "services_grid": _template(
        "Grille de services",
        "Icon, label and description for each service offered.",
        image_mode=IMAGE_FORBIDDEN,
        has_services=True,
        has_overlay=True,
    ),
    "features_bar": _template(
        "Indicateurs",
        "A row of short highlights, each with an icon.",
        image_mode=IMAGE_FORBIDDEN,
        has_features=True,
    ),
    "checklist": _template(
        "Liste à cocher",
        "A text with an optional picture and a list of checked items.",
        image_mode=IMAGE_OPTIONAL,
        has_title=True,
        has_description=True,
        has_features=True,
        has_overlay=True,
        max_blocks=1,
        supports_image_position=True,
        pins_check_icon=True,
    ),
    "gallery": _template(
        "Galerie",
        "A photo gallery with captions.",
        image_mode=IMAGE_FORBIDDEN,
        has_gallery=True,
        has_overlay=True,
    ),
}

# Columns copied onto a Section when it is created from a template
SECTION_FLAG_FIELDS = (
    "image_mode",
    "has_title",
    "has_description",
    "has_link",
    "has_features",
    "has_services",
    "has_gallery",
    "has_overlay",
    "max_blocks",
)


def get_template(code: Optional[str]) -> Optional[Dict[str, Any]]:
    if not code:
        return None
    return TEMPLATES.get(code)


def creatable_templates() -> Dict[str, Dict[str, Any]]:
    return {code: t for code, t in TEMPLATES.items() if t["creatable"]}


def section_flags_for(code: str) -> Dict[str, Any]:
    """
    Capability columns a new section of this template receives.
    Raises KeyError for an unknown template code.
    """
    template = TEMPLATES[code]
    return {field: template[field] for field in SECTION_FLAG_FIELDS}

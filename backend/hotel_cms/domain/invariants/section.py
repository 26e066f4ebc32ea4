from .block import assert_block_image, assert_dense_positions, assert_image_mode
from ..exceptions import InvariantViolation


def assert_section(section):
    """
    Full consistency check of one section and its collections.
    """
    assert_image_mode(section)

    assert_dense_positions(section.blocks, "Block")
    assert_dense_positions(section.features, "Feature")
    assert_dense_positions(section.services, "Service")
    assert_dense_positions(section.gallery_items, "Gallery item")

    for block in section.blocks:
        assert_block_image(section, block.image_filename)

    if section.max_blocks is not None and len(section.blocks) > section.max_blocks:
        raise InvariantViolation(
            f"Section '{section.code}' holds {len(section.blocks)} blocks, "
            f"limit is {section.max_blocks}."
        )

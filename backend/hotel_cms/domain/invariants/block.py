from ..templates import IMAGE_FORBIDDEN, IMAGE_MODES, IMAGE_REQUIRED
from ..exceptions import InvariantViolation


def assert_dense_positions(items, label="Item"):
    positions = [item.position for item in items]
    if not positions:
        return

    expected = list(range(len(positions)))
    if sorted(positions) != expected:
        raise InvariantViolation(
            f"{label} positions are not consecutive starting from 0: {positions}"
        )


def assert_image_mode(section):
    if section.image_mode not in IMAGE_MODES:
        raise InvariantViolation(
            f"Section '{section.code}' has an unknown image mode '{section.image_mode}'."
        )


def assert_block_image(section, image_filename):
    if section.image_mode == IMAGE_REQUIRED and not image_filename:
        raise InvariantViolation(
            f"Section '{section.code}' requires an image on every block."
        )
    if section.image_mode == IMAGE_FORBIDDEN and image_filename:
        raise InvariantViolation(
            f"Section '{section.code}' does not accept images."
        )

from typing import Tuple

from pbn.constants import DARK_TEXT, DARK_TEXT_DIM, LIGHT_TEXT, LIGHT_TEXT_DIM, LUMA_THRESHOLD

RGB = Tuple[int, int, int]


def luma(rgb: RGB) -> float:
    """Perceived brightness in 0..1 (ITU-R BT.601 weights)."""
    r, g, b = rgb
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255.0


def text_colors_for(background: RGB) -> tuple[RGB, RGB]:
    """Return (dim, normal) text colors readable on ``background``."""
    if luma(background) > LUMA_THRESHOLD:
        return DARK_TEXT_DIM, DARK_TEXT
    return LIGHT_TEXT_DIM, LIGHT_TEXT

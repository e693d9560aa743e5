"""Contact sheet of the angled rectangle fill with its construction drawn on top.

Run directly with:
    python examples/css_gradient_demo.py [output.png]
"""
import logging
import sys
from typing import Tuple

from PIL import Image

from chromaline import DEFAULT_CONFIG
from chromaline.render import render_css_gradient

logger = logging.getLogger(__name__)


def angle_sheet(output_path: str | None = None, show: bool = False) -> Image.Image:
    cell_width = 300
    cell_height = 120
    margin = 40
    n_horizontal = 4
    angles = [0, DEFAULT_CONFIG.default_angle, 30, 45, 90, 120, 180, 200, -90, -135, 270, 405]
    n_vertical = (len(angles) + n_horizontal - 1) // n_horizontal

    def get_row_column(index: int) -> Tuple[int, int]:
        return index // n_horizontal, index % n_horizontal

    step_x = cell_width + margin
    step_y = cell_height + margin
    canvas = Image.new('RGBA', (step_x * n_horizontal + margin, step_y * n_vertical + margin), (255, 255, 255, 255))
    for index, angle in enumerate(angles):
        logger.info("Rendering %d deg", angle)
        cell = render_css_gradient(angle, cell_width, cell_height)
        row, column = get_row_column(index)
        canvas.paste(cell, (margin + column * step_x, margin + row * step_y))

    if output_path:
        canvas.save(output_path)
    elif show:
        canvas.show()
    return canvas


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    angle_sheet(sys.argv[1] if len(sys.argv) > 1 else "css_gradient_angles.png")

"""Animated gradient text sweep, saved as a GIF.

The offset is driven by a ``TweenDriver`` exactly as an interactive host
would poll it once per frame; here the clock is stepped by hand so the
frames are evenly spaced.

Run directly with:
    python examples/text_sweep_demo.py [output.gif]
"""
import logging
import sys
from typing import List

from PIL import Image

from chromaline import DEFAULT_CONFIG, GradientDemoState, GradientPainter, TEXT_STOPS
from chromaline.render import load_font, paint_mask, text_mask

logger = logging.getLogger(__name__)


class SteppedClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def text_sweep(text: str = "Chromaline", fps: int = 30, output_path: str | None = None) -> List[Image.Image]:
    clock = SteppedClock()
    state = GradientDemoState()
    driver = state.make_driver(clock=clock)
    painter = GradientPainter(TEXT_STOPS, scale_x=DEFAULT_CONFIG.text_x_scale)
    mask = text_mask(text, load_font(DEFAULT_CONFIG.text_font_size), padding=8)
    width, height = mask.size

    frames = []
    state.start_animation(driver)
    while True:
        fill = painter.paint(state.angle, width, height, lambda: driver.value)
        frames.append(paint_mask(mask, fill))
        if not state.sync(driver):
            break
        clock.now += 1.0 / fps

    logger.info("Rendered %d frames, %d fills built", len(frames), painter.builds)
    if output_path:
        frames[0].save(
            output_path,
            save_all=True,
            append_images=frames[1:],
            duration=int(1000 / fps),
            loop=0,
            disposal=2,
        )
    return frames


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    text_sweep(output_path=sys.argv[1] if len(sys.argv) > 1 else "text_sweep.gif")

"""Basic Chromaline usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from chromaline import (
    REFERENCE_STOPS,
    ColorStopTable,
    build_fill,
    resolve_gradient_layout,
    resolve_gradient_line,
    to_color,
)


def demonstrate_geometry() -> None:
    # Axis-aligned angles take the shortcut, everything else is projected.
    for angle in (0, 90, 180, -90, -16, 45):
        line = resolve_gradient_line(angle, 500, 100)
        print(f"{angle:>4}deg -> start={tuple(round(v, 2) for v in line.start)} "
              f"end={tuple(round(v, 2) for v in line.end)} length={line.length:.2f}")

    layout = resolve_gradient_layout(-16, 500, 100)
    print("Reference corners:", layout.start_corner, layout.end_corner, layout.kind.value)


def demonstrate_fills() -> None:
    line = resolve_gradient_line(-16, 500, 100)
    fill = build_fill(REFERENCE_STOPS, line)
    print("Start color:", fill.color_at(*line.start).to_hex())
    print("Center color:", fill.color_at(250, 50).to_hex())
    print("End color:", fill.color_at(*line.end).to_hex())

    # The same point before and after the text sweep.
    for offset in (-1.0, 0.0):
        swept = build_fill(REFERENCE_STOPS, line, offset, 4.0, width=500)
        print(f"offset {offset:+.0f}:", swept.color_at(250, 50).to_hex())

    # Stops accept hex strings, packed ARGB ints and channel tuples alike.
    table = ColorStopTable([(0.0, "#4285F4"), (0.5, 0xFF9B72CB), (1.0, (217, 101, 112))])
    print("Ramp:", [to_color(tuple(c)).to_hex() for c in table.ramp(5)])


if __name__ == "__main__":
    demonstrate_geometry()
    demonstrate_fills()

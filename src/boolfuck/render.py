from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from .tape import Tape

BACKGROUND = (25, 25, 25)
POINTER = (255, 165, 0)
ONE = (40, 200, 40)
ZERO = (60, 60, 60)
OUTLINE = (100, 100, 100)
TEXT = (200, 200, 200)


def render_tape(
    tape: Tape,
    *,
    radius: int = 64,
    cell_size: int = 14,
    cells_per_row: int = 32,
    steps: Optional[int] = None,
) -> Image.Image:
    """Draw the bits within ``radius`` of the pointer as a grid of cells.

    The pointer cell is orange, set bits green and clear bits grey.
    """
    start = tape.pointer - radius
    bits = tape.window(start, tape.pointer + radius + 1)
    rows = (len(bits) + cells_per_row - 1) // cells_per_row

    header = 24
    margin = 10
    width = margin * 2 + cells_per_row * cell_size
    height = header + margin * 2 + rows * cell_size
    img = Image.new('RGB', (width, height), color=BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    low, high = tape.bounds()
    status = f"ptr {tape.pointer}  visited [{low}, {high}]"
    if steps is not None:
        status += f"  steps {steps:,}"
    draw.text((margin, margin // 2), status, fill=TEXT, font=font)

    for i, bit in enumerate(bits):
        row = i // cells_per_row
        col = i % cells_per_row
        x = margin + col * cell_size
        y = header + margin + row * cell_size

        if start + i == tape.pointer:
            fill_color = POINTER
        elif bit:
            fill_color = ONE
        else:
            fill_color = ZERO
        draw.rectangle([x, y, x + cell_size - 2, y + cell_size - 2], fill=fill_color, outline=OUTLINE)

    return img


def save_tape_image(tape: Tape, path: str | Path, **kwargs) -> Path:
    p = Path(path)
    render_tape(tape, **kwargs).save(p)
    return p

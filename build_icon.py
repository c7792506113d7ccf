#!/usr/bin/env python3
"""Render the pie indicator as assets/icon.png and a multi-size assets/icon.ico.
Run:
  python build_icon.py [progress]
Creates assets/icon.png and assets/icon.ico for packaging.
"""
import sys
from pathlib import Path

from PIL import Image, ImageDraw

from core.arc import polygon_points, render_pie
from core.config import BACKGROUND, DEMO_TINT


def render_icon(size: int = 256, progress: float = 0.3, tint: str = DEMO_TINT) -> Image.Image:
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=int(size * 0.2), fill=BACKGROUND)
    pie = render_pie(progress, tint, size, size)
    if not pie.is_degenerate:
        pts = [tuple(p) for p in polygon_points(pie).tolist()]
        draw.polygon(pts, fill=pie.fill)
    return img


def main():
    root = Path(__file__).parent
    progress = float(sys.argv[1]) if len(sys.argv) > 1 else 0.3
    assets = root / 'assets'
    assets.mkdir(exist_ok=True)
    png = assets / 'icon.png'
    ico = assets / 'icon.ico'
    img = render_icon(256, progress)
    img.save(png)
    sizes = [(256,256),(128,128),(64,64),(48,48),(32,32),(24,24),(16,16)]
    img.save(ico, sizes=sizes)
    print('Wrote', png, 'and', ico)

if __name__ == '__main__':
    main()

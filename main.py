from __future__ import annotations

import sys
import os
import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon, QPixmap, QPainter, QColor, QLinearGradient
from PySide6.QtWidgets import QApplication

from core.arc import render_pie
from core.config import DEMO_TINT, INITIAL_PROGRESS


def _generate_app_icon(size: int = 256) -> QIcon:
    from ui.indicators import slice_path

    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)
    p = QPainter(pm)
    p.setRenderHint(QPainter.Antialiasing)
    g = QLinearGradient(0, 0, size, size)
    g.setColorAt(0.0, QColor(80, 80, 80))
    g.setColorAt(1.0, QColor(40, 40, 40))
    p.setBrush(g)
    p.setPen(Qt.NoPen)
    p.drawRoundedRect(0, 0, size, size, size * 0.2, size * 0.2)
    # Fixed 30% slice, readable at small icon sizes
    pie = render_pie(max(INITIAL_PROGRESS, 0.3), DEMO_TINT, size, size)
    p.setBrush(QColor(pie.fill))
    p.drawPath(slice_path(pie))
    p.end()
    return QIcon(pm)


def _configure_logging() -> None:
    level = os.environ.get("PIELOADER_LOG", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    _configure_logging()
    try:
        from ui.main_window import MainWindow
        app = QApplication(sys.argv)

        # App icon: prefer the file written by build_icon.py, fallback to generated pixmap
        icon = None
        try:
            base = os.path.dirname(os.path.abspath(__file__))
            png_path = os.path.join(base, "assets", "icon.png")
            if os.path.exists(png_path):
                icon = QIcon(png_path)
        except Exception:
            icon = None
        if icon is None or icon.isNull():
            icon = _generate_app_icon(256)
        app.setWindowIcon(icon)

        w = MainWindow()
        w.setWindowIcon(icon)
        w.show()

        sys.exit(app.exec())
    except Exception as e:
        import traceback
        print("Startup error:", e)
        traceback.print_exc()


if __name__ == "__main__":
    main()

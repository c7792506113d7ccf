from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction, QColor
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QPushButton, QApplication

from qt_material import apply_stylesheet

from core.config import (
    DARK_THEMES,
    DEMO_TINT,
    INCREMENT_STEP,
    INDICATOR_SIZE,
    INITIAL_PROGRESS,
    LIGHT_THEME,
)
from .indicators import PieIndicator

log = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("PieLoader")
        self.resize(480, 520)

        # Theming (apply to the QApplication instance)
        self._theme = None
        app = QApplication.instance()
        if app is not None:
            for theme in DARK_THEMES:
                try:
                    apply_stylesheet(app, theme=theme)
                    self._theme = theme
                    break
                except Exception:
                    log.debug("theme %s unavailable", theme, exc_info=True)
                    continue
        self._is_dark = True

        self.indicator = PieIndicator(INDICATOR_SIZE)
        self.indicator.setTintColor(QColor(DEMO_TINT))
        self.indicator.setProgress(INITIAL_PROGRESS)

        self.btn_increment = QPushButton("Increment")
        self.btn_spin = QPushButton("Spin")
        for btn in (self.btn_increment, self.btn_spin):
            btn.setFixedWidth(INDICATOR_SIZE)

        root = QWidget()
        root_l = QVBoxLayout(root)
        root_l.addStretch(1)
        root_l.addWidget(self.indicator, alignment=Qt.AlignHCenter)
        root_l.addWidget(self.btn_increment, alignment=Qt.AlignHCenter)
        root_l.addWidget(self.btn_spin, alignment=Qt.AlignHCenter)
        root_l.addStretch(1)
        self.setCentralWidget(root)

        # Signals
        self.btn_increment.clicked.connect(self.on_increment)
        self.btn_spin.clicked.connect(self.on_toggle_spin)
        self.indicator.spinningChanged.connect(self._on_spinning_changed)

        # Menu theme switch (light/dark)
        theme_action = QAction("Toggle Theme", self)
        theme_action.triggered.connect(self.toggle_theme)
        self.menuBar().addAction(theme_action)

    # UI Actions
    def on_increment(self):
        self.indicator.advance(INCREMENT_STEP)

    def on_toggle_spin(self):
        if not self.indicator.isSpinning():
            self.indicator.spin()
        else:
            self.indicator.stop()

    def toggle_theme(self):
        self._is_dark = not self._is_dark
        theme = (self._theme or DARK_THEMES[0]) if self._is_dark else LIGHT_THEME
        app = QApplication.instance()
        if app is not None:
            try:
                apply_stylesheet(app, theme=theme)
            except Exception:
                log.warning("could not apply theme %s", theme, exc_info=True)

    def _on_spinning_changed(self, spinning: bool):
        self.btn_spin.setText("Stop" if spinning else "Spin")

    def closeEvent(self, event):
        self.indicator.stop()
        super().closeEvent(event)

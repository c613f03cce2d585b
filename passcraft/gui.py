# passcraft/gui.py
# Single-window generator: length slider, class toggles, copy button, strength bar

import sys
import logging
from functools import partial

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QClipboard
from PySide6.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel,
    QLineEdit, QPushButton, QSlider, QCheckBox, QProgressBar, QGroupBox,
)

from passcraft.config import load_config, policy_from_config
from passcraft.errors import InvalidPolicy
from passcraft.generator import generate
from passcraft.score import MAX_SCORE, score

log = logging.getLogger(__name__)

TIER_COLORS = {"red": "#ef4444", "yellow": "#eab308", "green": "#22c55e"}

CLASS_TOGGLES = (
    ("include_uppercase", "Uppercase (A-Z)"),
    ("include_lowercase", "Lowercase (a-z)"),
    ("include_numbers", "Numbers (0-9)"),
    ("include_symbols", "Symbols (!@#$...)"),
)


class PasscraftWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Passcraft Password Generator")
        self.setMinimumSize(520, 360)

        self.cfg = load_config()
        self.ui_min = int(self.cfg.get("ui_min_length", 6))
        self.ui_max = int(self.cfg.get("ui_max_length", 32))
        self.copied_reset_ms = int(self.cfg.get("copied_reset_ms", 2000))
        self.policy = policy_from_config(self.cfg)
        self.password = ""

        layout = QVBoxLayout()
        self.setLayout(layout)

        row = QHBoxLayout()
        self.txt_password = QLineEdit()
        self.txt_password.setReadOnly(True)
        self.btn_regenerate = QPushButton("Regenerate")
        self.btn_copy = QPushButton("Copy")
        row.addWidget(self.txt_password, 1)
        row.addWidget(self.btn_regenerate)
        row.addWidget(self.btn_copy)
        layout.addLayout(row)

        self.lbl_strength = QLabel()
        self.bar_strength = QProgressBar()
        self.bar_strength.setRange(0, MAX_SCORE)
        self.bar_strength.setTextVisible(False)
        layout.addWidget(self.lbl_strength)
        layout.addWidget(self.bar_strength)

        box = QGroupBox("Options")
        grid = QGridLayout()
        box.setLayout(grid)
        self.lbl_length = QLabel()
        self.slider_length = QSlider(Qt.Horizontal)
        self.slider_length.setRange(self.ui_min, self.ui_max)
        self.slider_length.setValue(min(max(self.policy.length, self.ui_min), self.ui_max))
        grid.addWidget(self.lbl_length, 0, 0)
        grid.addWidget(self.slider_length, 0, 1)

        self.toggles = {}
        for i, (key, text) in enumerate(CLASS_TOGGLES):
            chk = QCheckBox(text)
            chk.setChecked(bool(getattr(self.policy, key)))
            chk.toggled.connect(partial(self.on_toggle, key))
            grid.addWidget(chk, 1 + i // 2, i % 2)
            self.toggles[key] = chk
        layout.addWidget(box)

        self.slider_length.valueChanged.connect(self.on_length_changed)
        self.btn_regenerate.clicked.connect(self.regenerate)
        self.btn_copy.clicked.connect(self.on_copy)

        self.on_length_changed(self.slider_length.value())

    def current_policy(self):
        flags = {key: chk.isChecked() for key, chk in self.toggles.items()}
        return policy_from_config(self.cfg, length=self.slider_length.value(), **flags)

    def regenerate(self):
        policy = self.current_policy()
        try:
            pw = generate(policy)
        except InvalidPolicy:
            # keep the previous password on screen
            log.exception("Error generating password")
            return
        self.policy = policy
        self.password = pw
        self.txt_password.setText(pw)
        self.btn_copy.setText("Copy")
        self.refresh_strength()

    def refresh_strength(self):
        if not self.password:
            self.bar_strength.setValue(0)
            self.lbl_strength.setText("Strength: N/A")
            return
        result = score(self.password, self.current_policy())
        self.bar_strength.setValue(result.score)
        self.bar_strength.setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {TIER_COLORS[result.color_tier]}; }}"
        )
        self.lbl_strength.setText(f"Strength: {result.label} ({result.score}/{MAX_SCORE})")

    def on_length_changed(self, value: int):
        self.lbl_length.setText(f"Length: {value}")
        self.regenerate()

    def on_toggle(self, key: str, checked: bool):
        if not checked and not any(chk.isChecked() for chk in self.toggles.values()):
            # at least one class must stay enabled
            chk = self.toggles[key]
            chk.blockSignals(True)
            chk.setChecked(True)
            chk.blockSignals(False)
            return
        self.regenerate()

    def on_copy(self):
        if not self.password:
            return
        clipboard: QClipboard = QApplication.clipboard()
        clipboard.setText(self.password, mode=QClipboard.Clipboard)
        self.btn_copy.setText("Copied")
        QTimer.singleShot(self.copied_reset_ms, lambda: self.btn_copy.setText("Copy"))


def main():
    logging.basicConfig(level=load_config().get("log_level", "WARNING"))
    app = QApplication(sys.argv)
    win = PasscraftWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()

"""
ControlWindow — camera canvas on the left, every effect control on the
right, plus the data-stream panel and a status log.

Widgets never touch effect state directly: each change goes through
EffectComposer.apply(), which owns the side effects (quote re-tokenising,
clearing drawings).
"""
from __future__ import annotations
import logging
from typing import Dict

import cv2
import numpy as np
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QImage, QPixmap
from PyQt6.QtWidgets import (
    QButtonGroup, QCheckBox, QColorDialog, QFrame, QGroupBox, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QRadioButton, QSizePolicy, QSlider,
    QSpinBox, QTextEdit, QVBoxLayout, QWidget,
)

from core.data_stream import NO_DATA_MESSAGE
from core.effect_composer import EffectComposer
from domain.enums import DataStreamOption, VideoFilter
from utils.constants import MAX_PIXEL_SIZE

logger = logging.getLogger(__name__)

_STYLE = """
    QWidget {
        background-color: #000000;
        color: #e0e0e0;
        font-family: 'Segoe UI', Consolas, monospace;
    }
    QLabel#title {
        font-size: 14px;
        font-weight: bold;
        color: #F5F5FC;
        padding: 4px 0;
    }
    QGroupBox {
        border: 1px solid #334;
        border-radius: 5px;
        margin-top: 8px;
        padding: 6px;
    }
    QTextEdit#log, QTextEdit#telemetry {
        background-color: #111118;
        color: #7ec8a0;
        font-size: 11px;
        border: 1px solid #333;
        border-radius: 4px;
    }
    QPushButton {
        background-color: #3F3737;
        color: #a0c4ff;
        border: 1px solid #334;
        border-radius: 5px;
        padding: 6px 14px;
        font-size: 12px;
    }
    QPushButton:hover { background-color: #1F1B1B; }
    QPushButton:pressed { background-color: #0E0C0C; }
"""

# (label, control name)
_TOGGLES = (
    ("Show video",               "show_video"),
    ("Face mesh",                "show_face"),
    ("Hands",                    "show_hands"),
    ("Pixelate face",            "show_pixelation"),
    ("Data stream panel",        "show_data_stream"),
    ("Data on visualization",    "show_data_on_visualization"),
    ("Wink trigger",             "wink_trigger"),
    ("Mouth text trigger",       "mouth_text_trigger"),
    ("Wrist circle trigger",     "wrist_circle_trigger"),
    ("Fingertip drawing",        "show_fingertip_drawing"),
)

_OPTION_LABELS = {
    DataStreamOption.MOUTH_OPEN:          "Mouth open",
    DataStreamOption.LEFT_EYE_OPEN:       "Left eye open",
    DataStreamOption.RIGHT_EYE_OPEN:      "Right eye open",
    DataStreamOption.NOSE_CENTER:         "Nose center",
    DataStreamOption.WRIST_POSITION:      "Wrist positions",
    DataStreamOption.HAND_OPEN:           "Hand open",
    DataStreamOption.FINGERTIP_POSITIONS: "Fingertip positions",
}

_FILTER_LABELS = {
    VideoFilter.NONE:   "None",
    VideoFilter.BW:     "Black & white",
    VideoFilter.INVERT: "Invert",
}


class ControlWindow(QWidget):
    """
    Main window.

    - Camera canvas with every effect already rendered by the worker.
    - Toggles, sliders and pickers for the control state.
    - Data-stream panel and status log fed by CameraWorker signals.
    """

    def __init__(self, composer: EffectComposer, title: str = "GestureFX", parent=None) -> None:
        super().__init__(parent)
        self._composer = composer
        self._checks: Dict[str, QCheckBox] = {}
        self._setup_ui(title)

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------
    def _setup_ui(self, title: str) -> None:
        self.setWindowTitle(title)
        self.setMinimumSize(1100, 640)
        self.setStyleSheet(_STYLE)
        controls = self._composer.controls

        root = QHBoxLayout(self)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(10)

        # ---- LEFT: camera + telemetry ----------------------------------
        left = QVBoxLayout()
        left.setSpacing(6)

        title_label = QLabel("Camera")
        title_label.setObjectName("title")
        left.addWidget(title_label)

        self._camera_label = QLabel()
        self._camera_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._camera_label.setMinimumSize(640, 480)
        self._camera_label.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding
        )
        self._camera_label.setStyleSheet(
            "background:#000; border-radius:6px; border:1px solid #334;"
        )
        left.addWidget(self._camera_label, stretch=1)

        self._count_label = QLabel("Detections: 0")
        left.addWidget(self._count_label)

        self._telemetry = QTextEdit()
        self._telemetry.setObjectName("telemetry")
        self._telemetry.setReadOnly(True)
        self._telemetry.setMaximumHeight(140)
        self._telemetry.setVisible(controls.show_data_stream)
        self._telemetry.setPlainText(NO_DATA_MESSAGE)
        left.addWidget(self._telemetry)

        root.addLayout(left, stretch=3)

        # ---- RIGHT: controls + log ----------------------------------------
        right = QVBoxLayout()
        right.setSpacing(8)

        toggles = QGroupBox("Effects")
        toggles_layout = QVBoxLayout(toggles)
        for label, name in _TOGGLES:
            box = QCheckBox(label)
            box.setChecked(bool(getattr(controls, name)))
            box.toggled.connect(lambda checked, n=name: self._on_toggle(n, checked))
            toggles_layout.addWidget(box)
            self._checks[name] = box
        right.addWidget(toggles)

        # pixel size
        pixel_row = QHBoxLayout()
        pixel_row.addWidget(QLabel("Pixel size"))
        self._pixel_slider = QSlider(Qt.Orientation.Horizontal)
        self._pixel_slider.setRange(1, MAX_PIXEL_SIZE)
        self._pixel_slider.setValue(controls.pixel_size)
        self._pixel_slider.valueChanged.connect(lambda v: self._apply(pixel_size=v))
        pixel_row.addWidget(self._pixel_slider)
        right.addLayout(pixel_row)

        # video filter
        filters = QGroupBox("Video filter")
        filters_layout = QHBoxLayout(filters)
        self._filter_group = QButtonGroup(self)
        for video_filter, label in _FILTER_LABELS.items():
            radio = QRadioButton(label)
            radio.setChecked(controls.video_filter == video_filter)
            radio.toggled.connect(
                lambda checked, f=video_filter: self._on_filter(f, checked)
            )
            self._filter_group.addButton(radio)
            filters_layout.addWidget(radio)
        right.addWidget(filters)

        # mouth text
        quote_box = QGroupBox("Mouth text")
        quote_layout = QVBoxLayout(quote_box)
        self._quote_edit = QLineEdit(controls.quote)
        self._quote_edit.editingFinished.connect(
            lambda: self._apply(quote=self._quote_edit.text())
        )
        quote_layout.addWidget(self._quote_edit)
        interval_row = QHBoxLayout()
        interval_row.addWidget(QLabel("Word interval (ms)"))
        self._interval_spin = QSpinBox()
        self._interval_spin.setRange(50, 2000)
        self._interval_spin.setSingleStep(50)
        self._interval_spin.setValue(controls.word_display_ms)
        self._interval_spin.valueChanged.connect(lambda v: self._apply(word_display_ms=v))
        interval_row.addWidget(self._interval_spin)
        quote_layout.addLayout(interval_row)
        right.addWidget(quote_box)

        # drawing
        drawing_row = QHBoxLayout()
        self._color_btn = QPushButton("Drawing color")
        self._color_btn.clicked.connect(self._pick_color)
        drawing_row.addWidget(self._color_btn)
        clear_btn = QPushButton("Clear drawing")
        clear_btn.clicked.connect(self._on_clear_drawing)
        drawing_row.addWidget(clear_btn)
        right.addLayout(drawing_row)
        self._update_color_button(controls.drawing_color)

        # data options
        options = QGroupBox("Data stream")
        options_layout = QVBoxLayout(options)
        for option, label in _OPTION_LABELS.items():
            box = QCheckBox(label)
            box.setChecked(option in controls.data_stream_options)
            box.toggled.connect(
                lambda checked, o=option: self._composer.set_option(o, checked)
            )
            options_layout.addWidget(box)
        right.addWidget(options)

        sep = QFrame()
        sep.setFrameShape(QFrame.Shape.HLine)
        right.addWidget(sep)

        right.addWidget(QLabel("Console log"))
        self._log = QTextEdit()
        self._log.setObjectName("log")
        self._log.setReadOnly(True)
        self._log.setMaximumHeight(160)
        right.addWidget(self._log)

        right.addStretch()
        root.addLayout(right, stretch=1)

    # ------------------------------------------------------------------
    # Control handlers
    # ------------------------------------------------------------------
    def _apply(self, **changes) -> None:
        try:
            self._composer.apply(**changes)
        except ValueError as exc:
            logger.warning("[CONTROLS] Rejected %s: %s", changes, exc)
            self.on_status(f"[ERROR] {exc}")

    def _on_toggle(self, name: str, checked: bool) -> None:
        self._apply(**{name: checked})
        if name == "show_data_stream":
            self._telemetry.setVisible(checked)

    def _on_filter(self, video_filter: VideoFilter, checked: bool) -> None:
        if checked:
            self._apply(video_filter=video_filter)

    def _pick_color(self) -> None:
        color = QColorDialog.getColor(QColor(self._composer.controls.drawing_color), self)
        if color.isValid():
            self._apply(drawing_color=color.name())
            self._update_color_button(color.name())

    def _update_color_button(self, hex_color: str) -> None:
        self._color_btn.setStyleSheet(f"border: 2px solid {hex_color};")

    def _on_clear_drawing(self) -> None:
        self._composer.clear_drawing()
        self.on_status("[DRAW] Cleared")

    # ------------------------------------------------------------------
    # Slots called from CameraWorker signals
    # ------------------------------------------------------------------
    def on_frame(self, frame: np.ndarray) -> None:
        """Receives a rendered BGR frame and shows it."""
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        h, w, ch = frame_rgb.shape
        img = QImage(frame_rgb.data, w, h, ch * w, QImage.Format.Format_RGB888)
        pix = QPixmap.fromImage(img).scaled(
            self._camera_label.size(),
            Qt.AspectRatioMode.KeepAspectRatio,
            Qt.TransformationMode.SmoothTransformation,
        )
        self._camera_label.setPixmap(pix)

    def on_telemetry(self, values: dict) -> None:
        if not values:
            self._telemetry.setPlainText(NO_DATA_MESSAGE)
            return
        self._telemetry.setPlainText("\n".join(f"{k}: {v}" for k, v in values.items()))

    def on_counts(self, count: int) -> None:
        self._count_label.setText(f"Detections: {count}")

    def on_status(self, msg: str) -> None:
        """System / debug messages to the log."""
        if msg.startswith("[ERROR]"):
            self._log.append(f"<span style='color:#ff6b6b'>{msg}</span>")
        elif msg.startswith("[WARN]"):
            self._log.append(f"<span style='color:#e0b050'>{msg}</span>")
        else:
            self._log.append(f"<span style='color:#6699cc'>{msg}</span>")
        sb = self._log.verticalScrollBar()
        sb.setValue(sb.maximum())

"""
CameraWorker — runs the capture / detect / compose / render loop in a
QThread and emits signals with everything the UI needs.

Keeps processing completely separate from the widgets.
"""
from __future__ import annotations
import logging
import time
from typing import Optional

import numpy as np
from PyQt6.QtCore import QThread, pyqtSignal

from app.config import AppConfig
from app.renderer import OpenCVRenderer
from core.camera import Camera
from core.detection_poller import DetectionPoller
from core.effect_composer import EffectComposer
from core.image_filters import apply_video_filter
from core.pose_provider import MediaPipePoseProvider, PoseProvider

logger = logging.getLogger(__name__)


class CameraWorker(QThread):
    """
    QThread driving the whole pipeline.

    Signals emitted every frame:
        frame_ready     — rendered BGR frame as np.ndarray
        telemetry_ready — dict of data-stream values (only while the panel is on)
        counts_changed  — number of detected faces + hands, on change
        status_msg      — log line for the UI status box
    """

    frame_ready     = pyqtSignal(np.ndarray)
    telemetry_ready = pyqtSignal(dict)
    counts_changed  = pyqtSignal(int)
    status_msg      = pyqtSignal(str)

    def __init__(
        self,
        config: AppConfig,
        composer: EffectComposer,
        provider: Optional[PoseProvider] = None,
        parent=None,
    ) -> None:
        super().__init__(parent)
        self._config   = config
        self._composer = composer
        self._provider = provider
        self._running  = False

        # Created in run() so they live on the worker thread
        self._camera: Optional[Camera]          = None
        self._poller: Optional[DetectionPoller] = None
        self._renderer = OpenCVRenderer()

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main loop — runs on the worker thread."""
        cfg = self._config

        try:
            self._camera = Camera(cfg.camera_device, cfg.fps_limit, mirror=cfg.mirror)
            if self._provider is None:
                self._provider = MediaPipePoseProvider(
                    max_num_hands=cfg.max_num_hands,
                    min_face_detection_confidence=cfg.min_face_detection_confidence,
                    min_face_tracking_confidence=cfg.min_face_tracking_confidence,
                    min_hand_detection_confidence=cfg.min_hand_detection_confidence,
                    min_hand_tracking_confidence=cfg.min_hand_tracking_confidence,
                )
            self._poller = DetectionPoller(
                self._provider,
                self._composer.slots,
                poll_interval=cfg.poll_interval,
                on_status=self.status_msg.emit,
            )
        except Exception as exc:
            logger.exception("[ERROR] Initialisation failed")
            self.status_msg.emit(f"[ERROR] Initialisation: {exc}")
            self._cleanup()
            return

        self._composer.set_text_measure(self._renderer.text_width)
        self._poller.start()
        self._running = True
        self.status_msg.emit("[INFO] Pipeline started")

        started = time.monotonic()
        prev_count = -1

        while self._running:
            frame = self._camera.read()
            if frame is None:
                self.status_msg.emit("[WARN] Empty frame, retrying")
                time.sleep(0.05)
                continue

            self._poller.submit_frame(frame)

            controls = self._composer.controls
            if controls.show_video:
                canvas = apply_video_filter(frame, controls.video_filter)
            else:
                canvas = np.zeros_like(frame)

            h, w = canvas.shape[:2]
            now_ms = int((time.monotonic() - started) * 1000)
            commands = self._composer.compose(now_ms, w, h)
            canvas = self._renderer.render(canvas, commands)

            count = self._composer.slots.snapshot().detection_count
            if count != prev_count:
                self.counts_changed.emit(count)
                prev_count = count

            if controls.show_data_stream:
                self.telemetry_ready.emit(self._composer.telemetry())

            self.frame_ready.emit(canvas)

        self._cleanup()

    # ------------------------------------------------------------------
    def stop(self) -> None:
        self._running = False
        self.wait(3000)  # wait up to 3s for the loop to finish

    def _cleanup(self) -> None:
        if self._poller:
            self._poller.stop()
        if self._camera:
            self._camera.release()
        if self._provider:
            self._provider.close()
        self.status_msg.emit("[INFO] Pipeline stopped")

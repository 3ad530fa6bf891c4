"""
main.py — Application entry point.

    Camera → DetectionPoller → LandmarkSlots
           → EffectComposer → OpenCVRenderer → ControlWindow

Each component is independently testable and replaceable.
"""
from __future__ import annotations
import logging
import sys

from PyQt6.QtWidgets import QApplication

from app.camera_worker import CameraWorker
from app.config import AppConfig, default_config
from app.control_window import ControlWindow
from core.effect_composer import EffectComposer
from core.landmark_slots import LandmarkSlots

logger = logging.getLogger(__name__)


def run(config: AppConfig = default_config) -> int:
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    logger.info("=" * 55)
    logger.info("  %s", config.window_title)
    logger.info("  Camera  : %d (mirror=%s)", config.camera_device, config.mirror)
    logger.info("  FPS cap : %d", config.fps_limit)
    logger.info("  Poll    : %.0f ms", config.poll_interval * 1000)
    logger.info("=" * 55)

    app = QApplication(sys.argv)

    slots    = LandmarkSlots(reject_stale=config.reject_stale_results)
    composer = EffectComposer(slots)
    window   = ControlWindow(composer, title=config.window_title)
    worker   = CameraWorker(config, composer)

    worker.frame_ready.connect(window.on_frame)
    worker.telemetry_ready.connect(window.on_telemetry)
    worker.counts_changed.connect(window.on_counts)
    worker.status_msg.connect(window.on_status)
    app.aboutToQuit.connect(worker.stop)

    window.show()
    worker.start()
    code = app.exec()
    logger.info("Application closed cleanly")
    return code


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()

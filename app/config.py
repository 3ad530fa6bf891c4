from __future__ import annotations
from dataclasses import dataclass

from utils.constants import POLL_INTERVAL


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Effect tuning values live in utils/constants.py; this holds the knobs
    that change per machine or per run.
    """
    # ---- camera --------------------------------------------------------
    camera_device: int = 0
    fps_limit: int = 30
    mirror: bool = True

    # ---- detection -----------------------------------------------------
    poll_interval: float = POLL_INTERVAL      # seconds between detection requests
    max_num_hands: int = 2
    min_face_detection_confidence: float = 0.5
    min_face_tracking_confidence: float = 0.5
    min_hand_detection_confidence: float = 0.5
    min_hand_tracking_confidence: float = 0.5

    # Drop detection results that finish after a newer one.
    reject_stale_results: bool = True

    # ---- ui / logging --------------------------------------------------
    window_title: str = "GestureFX"
    log_level: str = "INFO"


# Default singleton: import and use directly, or build your own in tests.
default_config = AppConfig()

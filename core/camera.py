"""
Camera — thin wrapper around OpenCV VideoCapture with FPS limiting.
Frames come out mirrored by default so the canvas behaves like a mirror and
every landmark is already in the viewer's orientation.
"""
from __future__ import annotations
import time
from typing import Optional

import cv2
import numpy as np


class Camera:
    """
    Parameters
    ----------
    device : int
        Camera index (0 = default webcam).
    fps_limit : int
        Maximum frames per second to deliver.
    mirror : bool
        Flip frames horizontally before returning them.
    """

    def __init__(self, device: int = 0, fps_limit: int = 30, mirror: bool = True) -> None:
        if fps_limit <= 0:
            raise ValueError(f"fps_limit must be positive, got {fps_limit}")
        self._cap = cv2.VideoCapture(device)
        self._frame_time = 1.0 / fps_limit
        self._prev_time: float = 0.0
        self._mirror = mirror

        if not self._cap.isOpened():
            raise RuntimeError(f"Cannot open camera device {device}")

    # ------------------------------------------------------------------
    def read(self) -> Optional[np.ndarray]:
        """
        Wait until the next frame is due (FPS limiter), then return it.
        Returns None on read failure.
        """
        wait = self._frame_time - (time.monotonic() - self._prev_time)
        if wait > 0:
            time.sleep(wait)
        self._prev_time = time.monotonic()

        ret, frame = self._cap.read()
        if not ret:
            return None
        return cv2.flip(frame, 1) if self._mirror else frame

    def release(self) -> None:
        self._cap.release()

    def __enter__(self) -> "Camera":
        return self

    def __exit__(self, *_) -> None:
        self.release()

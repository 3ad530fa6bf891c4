"""
Individual visual effects: landmark overlays and the gesture triggers.
"""

from .base import Effect
from .landmark_overlay import FaceMeshOverlay, HandOverlay
from .pixelation import FacePixelationEffect
from .data_labels import DataLabelsEffect
from .wink import WinkEffect
from .mouth_text import MouthTextEffect
from .wrist_circle import WristCircleEffect
from .fingertip_drawing import FingertipDrawingEffect

__all__ = [
    'Effect',
    'FaceMeshOverlay',
    'HandOverlay',
    'FacePixelationEffect',
    'DataLabelsEffect',
    'WinkEffect',
    'MouthTextEffect',
    'WristCircleEffect',
    'FingertipDrawingEffect',
]

from core.landmark_slots import LandmarkSlots
from core.wink_detector import WinkDetector
from core.mouth_text import MouthTextProgression
from core.drawing_paths import DrawingPathAccumulator
from core.data_stream import DataStreamFormatter

__all__ = [
    "LandmarkSlots",
    "WinkDetector",
    "MouthTextProgression",
    "DrawingPathAccumulator",
    "DataStreamFormatter",
]

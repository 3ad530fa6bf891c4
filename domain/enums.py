from enum import Enum, IntEnum


class Handedness(str, Enum):
    """Handedness label reported by the pose provider for each hand."""
    LEFT    = "Left"
    RIGHT   = "Right"
    UNKNOWN = "Unknown"


class EyeSide(str, Enum):
    """Subject's eye (subject's left appears on the viewer's right)."""
    LEFT  = "left"
    RIGHT = "right"


class Finger(IntEnum):
    """Fixed fingertip order used by every per-finger sequence."""
    THUMB  = 0
    INDEX  = 1
    MIDDLE = 2
    RING   = 3
    PINKY  = 4


class WinkState(str, Enum):
    NO_WINK = "NO_WINK"
    WINKING = "WINKING"


class MouthTextPhase(str, Enum):
    IDLE      = "IDLE"
    REVEALING = "REVEALING"


class DrawingState(str, Enum):
    IDLE    = "IDLE"
    DRAWING = "DRAWING"


class DataStreamOption(str, Enum):
    """Telemetry values the data-stream panel can show."""
    MOUTH_OPEN          = "mouthOpen"
    LEFT_EYE_OPEN       = "leftEyeOpen"
    RIGHT_EYE_OPEN      = "rightEyeOpen"
    NOSE_CENTER         = "noseCenter"
    WRIST_POSITION      = "wristPosition"
    HAND_OPEN           = "handOpen"
    FINGERTIP_POSITIONS = "fingertipPositions"


class VideoFilter(str, Enum):
    NONE   = "none"
    BW     = "bw"
    INVERT = "invert"


class TextAlign(str, Enum):
    LEFT   = "left"
    CENTER = "center"
    RIGHT  = "right"


class TextBaseline(str, Enum):
    TOP      = "top"
    CENTER   = "center"
    BASELINE = "baseline"

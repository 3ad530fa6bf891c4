# =========================
# FEATURE THRESHOLDS (landmark pixel units)
# =========================
MOUTH_OPEN_THRESHOLD       = 15.0   # inner-lip gap
EYE_OPEN_THRESHOLD         = 8.0    # eyelid gap
FIST_RADIUS                = 100.0  # fingertip counts as closed inside this wrist radius
FIST_MIN_CLOSED_FINGERS    = 3
FINGER_EXTENSION_TOLERANCE = 20.0   # tip must be this much further from the wrist than the base

# =========================
# DETECTION POLLING
# =========================
POLL_INTERVAL = 0.1                 # seconds between provider requests

# =========================
# LANDMARK OVERLAYS
# =========================
POINT_SIZE          = 5
LINE_THICKNESS      = 2
HAND_COLOR          = (255, 0, 102)     # hot pink
HAND_LABEL_SIZE     = 12
HAND_LABEL_OFFSET   = 20
FACE_RAMP_EXPONENT  = 0.2               # < 1 pushes the ramp towards blue sooner

# =========================
# PIXELATION
# =========================
PIXELATION_PADDING       = 40
PIXELATION_MIN_LANDMARKS = 10
PIXELATION_MIN_SIZE      = 50
MAX_PIXEL_SIZE           = 50

# =========================
# WINK
# =========================
WINK_TEXT       = "WINK"
WINK_TEXT_SIZE  = 72
WINK_COLOR      = (255, 20, 147)        # deep pink
WINK_OUTLINE    = (255, 255, 255)

# =========================
# MOUTH TEXT
# =========================
DEFAULT_QUOTE = (
    "The apparatus of surveillance has become so normalized that we perform "
    "for invisible audiences, transforming every gesture into data, every "
    "glance into currency for algorithmic interpretation."
)
DEFAULT_WORD_DISPLAY_MS = 200
MOUTH_TEXT_SIZE         = 24
MOUTH_TEXT_LINE_HEIGHT  = 30
MOUTH_TEXT_TOP          = 50
MOUTH_TEXT_MARGIN       = 40
MOUTH_TEXT_COLOR        = (255, 255, 0)
MOUTH_TEXT_OUTLINE      = (0, 0, 0)

# =========================
# WRIST CIRCLE
# =========================
WRIST_DISTANCE_MIN = 50.0
WRIST_DISTANCE_MAX = 400.0
CIRCLE_SIZE_MIN    = 20.0
CIRCLE_SIZE_MAX    = 200.0
CIRCLE_COLOR       = (255, 255, 255)

# =========================
# FINGERTIP DRAWING
# =========================
DEFAULT_DRAWING_COLOR  = "#FFFF00"
DRAWING_STROKE         = 3
DRAWING_INDICATOR_SIZE = 10

# =========================
# DATA LABELS
# =========================
LABEL_TEXT_SIZE = 11
LABEL_COLOR     = (255, 255, 0)
LABEL_OUTLINE   = (0, 0, 0)

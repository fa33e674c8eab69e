"""Configuration constants for the quadrant matching game."""

from dataclasses import dataclass
from enum import Enum


class ColorSlot(Enum):
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"


class ScoringPolicy(Enum):
    IMMEDIATE = "immediate"
    COOLDOWN = "cooldown"


class ScoreDisplay(Enum):
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


# =============================================================================
# CANVAS
# =============================================================================
CANVAS_WIDTH = 480
CANVAS_HEIGHT = 360


# =============================================================================
# SCORING / RESHUFFLE
# =============================================================================
MATCH_AWARD = 10
RESHUFFLE_INTERVAL_S = 10.0
POST_SCORE_RESHUFFLE_DELAY_S = 2.0

# Initial quadrant order: 0=TL, 1=TR, 2=BL, 3=BR
INITIAL_ASSIGNMENT = (ColorSlot.GREEN, ColorSlot.RED, ColorSlot.YELLOW, ColorSlot.BLUE)


# =============================================================================
# FEEDBACK
# =============================================================================
FLASH_TEXT = "BINGO!"
FLASH_DURATION_S = 1.0
BEEP_FREQUENCY_HZ = 440.0
BEEP_DURATION_S = 0.1
BEEP_VOLUME = 0.1
AUDIO_SAMPLE_RATE = 22050


# =============================================================================
# HAND TRACKING
# =============================================================================
MAX_NUM_HANDS = 1
MIN_DETECTION_CONFIDENCE = 0.5
MIN_TRACKING_CONFIDENCE = 0.5
MODEL_COMPLEXITY = 1
NUM_HAND_LANDMARKS = 21

# Fingertip landmark index -> color the fingertip must land on
FINGERTIPS = {
    8: ColorSlot.GREEN,    # index
    12: ColorSlot.RED,     # middle
    16: ColorSlot.YELLOW,  # ring
    20: ColorSlot.BLUE,    # pinky
}


# =============================================================================
# RENDERING (BGR)
# =============================================================================
SLOT_COLORS_BGR = {
    ColorSlot.GREEN: (0, 255, 0),
    ColorSlot.RED: (0, 0, 255),
    ColorSlot.YELLOW: (0, 255, 255),
    ColorSlot.BLUE: (255, 0, 0),
}
COLOR_GRAY = (128, 128, 128)
COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0)

OVERLAY_ALPHA = 0.5
MARKER_RADIUS = 6
LANDMARK_RADIUS = 4
WINDOW_NAME = "Finger Quadrants"


@dataclass
class GameConfig:
    """Run-time choices for one game session."""
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    policy: ScoringPolicy = ScoringPolicy.COOLDOWN
    award: int = MATCH_AWARD
    reshuffle_interval_s: float = RESHUFFLE_INTERVAL_S
    post_score_delay_s: float = POST_SCORE_RESHUFFLE_DELAY_S

    camera_index: int = 0
    mirror: bool = False
    draw_all_landmarks: bool = False
    score_display: ScoreDisplay = ScoreDisplay.BOTTOM_CENTER
    sound: bool = True
    flash: bool = True

    max_num_hands: int = MAX_NUM_HANDS
    min_detection_confidence: float = MIN_DETECTION_CONFIDENCE
    min_tracking_confidence: float = MIN_TRACKING_CONFIDENCE
    model_path: str | None = None
    seed: int | None = None

    @classmethod
    def cooldown_variant(cls) -> "GameConfig":
        """Gated scoring with sound and flash feedback."""
        return cls()

    @classmethod
    def immediate_variant(cls) -> "GameConfig":
        """Scores every frame a full match is seen; no feedback cues."""
        return cls(
            policy=ScoringPolicy.IMMEDIATE,
            draw_all_landmarks=True,
            score_display=ScoreDisplay.BOTTOM_RIGHT,
            sound=False,
            flash=False,
        )

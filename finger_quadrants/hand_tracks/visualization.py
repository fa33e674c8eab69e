"""Visualization utilities for the quadrant game."""

from typing import Sequence

import cv2
import numpy as np
from numpy.typing import NDArray

from ..game.config import (
    COLOR_BLACK,
    COLOR_GRAY,
    COLOR_WHITE,
    FINGERTIPS,
    LANDMARK_RADIUS,
    MARKER_RADIUS,
    OVERLAY_ALPHA,
    SLOT_COLORS_BGR,
    WINDOW_NAME,
    ColorSlot,
    ScoreDisplay,
)
from ..game.matching import TrackedPoint
from ..game.quadrants import QUADRANTS, quadrant_rect

FONT = cv2.FONT_HERSHEY_SIMPLEX


def draw_quadrants(
    frame: NDArray[np.uint8],
    assignment: Sequence[ColorSlot],
    alpha: float = OVERLAY_ALPHA,
) -> None:
    """Blend the four colored quadrants over the frame in place."""
    h, w = frame.shape[:2]
    overlay = frame.copy()
    for idx in QUADRANTS:
        x1, y1, x2, y2 = quadrant_rect(idx, w, h)
        cv2.rectangle(overlay, (x1, y1), (x2 - 1, y2 - 1), SLOT_COLORS_BGR[assignment[idx]], -1)
    cv2.addWeighted(overlay, alpha, frame, 1 - alpha, 0, dst=frame)


def draw_tracked_points(frame: NDArray[np.uint8], points: Sequence[TrackedPoint]) -> None:
    """Draw a marker on each fingertip in the color it is hunting for."""
    h, w = frame.shape[:2]
    for p in points:
        cv2.circle(frame, p.to_pixels(w, h), MARKER_RADIUS, SLOT_COLORS_BGR[p.color], -1)


def draw_all_landmarks(frame: NDArray[np.uint8], landmarks: Sequence[tuple[float, float]]) -> None:
    """Draw every landmark, gray except the four colored fingertips."""
    h, w = frame.shape[:2]
    for i, (x, y) in enumerate(landmarks):
        slot = FINGERTIPS.get(i)
        color = SLOT_COLORS_BGR[slot] if slot else COLOR_GRAY
        cv2.circle(frame, (int(x * w), int(y * h)), LANDMARK_RADIUS, color, -1)


def draw_score(
    frame: NDArray[np.uint8],
    score: int,
    position: ScoreDisplay = ScoreDisplay.BOTTOM_CENTER,
) -> None:
    """Draw 'Score: N' along the bottom edge."""
    h, w = frame.shape[:2]
    text = f"Score: {score}"
    (tw, th), _ = cv2.getTextSize(text, FONT, 0.8, 2)
    if position is ScoreDisplay.BOTTOM_RIGHT:
        x = w - tw - 20
    else:
        x = (w - tw) // 2
    y = h - 20
    cv2.putText(frame, text, (x, y), FONT, 0.8, COLOR_BLACK, 4, cv2.LINE_AA)
    cv2.putText(frame, text, (x, y), FONT, 0.8, COLOR_WHITE, 2, cv2.LINE_AA)


def draw_flash(frame: NDArray[np.uint8], text: str) -> None:
    """Draw the big centered success banner."""
    h, w = frame.shape[:2]
    (tw, th), _ = cv2.getTextSize(text, FONT, 2.0, 5)
    org = ((w - tw) // 2, (h + th) // 2)
    cv2.putText(frame, text, org, FONT, 2.0, COLOR_BLACK, 9, cv2.LINE_AA)
    cv2.putText(frame, text, org, FONT, 2.0, COLOR_WHITE, 5, cv2.LINE_AA)


class GameDisplay:
    """Manages OpenCV window and visualization."""

    def __init__(
        self,
        window_name: str = WINDOW_NAME,
        score_display: ScoreDisplay = ScoreDisplay.BOTTOM_CENTER,
        all_landmarks: bool = False,
    ):
        self.window_name = window_name
        self.score_display = score_display
        self.all_landmarks = all_landmarks
        cv2.namedWindow(window_name, cv2.WINDOW_NORMAL)

    def render(
        self,
        frame: NDArray[np.uint8],
        assignment: Sequence[ColorSlot],
        hands: Sequence[Sequence[tuple[float, float]]],
        points: Sequence[TrackedPoint],
        score: int,
        flash_text: str | None = None,
    ) -> None:
        """Draw all visualizations on frame."""
        draw_quadrants(frame, assignment)
        if self.all_landmarks:
            for landmarks in hands:
                draw_all_landmarks(frame, landmarks)
        else:
            draw_tracked_points(frame, points)
        draw_score(frame, score, self.score_display)
        if flash_text:
            draw_flash(frame, flash_text)

    def show(self, frame: NDArray[np.uint8]) -> int:
        """Display frame and return key press."""
        cv2.imshow(self.window_name, frame)
        return cv2.waitKey(1) & 0xFF

    def close(self) -> None:
        """Close display window."""
        cv2.destroyWindow(self.window_name)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

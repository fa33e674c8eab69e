"""MediaPipe hand tracking wrapper."""

import shutil
import time
import urllib.error
import urllib.request
from pathlib import Path
from typing import Sequence

import cv2
import mediapipe as mp
import numpy as np
from numpy.typing import NDArray

from ..game.config import (
    FINGERTIPS,
    MAX_NUM_HANDS,
    MIN_DETECTION_CONFIDENCE,
    MIN_TRACKING_CONFIDENCE,
    MODEL_COMPLEXITY,
)
from ..game.matching import TrackedPoint


DEFAULT_MODEL_URL = (
    "https://storage.googleapis.com/mediapipe-models/hand_landmarker/"
    "hand_landmarker/float16/1/hand_landmarker.task"
)
DEFAULT_MODEL_DIR = Path.home() / ".cache" / "finger_quadrants"

Landmarks = list[tuple[float, float]]


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


def extract_tracked_points(landmarks: Sequence[tuple[float, float]]) -> list[TrackedPoint]:
    """
    Pick the four fingertips out of a landmark set and label them with colors.

    A truncated landmark set yields only the fingertips it contains.
    """
    return [
        TrackedPoint(color, float(landmarks[idx][0]), float(landmarks[idx][1]))
        for idx, color in FINGERTIPS.items()
        if idx < len(landmarks)
    ]


def detect_backend() -> str:
    """Prefer the legacy solutions API; newer mediapipe ships only tasks."""
    if hasattr(mp, "solutions") and hasattr(mp.solutions, "hands"):
        return "solutions"
    return "tasks"


def ensure_model(model_path: str | None = None, model_dir: Path = DEFAULT_MODEL_DIR) -> Path:
    """
    Locate the hand landmarker model, downloading it on first use.

    Raises:
        FileNotFoundError: explicit model_path does not exist
        RuntimeError: download failed
    """
    if model_path:
        path = Path(model_path).expanduser().resolve()
        if not path.exists():
            raise FileNotFoundError(
                f"Model file not found at {path}. "
                "Pass a valid --model-path to a hand_landmarker.task file."
            )
        return path

    path = model_dir / "hand_landmarker.task"
    if path.exists():
        return path

    model_dir.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(".task.tmp")
    print(f"[{_timestamp()}] Downloading hand landmarker model to {path}")
    try:
        with urllib.request.urlopen(DEFAULT_MODEL_URL, timeout=60) as response:
            with open(tmp_path, "wb") as output_file:
                shutil.copyfileobj(response, output_file)
        tmp_path.replace(path)
    except (urllib.error.URLError, TimeoutError, OSError) as exc:
        raise RuntimeError(
            "Failed to download the hand landmarker model automatically. "
            f"Download it manually from {DEFAULT_MODEL_URL} and run with --model-path."
        ) from exc
    return path


class HandTracker:
    """Wrapper for MediaPipe hand tracking."""

    def __init__(
        self,
        max_num_hands: int = MAX_NUM_HANDS,
        min_detection_confidence: float = MIN_DETECTION_CONFIDENCE,
        min_tracking_confidence: float = MIN_TRACKING_CONFIDENCE,
        model_path: str | None = None,
    ):
        self.backend = detect_backend()
        self._last_timestamp_ms = 0

        if self.backend == "solutions":
            self._hands = mp.solutions.hands.Hands(
                static_image_mode=False,
                max_num_hands=max_num_hands,
                model_complexity=MODEL_COMPLEXITY,
                min_detection_confidence=min_detection_confidence,
                min_tracking_confidence=min_tracking_confidence,
            )
        else:
            vision = mp.tasks.vision
            options = vision.HandLandmarkerOptions(
                base_options=mp.tasks.BaseOptions(
                    model_asset_path=str(ensure_model(model_path))
                ),
                running_mode=vision.RunningMode.VIDEO,
                num_hands=max_num_hands,
                min_hand_detection_confidence=min_detection_confidence,
                min_hand_presence_confidence=min_tracking_confidence,
                min_tracking_confidence=min_tracking_confidence,
            )
            self._hands = vision.HandLandmarker.create_from_options(options)

        print(f"[{_timestamp()}] Hand tracking backend: {self.backend}")

    def _next_timestamp_ms(self) -> int:
        now_ms = int(time.time() * 1000)
        if now_ms <= self._last_timestamp_ms:
            now_ms = self._last_timestamp_ms + 1
        self._last_timestamp_ms = now_ms
        return now_ms

    def process(self, frame: NDArray[np.uint8]) -> list[Landmarks]:
        """
        Detect hands in a BGR frame.

        Returns:
            One list of normalized (x, y) landmarks per detected hand
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        if self.backend == "solutions":
            results = self._hands.process(rgb)
            hands = results.multi_hand_landmarks or []
            return [[(lm.x, lm.y) for lm in hand.landmark] for hand in hands]
        else:
            image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)
            results = self._hands.detect_for_video(image, self._next_timestamp_ms())
            hands = results.hand_landmarks or []
            return [[(lm.x, lm.y) for lm in hand] for hand in hands]

    def close(self) -> None:
        """Release resources."""
        self._hands.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

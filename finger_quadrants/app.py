"""
Finger Quadrants

Webcam game: put index, middle, ring and pinky fingertips on the quadrants
showing their colors (green, red, yellow, blue) to score.
"""

import argparse
import time

import cv2

from .game import GameConfig, ScoringPolicy
from .hand_tracks import GameDisplay, HandTracker
from .session import GameSession


INSTRUCTIONS = """
==================================================
Finger Quadrants
==================================================

Fingertip colors:
  Index = green   Middle = red   Ring = yellow   Pinky = blue

Place all four fingertips on their colored quadrants to score.
Colors reshuffle every {interval:g} seconds.

Controls:
  'r'        - Reshuffle now
  'q' or ESC - Quit
"""


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


def open_camera(config: GameConfig):
    """Open the webcam at the canvas resolution, or return None."""
    cap = cv2.VideoCapture(config.camera_index)
    if not cap.isOpened():
        cap.release()
        return None
    cap.set(cv2.CAP_PROP_FRAME_WIDTH, config.width)
    cap.set(cv2.CAP_PROP_FRAME_HEIGHT, config.height)
    return cap


def run_game(config: GameConfig) -> int:
    """Run the game loop until the player quits. Returns a process exit code."""
    print(INSTRUCTIONS.format(interval=config.reshuffle_interval_s))

    cap = open_camera(config)
    if cap is None:
        print(f"Error: Cannot open camera {config.camera_index}")
        print("Check that a webcam is connected and that camera access is allowed.")
        return 1
    print(f"[{_timestamp()}] Camera {config.camera_index} opened ({config.policy.value} scoring)")

    session = GameSession(config, start=time.monotonic())
    try:
        with HandTracker(
            max_num_hands=config.max_num_hands,
            min_detection_confidence=config.min_detection_confidence,
            min_tracking_confidence=config.min_tracking_confidence,
            model_path=config.model_path,
        ) as tracker, GameDisplay(
            score_display=config.score_display,
            all_landmarks=config.draw_all_landmarks,
        ) as display:
            while True:
                ret, frame = cap.read()
                if not ret:
                    continue

                frame = cv2.resize(frame, (config.width, config.height))
                if config.mirror:
                    frame = cv2.flip(frame, 1)

                now = time.monotonic()
                hands = tracker.process(frame)
                session.on_frame(hands, now)

                display.render(
                    frame,
                    session.state.assignment,
                    hands,
                    session.last_points,
                    session.state.score,
                    session.flash_text(now),
                )

                key = display.show(frame)
                if key in (ord("q"), 27):
                    break
                if key == ord("r"):
                    session.request_reshuffle(time.monotonic())
    finally:
        cap.release()
        cv2.destroyAllWindows()
        session.close()

    print(f"[{_timestamp()}] Final score: {session.state.score}")
    return 0


def parse_args(argv: list[str] | None = None) -> GameConfig:
    parser = argparse.ArgumentParser(description="Finger Quadrants webcam game")
    parser.add_argument("-c", "--camera", type=int, default=0, help="Camera index")
    parser.add_argument(
        "--variant",
        choices=("cooldown", "immediate"),
        default="cooldown",
        help="Preset: gated scoring with feedback, or score on every matching frame",
    )
    parser.add_argument(
        "--policy",
        choices=[p.value for p in ScoringPolicy],
        default=None,
        help="Override the preset's scoring policy",
    )
    parser.add_argument("--mirror", action="store_true", help="Mirror the camera (selfie view)")
    parser.add_argument("--all-landmarks", action="store_true", help="Draw all 21 hand landmarks")
    parser.add_argument("--mute", action="store_true", help="Disable the success sound")
    parser.add_argument(
        "--model-path",
        type=str,
        default=None,
        help="Path to hand_landmarker.task (used for MediaPipe Tasks backend)",
    )
    parser.add_argument("--min-det-confidence", type=float, default=None, help="Minimum hand detection confidence")
    parser.add_argument("--min-track-confidence", type=float, default=None, help="Minimum hand tracking confidence")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the color shuffle")
    args = parser.parse_args(argv)

    if args.variant == "immediate":
        config = GameConfig.immediate_variant()
    else:
        config = GameConfig.cooldown_variant()

    config.camera_index = args.camera
    if args.policy:
        config.policy = ScoringPolicy(args.policy)
    config.mirror = args.mirror
    config.draw_all_landmarks = config.draw_all_landmarks or args.all_landmarks
    config.sound = config.sound and not args.mute
    config.model_path = args.model_path
    if args.min_det_confidence is not None:
        config.min_detection_confidence = args.min_det_confidence
    if args.min_track_confidence is not None:
        config.min_tracking_confidence = args.min_track_confidence
    config.seed = args.seed
    return config


def main(argv: list[str] | None = None) -> int:
    return run_game(parse_args(argv))


if __name__ == "__main__":
    raise SystemExit(main())

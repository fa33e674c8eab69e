"""
Finger Quadrants launcher.

Run from the repository root: python quadrant_game.py --camera 0
"""

from finger_quadrants.app import main


if __name__ == "__main__":
    raise SystemExit(main())

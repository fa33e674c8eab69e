"""
Test suite for the score/gate state machine

Run with: python -m pytest finger_quadrants/game/test_state.py -v
"""

import random
import unittest
from collections import Counter
from unittest.mock import MagicMock

from finger_quadrants.game.config import ColorSlot, GameConfig, ScoringPolicy
from finger_quadrants.game.state import (
    AssignmentChanged,
    FrameEvaluated,
    GameState,
    MatchCelebrated,
    Phase,
    ReshuffleRequested,
    ReshuffleScheduled,
    ScoreChanged,
    handle_event,
)

G, R, Y, B = ColorSlot.GREEN, ColorSlot.RED, ColorSlot.YELLOW, ColorSlot.BLUE


class TestCooldownPolicy(unittest.TestCase):
    """Test cases for gated scoring (one credit per reshuffle)."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = GameConfig(policy=ScoringPolicy.COOLDOWN)
        self.rng = random.Random(42)
        self.state = GameState(assignment=(G, R, Y, B))

    # ============================================================
    # Frame Events
    # ============================================================

    def test_full_match_scores(self):
        """Test 4/4 awards 10 and enters cooldown."""
        state, effects = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)

        self.assertEqual(state.score, 10)
        self.assertIs(state.phase, Phase.COOLDOWN)
        self.assertFalse(state.can_score)
        self.assertEqual(effects, [
            ScoreChanged(score=10, award=10),
            MatchCelebrated(),
            ReshuffleScheduled(delay_s=2.0),
        ])

    def test_partial_match_ignored(self):
        """Test 3/4 leaves score and phase alone."""
        state, effects = handle_event(self.state, FrameEvaluated(3), self.config, self.rng)

        self.assertEqual(state, self.state)
        self.assertIs(state.phase, Phase.IDLE)
        self.assertEqual(effects, [])

    def test_missing_fingertips_ignored(self):
        """Test a truncated hand never scores."""
        state, effects = handle_event(self.state, FrameEvaluated(3, point_count=3), self.config, self.rng)
        self.assertEqual(state.score, 0)
        self.assertEqual(effects, [])

    def test_cooldown_blocks_repeat_scoring(self):
        """Test fingers held in place score only once."""
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)
        for _ in range(30):
            state, effects = handle_event(state, FrameEvaluated(4), self.config, self.rng)
            self.assertEqual(effects, [])
        self.assertEqual(state.score, 10)
        self.assertIs(state.phase, Phase.COOLDOWN)

    def test_assignment_unchanged_by_frames(self):
        """Test frames never touch the assignment."""
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)
        self.assertEqual(state.assignment, (G, R, Y, B))

    def test_custom_award_and_delay(self):
        """Test the award and post-score delay come from the config."""
        config = GameConfig(award=25, post_score_delay_s=0.5)
        state, effects = handle_event(self.state, FrameEvaluated(4), config, self.rng)
        self.assertEqual(state.score, 25)
        self.assertIn(ReshuffleScheduled(0.5), effects)

    # ============================================================
    # Reshuffle Events
    # ============================================================

    def test_reshuffle_reopens_gate(self):
        """Test the periodic timer during cooldown resets to idle."""
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)
        state, effects = handle_event(state, ReshuffleRequested("interval"), self.config, self.rng)

        self.assertIs(state.phase, Phase.IDLE)
        self.assertEqual(state.score, 10)
        self.assertEqual(state.reshuffles, 1)
        self.assertEqual(Counter(state.assignment), Counter(ColorSlot))
        self.assertEqual(effects, [AssignmentChanged(state.assignment, "interval")])

    def test_interval_reshuffle_changes_assignment(self):
        """Test the periodic tick during cooldown replaces the assignment."""
        rng = MagicMock()
        rng.randint.return_value = 0
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, rng)
        state, _ = handle_event(state, ReshuffleRequested("interval"), self.config, rng)

        self.assertNotEqual(state.assignment, (G, R, Y, B))
        self.assertEqual(state.assignment, (R, Y, B, G))
        self.assertIs(state.phase, Phase.IDLE)

    def test_scores_again_after_reshuffle(self):
        """Test a new episode can be credited after the gate reopens."""
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)
        state, _ = handle_event(state, ReshuffleRequested("post_score"), self.config, self.rng)
        state, _ = handle_event(state, FrameEvaluated(4), self.config, self.rng)
        self.assertEqual(state.score, 20)

    def test_reshuffle_in_idle(self):
        """Test reshuffling with no pending credit stays idle."""
        state, _ = handle_event(self.state, ReshuffleRequested(), self.config, self.rng)
        self.assertIs(state.phase, Phase.IDLE)
        self.assertEqual(state.score, 0)

    def test_overlapping_reshuffles_harmless(self):
        """Test back-to-back reshuffles keep the permutation and the score."""
        state, _ = handle_event(self.state, FrameEvaluated(4), self.config, self.rng)
        for source in ("post_score", "post_score", "interval"):
            state, _ = handle_event(state, ReshuffleRequested(source), self.config, self.rng)
        self.assertEqual(Counter(state.assignment), Counter(ColorSlot))
        self.assertEqual(state.score, 10)
        self.assertEqual(state.reshuffles, 3)

    def test_gate_invariant_random_stream(self):
        """Test at most one credit between consecutive reshuffles."""
        rng = random.Random(99)
        state = self.state
        credits_since_reshuffle = 0
        for _ in range(2000):
            if rng.random() < 0.1:
                event = ReshuffleRequested()
            else:
                event = FrameEvaluated(rng.choice([2, 3, 4, 4]))
            prev_score = state.score
            state, _ = handle_event(state, event, self.config, self.rng)

            if isinstance(event, ReshuffleRequested):
                credits_since_reshuffle = 0
            elif state.score != prev_score:
                self.assertEqual(state.score - prev_score, 10)
                credits_since_reshuffle += 1
            self.assertLessEqual(credits_since_reshuffle, 1)


class TestImmediatePolicy(unittest.TestCase):
    """Test cases for scoring on every matching frame."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = GameConfig.immediate_variant()
        self.state = GameState()

    def test_scores_every_frame(self):
        """Test each full-match frame awards 10."""
        state = self.state
        for _ in range(3):
            state, effects = handle_event(state, FrameEvaluated(4), self.config)
            self.assertEqual(effects, [ScoreChanged(state.score, 10)])
        self.assertEqual(state.score, 30)
        self.assertIs(state.phase, Phase.IDLE)

    def test_no_feedback_or_delayed_reshuffle(self):
        """Test no celebration or post-score reshuffle is requested."""
        _, effects = handle_event(self.state, FrameEvaluated(4), self.config)
        self.assertNotIn(MatchCelebrated(), effects)
        self.assertFalse(any(isinstance(e, ReshuffleScheduled) for e in effects))

    def test_partial_ignored(self):
        state, effects = handle_event(self.state, FrameEvaluated(2), self.config)
        self.assertEqual(state.score, 0)
        self.assertEqual(effects, [])


class TestHandleEvent(unittest.TestCase):
    """Test cases for the dispatch entry point."""

    def test_default_state(self):
        """Test a fresh state starts idle at zero with the initial order."""
        state = GameState()
        self.assertEqual(state.score, 0)
        self.assertIs(state.phase, Phase.IDLE)
        self.assertEqual(state.assignment, (G, R, Y, B))

    def test_rejects_duplicate_color(self):
        """Test a state cannot start with a color missing or repeated."""
        with self.assertRaises(ValueError):
            GameState(assignment=(G, G, Y, B))

    def test_list_assignment_stored_as_tuple(self):
        state = GameState(assignment=[B, Y, R, G])
        self.assertEqual(state.assignment, (B, Y, R, G))

    def test_state_is_immutable(self):
        """Test transitions return new states."""
        state = GameState()
        new_state, _ = handle_event(state, FrameEvaluated(4), GameConfig())
        self.assertEqual(state.score, 0)
        self.assertIsNot(new_state, state)

    def test_unknown_event(self):
        with self.assertRaises(TypeError):
            handle_event(GameState(), "tick", GameConfig())


if __name__ == '__main__':
    unittest.main(verbosity=2)

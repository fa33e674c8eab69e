"""Success feedback: a short beep and a timed on-screen banner."""

import time

import numpy as np
import pygame
from numpy.typing import NDArray

from ..game.config import (
    AUDIO_SAMPLE_RATE,
    BEEP_DURATION_S,
    BEEP_FREQUENCY_HZ,
    BEEP_VOLUME,
    FLASH_DURATION_S,
    FLASH_TEXT,
)


def _timestamp() -> str:
    return time.strftime('%H:%M:%S')


def sine_wave(
    frequency_hz: float = BEEP_FREQUENCY_HZ,
    duration_s: float = BEEP_DURATION_S,
    sample_rate: int = AUDIO_SAMPLE_RATE,
) -> NDArray[np.int16]:
    """Mono 16-bit sine tone at full scale."""
    t = np.arange(int(sample_rate * duration_s)) / sample_rate
    return (np.sin(2 * np.pi * frequency_hz * t) * 32767).astype(np.int16)


class SuccessSound:
    """Short sine beep played through pygame.mixer."""

    def __init__(self, enabled: bool = True, volume: float = BEEP_VOLUME):
        self._sound = None
        if not enabled:
            return
        try:
            pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16, channels=1)
            self._sound = pygame.mixer.Sound(buffer=sine_wave().tobytes())
            self._sound.set_volume(volume)
        except pygame.error as e:
            print(f"[{_timestamp()}] Audio unavailable, continuing without sound: {e}")
            self._sound = None

    @property
    def available(self) -> bool:
        return self._sound is not None

    def play(self) -> None:
        if self._sound is not None:
            self._sound.play()

    def close(self) -> None:
        if self._sound is not None:
            pygame.mixer.quit()
            self._sound = None


class FlashBanner:
    """Text that stays visible for a fixed time after trigger()."""

    def __init__(self, text: str = FLASH_TEXT, duration_s: float = FLASH_DURATION_S, enabled: bool = True):
        self.text = text
        self.duration_s = duration_s
        self.enabled = enabled
        self._visible_until = 0.0

    def trigger(self, now: float) -> None:
        if self.enabled:
            self._visible_until = now + self.duration_s

    def current(self, now: float) -> str | None:
        """Banner text if it should be on screen at now."""
        return self.text if now < self._visible_until else None

import logging
import math
import os
import struct
import wave

import pygame

from .game_engine import Cue

logger = logging.getLogger(__name__)

# cue -> (file name, tone frequency Hz, duration ms, volume)
TONES = {
    Cue.WALL_HIT:   ("wall_hit.wav", 600, 70, 0.35),
    Cue.PADDLE_HIT: ("paddle_hit.wav", 440, 55, 0.40),
    Cue.SCORE:      ("score.wav", 220, 120, 0.45),
}


class SoundManager:
    """
    Plays the game's one-shot cues. Generates tiny .wav files on first run
    into <base_dir>/assets and loads them. If there is no audio device the
    manager stays silent.
    """
    def __init__(self, base_dir):
        self.base_dir = base_dir
        self.assets_dir = os.path.join(self.base_dir, "assets")
        self.sounds = {}

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as exc:
                logger.warning("Audio disabled, mixer init failed: %s", exc)
                return

        try:
            os.makedirs(self.assets_dir, exist_ok=True)
        except OSError as exc:
            logger.warning("Audio disabled, cannot create %s: %s", self.assets_dir, exc)
            return

        for cue, (filename, freq, duration_ms, volume) in TONES.items():
            path = os.path.join(self.assets_dir, filename)
            self.sounds[cue] = self._load_or_generate(path, freq, duration_ms, volume)

    def _generate_tone(self, path, freq=440, duration_ms=100, volume=0.5, sample_rate=44100):
        n_samples = int(sample_rate * (duration_ms / 1000.0))
        with wave.open(path, "w") as wf:
            wf.setnchannels(1)      # mono
            wf.setsampwidth(2)      # 16-bit
            wf.setframerate(sample_rate)
            for i in range(n_samples):
                # sine with linear fade-out
                t = i / sample_rate
                amp = volume * (1.0 - i / n_samples)
                sample = int(amp * 32767 * math.sin(2 * math.pi * freq * t))
                wf.writeframes(struct.pack("<h", sample))

    def _load_or_generate(self, path, freq, duration_ms, volume):
        try:
            if not os.path.exists(path):
                self._generate_tone(path, freq=freq, duration_ms=duration_ms, volume=volume)
            return pygame.mixer.Sound(path)
        except (OSError, pygame.error) as exc:
            logger.warning("Could not load sound %s: %s", path, exc)
            return None

    def play(self, cue):
        sound = self.sounds.get(cue)
        if sound is not None:
            sound.play()

    def play_all(self, cues):
        for cue in cues:
            self.play(cue)

import logging
import os

import numpy as np
import pygame

from config import MUSIC_VOL_DEFAULT, SFX_VOL_DEFAULT, TEMPO_STEP
from core import Hit, HitKind, Score, RallyMilestone, GameOver

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
MILESTONE_HZ = 990


def make_tone(frequency, duration, volume, attack, decay, wave="sine"):
    n_samples = int(SAMPLE_RATE * duration)
    t = np.linspace(0, duration, n_samples, dtype=np.float32)

    if wave == "square":
        waveform = np.sign(np.sin(2 * np.pi * frequency * t))
    elif wave == "triangle":
        waveform = 2 * np.abs(2 * (t * frequency % 1) - 1) - 1
    else:
        waveform = np.sin(2 * np.pi * frequency * t)

    envelope = np.ones(n_samples, dtype=np.float32)
    attack_samples = int(attack * SAMPLE_RATE)
    decay_samples = int(decay * SAMPLE_RATE)
    if attack_samples > 0:
        envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
    if decay_samples > 0:
        envelope[-decay_samples:] = np.linspace(1, 0, decay_samples)

    samples = (waveform * envelope * volume * 32767).astype(np.int16)
    return np.column_stack((samples, samples))


class Audio:
    """Sound effects and music for the shell.

    Every pygame call is guarded: with no audio device the game runs silent.
    Music is optional; drop ``menu.ogg`` and ``game.ogg`` into ``audio/``.
    """

    def __init__(self, base_dir=None, init_mixer=True):
        self.music_enabled = True
        self.sfx_enabled = True
        self.enabled = False
        self.tempo = 1.0
        self.sounds = {}
        self.music_tracks = {}
        self.current_track = None

        if init_mixer:
            try:
                if not pygame.mixer.get_init():
                    pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2, buffer=512)
                self._generate_sounds()
                self.enabled = True
            except Exception as e:
                logger.warning("audio unavailable, running silent: %s", e)

        if base_dir is not None:
            audio_dir = os.path.join(base_dir, "audio")
            for name in ("menu", "game"):
                path = os.path.join(audio_dir, f"{name}.ogg")
                if os.path.isfile(path):
                    self.music_tracks[name] = path

    def _generate_sounds(self):
        specs = {
            "paddle": (660, 0.07, 0.35, 0.005, 0.06, "square"),
            "wall": (440, 0.05, 0.25, 0.005, 0.045, "sine"),
            "score": (220, 0.25, 0.35, 0.01, 0.22, "triangle"),
            "win": (523, 0.45, 0.35, 0.02, 0.40, "triangle"),
            "click": (1200, 0.03, 0.2, 0.002, 0.025, "sine"),
        }
        for name, args in specs.items():
            sound = pygame.sndarray.make_sound(make_tone(*args))
            sound.set_volume(SFX_VOL_DEFAULT)
            self.sounds[name] = sound

    def play(self, name):
        if not (self.enabled and self.sfx_enabled) or name not in self.sounds:
            return
        try:
            sound = self.sounds[name]
            sound.stop()
            sound.play()
        except Exception as e:
            logger.debug("sfx %s failed: %s", name, e)

    def handle(self, event):
        if isinstance(event, Hit):
            self.play("paddle" if event.kind == HitKind.PADDLE else "wall")
        elif isinstance(event, Score):
            self.reset_tempo()
            self.play("score")
        elif isinstance(event, RallyMilestone):
            self.bump_tempo()
            self.play_milestone()
        elif isinstance(event, GameOver):
            self.stop_music()
            self.play("win")

    def milestone_tone(self):
        # pygame cannot change music playback rate; the cue is pitched up by the tempo instead
        return make_tone(MILESTONE_HZ * self.tempo, 0.12, 0.25, 0.01, 0.10)

    def play_milestone(self):
        if not (self.enabled and self.sfx_enabled):
            return
        try:
            sound = pygame.sndarray.make_sound(self.milestone_tone())
            sound.set_volume(SFX_VOL_DEFAULT)
            sound.play()
        except Exception as e:
            logger.debug("milestone cue failed: %s", e)

    def bump_tempo(self):
        if self.music_enabled:
            self.tempo += TEMPO_STEP

    def reset_tempo(self):
        self.tempo = 1.0

    def toggle_music(self, playing_track=None):
        self.music_enabled = not self.music_enabled
        if not self.music_enabled:
            self.stop_music()
        elif playing_track is not None:
            self.play_music(playing_track)
        return self.music_enabled

    def toggle_sfx(self):
        self.sfx_enabled = not self.sfx_enabled
        return self.sfx_enabled

    def play_music(self, track, restart=True):
        if not (self.enabled and self.music_enabled):
            return
        path = self.music_tracks.get(track)
        if path is None:
            return
        if track == self.current_track and not restart:
            return
        try:
            pygame.mixer.music.load(path)
            pygame.mixer.music.set_volume(MUSIC_VOL_DEFAULT)
            pygame.mixer.music.play(-1)
            self.current_track = track
        except Exception as e:
            logger.warning("could not play %s music: %s", track, e)
            self.current_track = None

    def pause_music(self):
        if not self.enabled:
            return
        try:
            pygame.mixer.music.pause()
        except Exception as e:
            logger.debug("music pause failed: %s", e)

    def resume_music(self):
        if not (self.enabled and self.music_enabled):
            return
        try:
            pygame.mixer.music.unpause()
        except Exception as e:
            logger.debug("music resume failed: %s", e)

    def stop_music(self):
        self.current_track = None
        if not self.enabled:
            return
        try:
            pygame.mixer.music.stop()
        except Exception as e:
            logger.debug("music stop failed: %s", e)

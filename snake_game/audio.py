import numpy as np
import pygame


def sine_samples(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Build a stereo int16 sine tone with a short fade in and out."""
    t = np.linspace(0, duration, int(sample_rate * duration), False)
    wave = volume * np.sin(2 * np.pi * freq * t)
    # Apply quick envelope
    env = np.ones_like(wave)
    attack = min(len(env), int(0.01 * sample_rate))
    release = min(len(env) - attack, int(0.03 * sample_rate))
    env[:attack] = np.linspace(0, 1, attack)
    if release:
        env[-release:] = np.linspace(1, 0, release)
    wave = wave * env
    wave = (wave * (2**15 - 1)).astype(np.int16)
    return np.column_stack([wave, wave])


def make_sine_sound(freq=440, duration=0.12, volume=0.2, sample_rate=44100):
    """Generate a pygame Sound with a sine wave tone."""
    return pygame.sndarray.make_sound(sine_samples(freq, duration, volume, sample_rate))

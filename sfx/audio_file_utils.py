"""Audio file utilities

Synthesises the short earcons shipped as default sounds and writes them
as mono 16-bit WAV.
"""

import wave

import numpy as np


def to_int16(samples):
    """
    Convert audio samples to int16, clipping floats to [-1.0, 1.0].

    Args:
        samples: numpy array (int16 returned as-is, floats scaled)

    Returns:
        numpy.ndarray: int16 samples
    """
    arr = np.asarray(samples)

    if arr.dtype == np.int16:
        return arr

    if np.issubdtype(arr.dtype, np.floating):
        arr = np.clip(arr, -1.0, 1.0)
        return (arr * 32767.0).astype(np.int16)

    return arr.astype(np.int16)


def tone_sequence(frequencies, note_seconds=0.09, sample_rate=22050, amplitude=0.35, fade_seconds=0.01):
    """
    Render consecutive sine notes with short fades (no clicks between notes).

    Args:
        frequencies: Note frequencies in Hz, played in order
        note_seconds: Duration of each note
        sample_rate: Output sample rate in Hz
        amplitude: Peak amplitude (0.0-1.0)
        fade_seconds: Linear fade in/out per note

    Returns:
        numpy.ndarray: float32 samples in [-amplitude, amplitude]

    Example:
        >>> samples = tone_sequence([660, 880], note_seconds=0.1)
        >>> len(samples)
        4410
    """
    count = int(round(note_seconds * sample_rate))
    t = np.arange(count) / float(sample_rate)
    fade = min(int(fade_seconds * sample_rate), count // 2)
    envelope = np.ones(count)
    if fade:
        ramp = np.linspace(0.0, 1.0, fade)
        envelope[:fade] = ramp
        envelope[-fade:] = ramp[::-1]

    notes = [amplitude * envelope * np.sin(2 * np.pi * freq * t) for freq in frequencies]
    if not notes:
        return np.zeros(0, dtype=np.float32)
    return np.concatenate(notes).astype(np.float32)


def write_wav_int16(path, samples, sample_rate):
    """
    Write samples to a mono 16-bit WAV file.

    Args:
        path: Output file path (str or Path)
        samples: Audio samples (converted to int16 if needed)
        sample_rate: Sample rate in Hz
    """
    samples_int16 = to_int16(samples)

    with wave.open(str(path), "wb") as wf:
        wf.setnchannels(1)  # Mono
        wf.setsampwidth(2)  # 16-bit
        wf.setframerate(int(sample_rate))
        wf.writeframes(samples_int16.tobytes())

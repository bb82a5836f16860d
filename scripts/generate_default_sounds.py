#!/usr/bin/env python3
"""
Regenerate the bundled default earcons.

Writes two short tone patterns per event into resources/sounds/<event>/:

  resources/sounds/
    start/start_1.wav, start/start_2.wav
    session-created/...
    ...

Existing files are replaced; run `sfx-hooks bootstrap` afterwards only on a
fresh sound root (bootstrap never overwrites user files).
"""

import argparse
import os

import config
from sfx.audio_file_utils import tone_sequence, write_wav_int16
from sfx.sound_events import (
    SOUND_NOTIFICATION,
    SOUND_PERMISSION,
    SOUND_PROMPT_SUBMIT,
    SOUND_SESSION_CREATED,
    SOUND_START,
    SOUND_STOP,
)

# Two variants per event so anti-repeat selection has something to alternate
PATTERNS = {
    SOUND_START: [(523, 659, 784), (392, 523, 659)],
    SOUND_SESSION_CREATED: [(659, 784), (587, 740)],
    SOUND_PROMPT_SUBMIT: [(880,), (988,)],
    SOUND_NOTIFICATION: [(440, 330), (466, 349)],
    SOUND_PERMISSION: [(784, 784, 988), (740, 740, 932)],
    SOUND_STOP: [(784, 659, 523), (659, 523, 392)],
}


def main():
    parser = argparse.ArgumentParser(description="Regenerate bundled default sounds.")
    parser.add_argument("--output", default=config.BUNDLED_SOUNDS_ROOT, help="Output root directory.")
    parser.add_argument("--rate", type=int, default=config.TONE_SAMPLE_RATE, help="Sample rate in Hz.")
    args = parser.parse_args()

    for event, variants in PATTERNS.items():
        folder = os.path.join(args.output, event)
        os.makedirs(folder, exist_ok=True)
        for number, frequencies in enumerate(variants, start=1):
            path = os.path.join(folder, f"{event}_{number}.wav")
            write_wav_int16(path, tone_sequence(frequencies, sample_rate=args.rate), args.rate)
            print(f"wrote {path}")


if __name__ == "__main__":
    main()

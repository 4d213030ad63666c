"""
Example: Soft clipping an audio block

This example drives a 440 Hz sine through a tanh waveshaper, block by block,
the way an audio callback would. The Padé tanh transforms each block in place
and is compared against numpy.tanh.

The drive is chosen so that the waveshaper input stays inside [-5, 5], where
the approximation keeps its accuracy.
"""

import numpy as np

import padepy

SAMPLE_RATE = 48_000
BLOCK_SIZE = 256
DRIVE = 4.0


def run_soft_clip_example(blocks: int = 16) -> float:
    """Process ``blocks`` blocks and return the worst deviation from numpy."""
    print("\n" + "=" * 70)
    print("SOFT CLIPPING EXAMPLE")
    print("=" * 70)

    phase = 0.0
    step = 2.0 * np.pi * 440.0 / SAMPLE_RATE
    worst = 0.0

    buffer = np.empty(BLOCK_SIZE, dtype=np.float32)
    for _ in range(blocks):
        # Oscillator: wrap the phase into [-pi, pi] so the Padé sine stays in domain.
        phases = phase + step * np.arange(BLOCK_SIZE)
        phases = (phases + np.pi) % (2.0 * np.pi) - np.pi
        buffer[:] = phases
        padepy.sin_inplace(buffer)
        phase = float(phases[-1] + step)

        dry = buffer * DRIVE
        buffer[:] = dry
        padepy.tanh_inplace(buffer, BLOCK_SIZE)

        worst = max(worst, float(np.max(np.abs(buffer - np.tanh(dry)))))

    print(f"\nProcessed {blocks} blocks of {BLOCK_SIZE} samples")
    print(f"Worst deviation from numpy.tanh: {worst:.3e}")
    return worst


if __name__ == "__main__":
    run_soft_clip_example()

"""Ramp sampler generation."""

from __future__ import annotations

from generator.scene import ConstantSampler
from config import settings


def ramp_id(index: int, prefix: str | None = None) -> str:
    """Sampler id for ramp step `index`: prefix + index, no padding."""
    if prefix is None:
        prefix = settings.SAMPLER_PREFIX
    return f"{prefix}{index}"


def generate_samplers(
    count: int,
    prefix: str | None = None,
    channel: int = 0,
) -> list[ConstantSampler]:
    """
    Build a `count`-step color ramp.

    Step x gets id prefix + x and a color whose `channel` component is
    x / count (0 = red), all other components zero. The ramp is meant to
    line up with a grid axis of the same length, so callers should pass
    the grid side as `count`; that pairing is not checked here.

    Args:
        count: Number of samplers (and ramp divisor).
        prefix: Id prefix, defaults to settings.SAMPLER_PREFIX.
        channel: Which RGB component ramps.

    Returns:
        Samplers in ascending index order. Empty when count is 0.
    """
    if count < 0:
        raise ValueError(f"sampler count must be non-negative, got {count}")
    if channel not in (0, 1, 2):
        raise ValueError(f"color channel must be 0, 1 or 2, got {channel}")

    samplers = []
    for x in range(count):
        color = [0, 0, 0]
        color[channel] = x / count
        samplers.append(ConstantSampler(id=ramp_id(x, prefix), color=color))
    return samplers

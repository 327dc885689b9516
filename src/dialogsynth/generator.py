"""Generate plausible-looking fake dialogs for visualization work."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from .config import (
    DURATION_RANGE,
    SAMPLE_INTERVAL,
    UTTERANCE_COUNT_RANGE,
    UTTERANCE_GAP_RANGE,
    UTTERANCE_SPAN_RANGE,
    VALUE_STEP_RANGE,
    VALUE_STEP_SCALE,
)
from .models import (
    DialogData,
    DialogUtterance,
    GeneralMetrics,
    TimeSeries,
    TimeSeriesPoint,
    UtteranceMetrics,
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with ``random.Random.randint`` semantics."""

    def randint(self, a: int, b: int) -> int: ...


def _rand_between(rng: RandomSource, bounds: tuple[int, int]) -> int:
    """Draw an integer from the inclusive range, clamped into it."""
    low, high = bounds
    return max(low, min(high, rng.randint(low, high)))


def generate_fake_time_series(
    name: str,
    duration: float,
    start: float,
    rng: RandomSource | None = None,
) -> TimeSeries:
    """Random walk sampled every SAMPLE_INTERVAL seconds over [start, start + duration)."""
    if rng is None:
        rng = random.Random()

    points: list[TimeSeriesPoint] = []
    current_value = 0.0

    end = start + duration
    k = 0
    time = start
    # Point times are indexed from start, not accumulated
    while time < end:
        current_value += _rand_between(rng, VALUE_STEP_RANGE) * VALUE_STEP_SCALE
        points.append(TimeSeriesPoint(time=time, value=current_value))
        k += 1
        time = start + k * SAMPLE_INTERVAL

    return TimeSeries(name=name, points=points)


def generate_fake_dialog(rng: RandomSource | None = None) -> DialogData:
    """Build a random DialogData with alternating, non-overlapping utterances.

    Pass a seeded ``random.Random`` (or any RandomSource) for reproducible output.
    """
    if rng is None:
        rng = random.Random()

    duration = _rand_between(rng, DURATION_RANGE)
    count = _rand_between(rng, UTTERANCE_COUNT_RANGE)

    utterances: list[DialogUtterance] = []
    last_end_time = 0

    for i in range(count):
        start_time = last_end_time + _rand_between(rng, UTTERANCE_GAP_RANGE)
        end_time = start_time + _rand_between(rng, UTTERANCE_SPAN_RANGE)
        last_end_time = end_time

        valence = generate_fake_time_series(
            f"valence for utterance{i}", end_time - start_time, start_time, rng
        )
        utterances.append(
            DialogUtterance(
                text=f"Utterance {i}",
                start_time=start_time,
                end_time=end_time,
                metrics=UtteranceMetrics(valence=valence),
                speaker_idx=i % 2,
            )
        )

    volume = generate_fake_time_series("volume", duration, 0, rng)

    logger.debug(
        "Generated dialog: %ss, %d utterances, %d volume points",
        duration,
        count,
        len(volume.points),
    )
    # Utterances are not fitted into the duration; leave the data as drawn
    if last_end_time > duration:
        logger.debug(
            "Last utterance ends at %ss, past dialog duration %ss", last_end_time, duration
        )

    return DialogData(
        duration=duration,
        general_metrics=GeneralMetrics(volume=volume),
        utterances=utterances,
    )

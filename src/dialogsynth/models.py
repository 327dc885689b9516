"""Data models for dialog recordings and their metric series."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .config import FIRST_SPEAKER_COLOR, OTHER_SPEAKER_COLOR

Timestamp = float


class _Model(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimeSeriesPoint(_Model):
    time: Timestamp
    value: float


class TimeSeries(_Model):
    name: str
    points: tuple[TimeSeriesPoint, ...] = ()

    def shift(self, offset: Timestamp) -> TimeSeries:
        """Return a copy of this series moved by ``offset`` seconds.

        Every point in the result is a new instance, even for a zero offset.
        """
        shifted = tuple(
            TimeSeriesPoint(time=p.time + offset, value=p.value) for p in self.points
        )
        return TimeSeries(name=self.name, points=shifted)


class Segment(_Model):
    start: Timestamp
    end: Timestamp
    color: str


class UtteranceMetrics(_Model):
    valence: TimeSeries


class DialogUtterance(_Model):
    text: str
    start_time: Timestamp
    end_time: Timestamp
    metrics: UtteranceMetrics
    speaker_idx: int


class GeneralMetrics(_Model):
    volume: TimeSeries


class DialogData(_Model):
    duration: float
    general_metrics: GeneralMetrics
    utterances: tuple[DialogUtterance, ...] = ()

    def make_segments(self) -> list[Segment]:
        """Map each utterance to a colored segment, preserving order."""
        return [
            Segment(
                start=u.start_time,
                end=u.end_time,
                color=FIRST_SPEAKER_COLOR if u.speaker_idx == 0 else OTHER_SPEAKER_COLOR,
            )
            for u in self.utterances
        ]

    def to_json(self, indent: int | None = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> DialogData:
        return cls.model_validate_json(data)

"""Pytest configuration and fixtures for dialogsynth tests."""

import pytest

from dialogsynth.models import DialogData, GeneralMetrics
from tests.helpers.factories import make_series, make_utterance


@pytest.fixture
def sample_series():
    return make_series("volume", [0.0, 0.5, 1.0, 2.5], [0.1, -0.3, 1.2, 0.0])


@pytest.fixture
def sample_dialog():
    """Three utterances, speakers 0, 1, 0."""
    return DialogData(
        duration=30,
        general_metrics=GeneralMetrics(volume=make_series("volume", [0.0, 1.0, 2.0])),
        utterances=[
            make_utterance(2, 7, 0, "first"),
            make_utterance(10, 18, 1, "second"),
            make_utterance(21, 26, 0, "third"),
        ],
    )


@pytest.fixture
def dialog_file(tmp_path, sample_dialog):
    """sample_dialog written as JSON."""
    path = tmp_path / "dialog.json"
    path.write_text(sample_dialog.to_json(indent=2), encoding="utf-8")
    return path

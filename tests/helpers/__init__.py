"""
Test helper utilities for dialogsynth testing.

Provides small factories for series, utterances and scripted random sources.
"""

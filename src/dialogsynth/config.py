"""Central configuration for the fake dialog generator."""

# Environment variable holding a default seed for the CLI
SEED_ENV_VAR = "DIALOGSYNTH_SEED"

# Inclusive integer ranges for random draws
DURATION_RANGE = (60, 120)  # Dialog length in seconds
UTTERANCE_COUNT_RANGE = (2, 7)
UTTERANCE_GAP_RANGE = (2, 10)  # Silence before each utterance, seconds
UTTERANCE_SPAN_RANGE = (5, 15)  # Utterance length, seconds
VALUE_STEP_RANGE = (-10, 10)  # Random walk increment, before scaling

# Series sampling
SAMPLE_INTERVAL = 0.01  # Seconds between points
VALUE_STEP_SCALE = 0.1

# Segment colors keyed on speaker
FIRST_SPEAKER_COLOR = "rgba(255, 0, 0, 0.5)"
OTHER_SPEAKER_COLOR = "rgba(0, 0, 255, 0.5)"

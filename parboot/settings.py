# Workshop settings shared by every lesson

import os

from .pmap import available_workers


def env_int(name, default):
    """Read a positive integer from the environment."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {raw!r}")
    return value


N_RESAMPLES = env_int("PARBOOT_RESAMPLES", 2000)
SAMPLE_SIZE = 500
SEED = 42
PROBS = (0.025, 0.975)
WORKERS = env_int("PARBOOT_WORKERS", available_workers())
TIMEOUT = 120

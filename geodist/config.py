"""Process-wide default settings for :class:`geodist.distance.DistanceOp`.

An operation takes its own copy of the defaults when it is constructed, so
changing them later never alters an operation whose result is already cached
or still pending.
"""

from __future__ import annotations

import copy

from .model import DistanceConfig

_DISTANCE_CONFIG = DistanceConfig()


def get_distance_config() -> DistanceConfig:
    """Snapshot of the current defaults; mutating it has no global effect."""

    return copy.deepcopy(_DISTANCE_CONFIG)


def set_distance_config(config: DistanceConfig) -> None:
    """Install ``config`` as the default for operations created from now on."""

    if not isinstance(config, DistanceConfig):
        raise TypeError(f"expected DistanceConfig, got {type(config).__name__}")
    global _DISTANCE_CONFIG
    _DISTANCE_CONFIG = copy.deepcopy(config)

from __future__ import annotations

from enum import Enum


class StopReason(str, Enum):
    ITERATIONS = "iterations"
    REJECTS = "rejects"
    TIMEOUT = "timeout"


class CoolingFamily(str, Enum):
    MULTIPLICATIVE = "multiplicative"


__all__ = ["CoolingFamily", "StopReason"]

"""Conversions from complex reflection samples to plotted values."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod


class DataProcessor(ABC):
    """Turns one complex sample into a single real value."""

    @abstractmethod
    def process(self, real: float, imag: float) -> float:
        """Return the value plotted for the sample ``real + j*imag``."""


class LogMagProcessor(DataProcessor):
    """Log magnitude in decibels: ``20 * log10(|real + j*imag|)``."""

    def process(self, real: float, imag: float) -> float:
        magnitude = math.hypot(real, imag)
        if magnitude == 0:
            return -math.inf
        return 20 * math.log10(magnitude)
"""First-order exponential low-pass filter."""

from __future__ import annotations


class LowPassFilter:
    """Exponential smoothing with factor ``alpha``; the first sample passes through."""

    def __init__(self, alpha: float) -> None:
        self.alpha = alpha
        self._value: float | None = None

    def update(self, new_value: float) -> float:
        """Feed one new sample and return the filtered value."""
        if self._value is None:
            self._value = new_value
        else:
            self._value = self.alpha * new_value + (1 - self.alpha) * self._value
        return self._value

    @property
    def value(self) -> float | None:
        """The current filtered value, or None before the first sample."""
        return self._value

    @property
    def initialized(self) -> bool:
        """Whether at least one sample has been seen."""
        return self._value is not None
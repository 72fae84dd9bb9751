"""A layer of neurons."""

from __future__ import annotations

from collections.abc import Sequence

from .neuron import Neuron

__all__ = ["Layer"]


class Layer:
    """An ordered group of neurons evaluated together."""

    def __init__(self, neuron_count: int = 0) -> None:
        self.neurons: list[Neuron] = [Neuron() for _ in range(neuron_count)]

    def __repr__(self) -> str:
        return f"Layer(neurons={self.neurons!r})"

    def __len__(self) -> int:
        return len(self.neurons)

    def take_incoming_data(self, values: Sequence[float]) -> None:
        """Feed one value to each neuron, in order."""
        if len(values) < len(self.neurons):
            raise ValueError(
                f"expected at least {len(self.neurons)} values, got {len(values)}"
            )
        for neuron, value in zip(self.neurons, values):
            neuron.accumulate(value)

    def take_data(self, values: Sequence[float]) -> None:
        """Feed every value to every neuron."""
        for neuron in self.neurons:
            for value in values:
                neuron.accumulate(value)

    def outgoing_data(self) -> list[float]:
        """Activate every neuron and return their outputs."""
        return [neuron.activation() for neuron in self.neurons]
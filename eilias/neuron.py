"""Threshold neurons and their configuration."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NeuronConfig", "Neuron", "threshold", "activator"]


@dataclass
class NeuronConfig:
    """Tunable parameters of a single neuron."""

    resistance: float = 0.0
    sensitivity: float = 0.0
    mode: int = 0

    def info(self) -> str:
        """Return a one-line summary of resistance and sensitivity."""
        return f"R: {self.resistance:g} S:{self.sensitivity:g}"


def threshold(accumulated: float, resistance: float) -> bool:
    """Fire when the accumulated charge reaches the resistance."""
    return accumulated >= resistance


def activator(accumulated: float, resistance: float, mode: int) -> bool:
    """Decide whether a neuron fires, using the activation rule for ``mode``."""
    if mode == 0:
        return threshold(accumulated, resistance)
    raise ValueError(f"unknown activation mode: {mode}")


class Neuron:
    """A neuron that accumulates weighted impulses and fires past a threshold."""

    def __init__(
        self,
        resistance: float = 0.0,
        sensitivity: float = 0.0,
        mode: int = 0,
    ) -> None:
        self.config = NeuronConfig(resistance, sensitivity, mode)
        self.accumulator = 0.0

    def __repr__(self) -> str:
        return f"Neuron(config={self.config!r}, accumulator={self.accumulator!r})"

    def accumulate(self, impulse: float) -> None:
        """Add an impulse scaled by the neuron's sensitivity."""
        self.accumulator += impulse * self.config.sensitivity

    def activation(self) -> float:
        """Emit the accumulated charge if the neuron fires, else 0; always reset."""
        charge = self.accumulator
        self.accumulator = 0.0
        if activator(charge, self.config.resistance, self.config.mode):
            return charge
        return 0.0
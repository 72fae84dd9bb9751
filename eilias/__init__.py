"""Threshold-neuron networks with a perturbation-based learning rule and an interactive console."""

__version__ = "0.1.0"
__all__ = ["cli", "layer", "learn", "network", "neuron"]
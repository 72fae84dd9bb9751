"""Forward evaluation and perturbation-based training."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

from .network import Network

__all__ = ["Adjustment", "forward", "layer_learn", "apply_adjustments", "learn"]

# Directions tried for (sensitivity, resistance), in order of preference on ties.
_VARIATIONS = ((1, 1), (-1, -1), (1, -1), (-1, 1))


@dataclass(frozen=True)
class Adjustment:
    """New sensitivity and resistance for one neuron."""

    sensitivity: float = 0.0
    resistance: float = 0.0


def forward(inputs: Sequence[float], network: Network) -> list[float]:
    """Run the inputs through the network and return the output layer's values."""
    layers = network.layers
    if not layers:
        raise ValueError("network has no layers")
    layers[0].take_incoming_data(inputs)
    for previous, current in pairwise(layers):
        current.take_data(previous.outgoing_data())
    return layers[-1].outgoing_data()


def _differences(expected: Sequence[float], outputs: Sequence[float]) -> list[float]:
    if len(outputs) < len(expected):
        raise ValueError(
            f"expected {len(expected)} outputs, network produced {len(outputs)}"
        )
    return [abs(want - got) for want, got in zip(expected, outputs)]


def layer_learn(
    expected: Sequence[float],
    inputs: Sequence[float],
    network: Network,
    learn_balance: float,
) -> list[list[Adjustment]]:
    """Try small changes on every neuron and propose the best one for each.

    A change is taken only if it lowers the error on every expected output;
    later changes must beat earlier accepted ones. The network's
    configuration is left as it was.
    """
    baseline = _differences(expected, forward(inputs, network))
    adjustments: list[list[Adjustment]] = []

    for layer in network.layers:
        row: list[Adjustment] = []
        for neuron in layer.neurons:
            config = neuron.config
            sensitivity, resistance = config.sensitivity, config.resistance

            candidates = []
            for ds, dr in _VARIATIONS:
                config.sensitivity = sensitivity + ds * learn_balance
                config.resistance = resistance + dr * learn_balance
                candidates.append(_differences(expected, forward(inputs, network)))

            best = baseline
            chosen = None
            for variation, diffs in zip(_VARIATIONS, candidates):
                if all(old > new for old, new in zip(best, diffs)):
                    best = diffs
                    chosen = variation

            if chosen is None:
                row.append(Adjustment(sensitivity, resistance))
            else:
                ds, dr = chosen
                row.append(
                    Adjustment(
                        sensitivity + ds * learn_balance,
                        resistance + dr * learn_balance,
                    )
                )

            config.sensitivity = sensitivity
            config.resistance = resistance
        adjustments.append(row)

    return adjustments


def apply_adjustments(
    adjustments: Sequence[Sequence[Adjustment]], network: Network
) -> None:
    """Write proposed adjustments into the network's neurons."""
    for layer, row in zip(network.layers, adjustments, strict=True):
        for neuron, adjustment in zip(layer.neurons, row, strict=True):
            neuron.config.sensitivity = adjustment.sensitivity
            neuron.config.resistance = adjustment.resistance


def learn(
    expected: Sequence[float],
    inputs: Sequence[float],
    network: Network,
    learn_balance: float,
) -> None:
    """Perform one training step on the network."""
    apply_adjustments(layer_learn(expected, inputs, network, learn_balance), network)
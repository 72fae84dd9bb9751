import pytest

from eilias.layer import Layer
from eilias.learn import Adjustment, apply_adjustments, forward, layer_learn, learn
from eilias.network import Network
from eilias.neuron import NeuronConfig


def _network(*layer_configs):
    layers = []
    for configs in layer_configs:
        layer = Layer(len(configs))
        for neuron, (resistance, sensitivity) in zip(layer.neurons, configs):
            neuron.config = NeuronConfig(resistance, sensitivity)
        layers.append(layer)
    return Network(layers)


def _configs(network):
    return [
        [(n.config.resistance, n.config.sensitivity) for n in layer.neurons]
        for layer in network.layers
    ]


def test_forward_single_layer_passes_inputs_through():
    network = _network([(0.0, 1.0), (0.0, 1.0)])
    assert forward([4.0, 5.0], network) == [4.0, 5.0]


def test_forward_two_layers_sums_previous_outputs():
    network = _network([(0.0, 1.0), (0.0, 1.0)], [(0.0, 1.0)])
    assert forward([1.0, 2.0], network) == [3.0]


def test_forward_is_repeatable():
    network = _network([(0.0, 1.0), (1.0, 2.0)], [(0.5, 1.0), (2.0, 0.5)])
    first = forward([1.0, 0.25], network)
    assert forward([1.0, 0.25], network) == first


def test_forward_empty_network_raises():
    with pytest.raises(ValueError):
        forward([1.0], Network())


def test_layer_learn_matches_network_shape_and_restores_config():
    network = _network([(0.0, 1.0), (1.0, 2.0)], [(0.5, 1.0)])
    before = _configs(network)
    adjustments = layer_learn([4.0], [1.0, 2.0], network, 0.5)
    assert [len(row) for row in adjustments] == [2, 1]
    assert _configs(network) == before


def test_layer_learn_keeps_config_when_already_exact():
    network = _network([(0.0, 1.0)])
    adjustments = layer_learn([2.0], [2.0], network, 0.5)
    assert adjustments == [[Adjustment(sensitivity=1.0, resistance=0.0)]]


def test_layer_learn_with_no_expected_values_picks_last_variation():
    network = _network([(0.0, 1.0)])
    adjustments = layer_learn([], [2.0], network, 0.25)
    assert adjustments == [[Adjustment(sensitivity=1.0 - 0.25, resistance=0.0 + 0.25)]]


def test_layer_learn_expected_longer_than_output_raises():
    network = _network([(0.0, 1.0)])
    with pytest.raises(ValueError):
        layer_learn([1.0, 2.0], [1.0], network, 0.5)


def test_learn_reduces_error():
    network = _network([(0.0, 1.0)])
    before = abs(4.0 - forward([2.0], network)[0])
    learn([4.0], [2.0], network, 0.5)
    after = abs(4.0 - forward([2.0], network)[0])
    assert after < before
    assert network.layers[0].neurons[0].config.sensitivity > 1.0


def test_repeated_learning_never_increases_error_for_single_neuron():
    network = _network([(0.0, 1.0)])
    errors = [abs(4.0 - forward([2.0], network)[0])]
    for _ in range(10):
        learn([4.0], [2.0], network, 0.25)
        errors.append(abs(4.0 - forward([2.0], network)[0]))
    assert all(b <= a for a, b in zip(errors, errors[1:]))
    assert errors[-1] < errors[0]


def test_learn_with_zero_balance_changes_nothing():
    network = _network([(0.0, 1.0), (1.0, 2.0)], [(0.5, 1.0)])
    before = _configs(network)
    learn([10.0], [1.0, 2.0], network, 0.0)
    assert _configs(network) == before


def test_apply_adjustments_sets_config():
    network = _network([(0.0, 1.0), (0.0, 1.0)])
    apply_adjustments(
        [[Adjustment(2.0, 3.0), Adjustment(4.0, 5.0)]],
        network,
    )
    assert _configs(network) == [[(3.0, 2.0), (5.0, 4.0)]]


def test_apply_adjustments_shape_mismatch_raises():
    network = _network([(0.0, 1.0), (0.0, 1.0)])
    with pytest.raises(ValueError):
        apply_adjustments([[Adjustment(2.0, 3.0)]], network)


def test_layer_learn_then_apply_round_trip_is_stable_when_exact():
    network = _network([(0.0, 1.0)], [(0.0, 1.0)])
    output = forward([3.0], network)
    before = _configs(network)
    learn(output, [3.0], network, 0.5)
    assert _configs(network) == before
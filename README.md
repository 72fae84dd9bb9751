# eilias

A small network of threshold neurons. It learns by trying small nudges to
each neuron's settings and keeping a nudge only when it brings every output
closer to the expected value.

## How it works

Each neuron has a **resistance**, which is its firing threshold, and a
**sensitivity**, which is the weight applied to every impulse it receives. A
neuron adds up its weighted impulses. When it is asked to fire, it passes the
sum on if the sum is at least the resistance, and 0 otherwise. In both cases
the sum is then reset to 0.

A network is an ordered list of layers:

- neuron *i* of the first layer receives input value *i*;
- every neuron of a later layer receives every output of the layer before it;
- the outputs of the last layer are the network's result.

One learning step looks at each neuron on its own. It tries the four
combinations of adding or subtracting the learn balance to the sensitivity and
the resistance, in this order: (+, +), (−, −), (+, −), (−, +). For each
combination it runs the network. A combination is kept only if it lowers the
error (the absolute difference from the expected value) on every output.
Combinations later in the order must also beat the one already kept. Once
every neuron has been tried, the chosen settings are applied together.

## Installation

```
pip install .
```

The package needs nothing outside the standard library. It supports Python
3.10 and later.

## Using the library

```python
from eilias.layer import Layer
from eilias.network import Network
from eilias.learn import forward, learn

layers = [Layer(2), Layer(3), Layer(1)]
for layer in layers:
    for neuron in layer.neurons:
        neuron.config.resistance = 1.0
        neuron.config.sensitivity = 0.5

network = Network(layers)

print(forward([1.0, 2.0], network))

for _ in range(50):
    learn([4.0], [1.0, 2.0], network, 0.1)

print(forward([1.0, 2.0], network))
```

The modules:

- `eilias.neuron`:
  - `NeuronConfig` holds `resistance`, `sensitivity` and `mode`. Its `info()`
    method returns a line such as `R: 1 S:0.5`.
  - `Neuron` has `accumulate(impulse)` and `activation()`.
  - `threshold(accumulated, resistance)` is the firing rule.
  - `activator(accumulated, resistance, mode)` applies the firing rule for a
    mode. Only mode `0` exists; any other mode raises `ValueError`.
- `eilias.layer`:
  - `Layer(neuron_count)` holds a list of `neurons`.
  - `take_incoming_data(values)` feeds one value to each neuron. It raises
    `ValueError` if there are fewer values than neurons.
  - `take_data(values)` feeds every value to every neuron.
  - `outgoing_data()` activates every neuron and returns their outputs.
- `eilias.network`:
  - `Network(layers)` keeps the layers as `layers`.
- `eilias.learn`:
  - `forward(inputs, network)` runs one pass and returns the last layer's
    outputs. It raises `ValueError` for a network with no layers.
  - `layer_learn(expected, inputs, network, learn_balance)` returns the
    chosen settings for every neuron as rows of `Adjustment` values
    (`sensitivity`, `resistance`). The network's settings are left as they
    were.
  - `apply_adjustments(adjustments, network)` writes those settings into the
    network.
  - `learn(expected, inputs, network, learn_balance)` does both in turn.

## Interactive console

```
eilias
```

The console reads whitespace-separated values from standard input and shows
a menu:

1. **Set config**: choose the number of input neurons, the number of hidden
   layers, the number of neurons in each hidden layer and the number of output
   neurons. Then choose `1` to type each neuron's resistance and sensitivity by
   hand, or `2` to fill them with random whole numbers from 0 to 9. Any other
   choice leaves them at 0.
2. **Learn**: give a learn balance, a number of steps, the input values and
   the expected output values. The console then runs that many learning steps.
3. **Test**: give the input values and see the network's outputs.
4. **Info**: print the resistance and sensitivity of every neuron.

Enter `1000` to leave. The console also stops when its input runs out. After
input it cannot read as a number, it reports `Invalid input` and shows the
menu again.

`configure_network(prompt, write, rng)` in `eilias.cli` runs the Set config
dialogue. It uses any prompt function and output function you pass in, and
returns the resulting `Network`.

## What it does not do

The console keeps the network in memory only. It cannot save a trained
network to a file or load one from a file. Training takes a single input and
expected-output pair at a time; the console does not read datasets.
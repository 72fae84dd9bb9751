"""Interactive console for configuring, training and testing a network."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from .layer import Layer
from .learn import forward, learn
from .network import Network

__all__ = ["configure_network", "main"]

Prompt = Callable[[str], str]
Write = Callable[[str], None]

SEPARATOR = "=============================="
EXIT_CHOICE = 1000


def _read_int(prompt: Prompt, message: str) -> int:
    token = prompt(message)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"not an integer: {token!r}") from None


def _read_count(prompt: Prompt, message: str) -> int:
    count = _read_int(prompt, message)
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    return count


def _read_float(prompt: Prompt, message: str) -> float:
    token = prompt(message)
    try:
        return float(token)
    except ValueError:
        raise ValueError(f"not a number: {token!r}") from None


def _configure_manually(layer: Layer, prompt: Prompt, write: Write, header: str | None) -> None:
    for index, neuron in enumerate(layer.neurons):
        if header is not None:
            write(header)
        write(f"Neuron {index}")
        neuron.config.resistance = _read_float(prompt, "Set resistance <-- ")
        neuron.config.sensitivity = _read_float(prompt, "Set sensitivity <-- ")


def configure_network(
    prompt: Prompt,
    write: Write,
    rng: random.Random | None = None,
) -> Network:
    """Ask for the network's shape and neuron parameters and build it.

    ``prompt`` shows a message and returns the next input token; ``write``
    emits one line of output. Parameters are entered by hand (choice 1),
    drawn as whole numbers from 0 to 9 (choice 2), or left at zero.
    """
    write("Start Config -- ")

    incoming = _read_count(prompt, "Incoming neuron <-- ")
    write("")
    hidden_count = _read_count(prompt, "Count hidden layers <-- ")
    write("")

    hidden_sizes = []
    for index in range(hidden_count):
        hidden_sizes.append(_read_count(prompt, f"Neurons in hidden layer {index} <-- "))
        write("")

    outgoing = _read_count(prompt, "Outgoing neuron <-- ")
    write("")

    layers = [Layer(size) for size in (incoming, *hidden_sizes, outgoing)]

    write("Neuron config")
    write("1.Manual")
    write("2.Random")
    choice = _read_int(prompt, "")

    if choice == 1:
        write("Incoming Neuron config")
        _configure_manually(layers[0], prompt, write, None)
        write("Hidden Neuron config")
        for index, layer in enumerate(layers[1:-1]):
            _configure_manually(layer, prompt, write, f"Layer {index}")
        write("Outgoing Neuron config")
        _configure_manually(layers[-1], prompt, write, None)
    elif choice == 2:
        generator = rng if rng is not None else random.Random()
        for layer in layers:
            for neuron in layer.neurons:
                neuron.config.resistance = float(generator.randrange(10))
                neuron.config.sensitivity = float(generator.randrange(10))

    return Network(layers)


class _TokenReader:
    """Reads whitespace-separated tokens from a stream, echoing prompts."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._tokens = self._split(stream)
        self._out = out

    @staticmethod
    def _split(stream: TextIO) -> Iterator[str]:
        for line in stream:
            yield from line.split()

    def __call__(self, message: str) -> str:
        if message:
            self._out.write(message)
            self._out.flush()
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("no more input") from None


def _read_values(prompt: Prompt, count: int) -> list[float]:
    return [_read_float(prompt, "") for _ in range(count)]


def _train(network: Network, prompt: Prompt, write: Write) -> None:
    balance = _read_float(prompt, "Set learn balance <-- ")
    write("")
    steps = _read_count(prompt, "Set learn step <-- ")
    write("")
    if not network.layers:
        write("Network is not configured")
        return
    write("Set incoming data")
    inputs = _read_values(prompt, len(network.layers[0]))
    write("Set expected data")
    expected = _read_values(prompt, len(network.layers[-1]))
    for _ in range(steps):
        learn(expected, inputs, network, balance)


def _test(network: Network, prompt: Prompt, write: Write) -> None:
    if not network.layers:
        write("Network is not configured")
        return
    write("Set incoming data")
    inputs = _read_values(prompt, len(network.layers[0]))
    outputs = forward(inputs, network)
    write("Result")
    for value in outputs:
        write(f"{value:g}")


def _info(network: Network, write: Write) -> None:
    for layer in network.layers:
        for neuron in layer.neurons:
            write(neuron.config.info())


def _show_menu(write: Write) -> None:
    write("1.Set config")
    write("2.Learn")
    write("3.Test")
    write("4.Info")
    write(f"{EXIT_CHOICE}. Exit")


def _run(prompt: Prompt, write: Write, rng: random.Random) -> None:
    network = Network()
    choice = 0
    while True:
        try:
            if choice == 0:
                _show_menu(write)
                choice = _read_int(prompt, "")
            elif choice == 1:
                choice = 0
                network = configure_network(prompt, write, rng)
            elif choice == 2:
                choice = 0
                _train(network, prompt, write)
            elif choice == 3:
                choice = 0
                _test(network, prompt, write)
            elif choice == 4:
                choice = 0
                _info(network, write)
            elif choice == EXIT_CHOICE:
                write(SEPARATOR)
                return
            else:
                choice = _read_int(prompt, "")
        except ValueError as error:
            write(f"Invalid input: {error}")
            choice = 0
        write(SEPARATOR)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive console on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="eilias",
        description="Configure, train and test a threshold-neuron network interactively.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    reader = _TokenReader(sys.stdin, out)

    def write(text: str) -> None:
        print(text, file=out)

    try:
        _run(reader, write, random.Random())
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
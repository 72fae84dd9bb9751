"""A feed-forward network of layers."""

from __future__ import annotations

from collections.abc import Iterable

from .layer import Layer

__all__ = ["Network"]


class Network:
    """An ordered list of layers, from input to output."""

    def __init__(self, layers: Iterable[Layer] = ()) -> None:
        self.layers: list[Layer] = list(layers)

    def __repr__(self) -> str:
        return f"Network(layers={self.layers!r})"
"""Layers and the ordered stack that holds them."""

from __future__ import annotations

from typing import Any, Iterator


class Layer:
    """A unit of per-frame logic; override the hooks you need.

    The base hooks keep track of the layer's state: whether it is attached,
    the last timestep and event it received, and how many UI frames it drew.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_timestep: Any = None
        self.last_event: Any = None
        self.imgui_frames = 0

    def on_attach(self) -> None:
        self.attached = True

    def on_detach(self) -> None:
        self.attached = False

    def on_update(self, ts: Any) -> None:
        self.last_timestep = ts

    def on_imgui_render(self) -> None:
        self.imgui_frames += 1

    def on_event(self, event: Any) -> None:
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class LayerStack:
    """Layers first, overlays after them; iteration runs bottom to top."""

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove a layer; overlays and unknown layers are ignored."""
        for index, candidate in enumerate(self._layers[: self._insert_index]):
            if candidate is layer:
                layer.on_detach()
                del self._layers[index]
                self._insert_index -= 1
                return

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove an overlay; regular layers are ignored."""
        for offset, candidate in enumerate(self._layers[self._insert_index :]):
            if candidate is overlay:
                overlay.on_detach()
                del self._layers[self._insert_index + offset]
                return

    def close(self) -> None:
        """Detach every layer and empty the stack."""
        for layer in self._layers:
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0

    def __enter__(self) -> "LayerStack":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[Layer]:
        return iter(self._layers)

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(self._layers)

    def __len__(self) -> int:
        return len(self._layers)
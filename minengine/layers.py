"""Layers that receive updates and events, and the ordered stack that holds them."""

from __future__ import annotations

from collections.abc import Iterator

from minengine.events import Event
from minengine.time_step import TimeStep


class Layer:
    """A unit of application logic driven by the engine loop.

    Subclasses override the hooks they need. The default hooks keep a
    record of what reached the layer: whether it is attached, the last
    time step, the number of interface frames drawn and the last event.
    """

    def __init__(self, name: str = "Layer") -> None:
        self.name = name
        self.attached = False
        self.last_update: TimeStep | None = None
        self.imgui_frames = 0
        self.last_event: Event | None = None

    def on_attach(self) -> None:
        """Called when the layer is pushed onto a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer is removed from a stack or the stack closes."""
        self.attached = False

    def on_update(self, ts: TimeStep) -> None:
        """Called once per frame with the elapsed time."""
        self.last_update = ts

    def on_imgui_render(self) -> None:
        """Called once per frame to draw the layer's user interface."""
        self.imgui_frames += 1

    def on_event(self, event: Event) -> None:
        """Called for each event that reaches this layer."""
        self.last_event = event

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class LayerStack:
    """Ordered layers followed by overlays.

    Layers are kept before every overlay; overlays always sit at the end.
    Iteration yields layers first, then overlays, each in insertion order.
    """

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._insert_index = 0

    def push_layer(self, layer: Layer) -> None:
        """Insert ``layer`` after the existing layers and before any overlay."""
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1
        layer.on_attach()

    def push_overlay(self, overlay: Layer) -> None:
        """Append ``overlay`` after everything else."""
        self._layers.append(overlay)
        overlay.on_attach()

    def pop_layer(self, layer: Layer) -> None:
        """Remove ``layer`` from the layer section; overlays are not searched."""
        position = _find(self._layers, layer, 0, self._insert_index)
        if position is None:
            return
        layer.on_detach()
        del self._layers[position]
        self._insert_index -= 1

    def pop_overlay(self, overlay: Layer) -> None:
        """Remove ``overlay`` from the overlay section; layers are not searched."""
        position = _find(self._layers, overlay, self._insert_index, len(self._layers))
        if position is None:
            return
        overlay.on_detach()
        del self._layers[position]

    def close(self) -> None:
        """Detach every layer and overlay and empty the stack."""
        layers, self._layers = self._layers, []
        self._insert_index = 0
        for layer in layers:
            layer.on_detach()

    def __iter__(self) -> Iterator[Layer]:
        return iter(list(self._layers))

    def __reversed__(self) -> Iterator[Layer]:
        return reversed(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def __contains__(self, layer: object) -> bool:
        return any(item is layer for item in self._layers)

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _find(items: list[Layer], target: Layer, start: int, stop: int) -> int | None:
    return next(
        (position for position in range(start, stop) if items[position] is target),
        None,
    )
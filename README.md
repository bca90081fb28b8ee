# minengine

Core building blocks of a small real-time rendering engine, written in plain
Python with no third-party dependencies and no graphics backend.

## Modules

- `minengine.events` – `EventType` and `EventCategory` (bit flags), an `Event`
  base class and its concrete kinds: `WindowResizeEvent`, `WindowCloseEvent`,
  `AppTickEvent`, `AppUpdateEvent`, `AppRenderEvent`, `KeyPressedEvent`,
  `KeyReleasedEvent`, `KeyTypedEvent`, `MouseMovedEvent`,
  `MouseScrolledEvent`, `MouseButtonPressedEvent` and
  `MouseButtonReleasedEvent`. `Event.is_in_category(category)` tests the
  category flags, and `str(event)` gives a one-line description.
  `EventDispatcher(event).dispatch(EventClass, func)` calls `func(event)` only
  when the event has that class's type, stores the result in
  `event.handled`, and returns whether the handler ran.
- `minengine.keycodes` – the `Key` integer enumeration of keyboard codes
  (printable keys use their ASCII values, e.g. `Key.A == 65`,
  `Key.ESCAPE == 256`).
- `minengine.time_step` – `TimeStep`, a frozen frame delta in seconds with
  `seconds()`, `milliseconds()` and `float()` conversion.
- `minengine.layers` – `Layer`, whose hooks `on_attach`, `on_detach`,
  `on_update`, `on_imgui_render` and `on_event` are meant to be overridden,
  and `LayerStack`. Layers pushed with `push_layer` always sit before overlays
  pushed with `push_overlay`; `pop_layer` and `pop_overlay` search only their
  own section and do nothing when the item is absent. Pushing attaches,
  popping detaches, and `close()` (or leaving a `with` block) detaches
  everything and empties the stack. Iteration goes layers first, then
  overlays.
- `minengine.log` – `log(fmt, *args)` formats with `str.format` placeholders
  (`{}`, `{0}`) and prints one line to standard output.
- `minengine.parallel` – `ParallelForContext`, a persistent pool of worker
  threads, and the module-level `parallel_for(begin, end, func, work_size)`
  that runs `func(index, thread_id)` for every index in `[begin, end)` on a
  shared pool, handing out chunks of `work_size` indices and blocking until
  all are done. The first exception raised by `func` stops the remaining
  chunks and is re-raised to the caller. `get_core_number()` and
  `set_core_number(n)` control how many workers a new pool starts with
  (default: the CPU count).
- `minengine.mesh` – `Vertex` (position, normal, texture coordinates,
  tangent, bitangent), `Texture` (id, path, type) and `Mesh`. A mesh checks
  that its indices refer to existing vertices, and offers `vertex_data()`
  (8 interleaved floats per vertex: position, normal, texture coordinates),
  `sampler_bindings()` (`(uniform name, texture unit, texture id)` tuples,
  numbering `texture_diffuse`, `texture_specular`, `texture_normal` and
  `texture_height` from 1 per kind), `triangles()` and `index_count`.

## Installing

```
pip install .
```

## Example

```python
from minengine.events import EventDispatcher, KeyPressedEvent
from minengine.keycodes import Key
from minengine.layers import Layer, LayerStack


class Sandbox(Layer):
    def on_event(self, event):
        EventDispatcher(event).dispatch(
            KeyPressedEvent, lambda e: e.key_code == Key.ESCAPE
        )


with LayerStack() as stack:
    stack.push_layer(Sandbox())
    event = KeyPressedEvent(Key.ESCAPE, 0)
    for layer in stack:
        layer.on_event(event)
    print(event.handled)  # True
```

```python
from minengine.parallel import parallel_for

results = [0] * 100


def work(index, thread_id):
    results[index] = index * index


parallel_for(0, 100, work, 8)
```

## What it does not do

The package holds the engine's data and control structures only. It opens
no window, reads no input devices, draws nothing and loads no model or image
files: there is no renderer, shader, texture upload or application loop.
Events must be created by the caller, and a `Mesh` only prepares the data a
renderer would upload.

## Running the tests

```
pip install .[test]
pytest
```
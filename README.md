# hazel-engine

The core pieces of a small 2D game engine, written in plain Python. It
uses numpy for the maths. It has no window or GPU code. The renderer
collects geometry into batches and hands them to a `RendererAPI` object.
By default that object only records the commands it receives. This means
the package runs headless, and you can check the draw calls in tests.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## What is inside

### Timing and identifiers

- `hazel_engine.timing` has two classes:
  - `Timestep` holds a frame time, with `seconds`, `milliseconds` and `float()`.
  - `Timer` has `reset()`, `elapsed()` (seconds) and `elapsed_millis()`.
- `hazel_engine.ids` has `UUID`, an `int` subclass for 64-bit unsigned identifiers. It is random when no value is given, and raises `ValueError` when the value is out of range.

### Input codes and layers

- `hazel_engine.codes` has the `Key` and `Mouse` enums. They use GLFW key and button numbers.
- `hazel_engine.layers` has `Layer` and `LayerStack`:
  - Layers are kept below overlays.
  - Iterating the stack goes bottom to top, which is the order for updates. `reversed()` goes top to bottom, which is the order for events.
  - `close()` detaches every layer. The stack is also a context manager.

### Logging

- `hazel_engine.log` has `init_logging(log_path="Hazel.log")`, which sets up the `"HAZEL"` and `"APP"` loggers.
- Both loggers write to stdout and to the log file. The file is truncated on every call.
- `core_logger()` and `client_logger()` return them.

### Maths and buffers

- `hazel_engine.transforms` holds the 4×4 matrix helpers, as numpy arrays in the `M @ v` convention:
  - `translate`, `rotate`, `scale`, `perspective` and `ortho`.
  - Quaternion helpers, with quaternions as `(w, x, y, z)`: `quat_from_euler`, `quat_to_mat4` and `quat_rotate`.
  - `decompose_transform` splits a transform into `(translation, rotation, scale)`. It raises `ValueError` when the w component is zero.
- `hazel_engine.buffer` describes vertex attributes:
  - `ShaderDataType` and `shader_data_type_size`.
  - `BufferElement`, with `size` and `component_count()`.
  - `BufferLayout`, which computes each element's offset and the `stride`.

### Cameras

- `hazel_engine.camera` has two cameras:
  - `Camera` is defined only by a projection matrix.
  - `OrthographicCamera` has a settable `position` and a `rotation` in degrees.
- `hazel_engine.scene_camera` has `SceneCamera` and `ProjectionType`:
  - It switches between perspective and orthographic projection.
  - `set_viewport_size` raises `ValueError` for a zero or negative size.
- `hazel_engine.editor_camera` has `EditorCamera`, which orbits a focal point:
  - `mouse_pan`, `mouse_rotate` and `mouse_zoom` move it.
  - `on_mouse_move` applies one frame of mouse navigation, and `on_mouse_scroll` zooms.
- `hazel_engine.camera_controller` has `OrthographicCameraController`:
  - `on_update(ts, is_key_pressed)` moves the camera with W/A/S/D, and rotates it with Q/E when rotation is enabled.
  - `on_mouse_scrolled` zooms, with the zoom level never going below 0.25.
  - `on_resize` and `on_window_resized` update the aspect ratio.

### Shaders and rendering

- `hazel_engine.shader` has two classes:
  - `Shader` records whether it is bound and the uniform values it was given.
  - `ShaderLibrary` stores shaders by name. `add` raises `ValueError` for a name that is already used, and `get` raises `KeyError` for an unknown name.
- `hazel_engine.renderer2d` has the renderer and its helpers:
  - `Renderer2D` batches quads, textured quads, circles, lines and rectangles.
  - `RendererAPI` is the recording backend, and `Texture` is a texture.
  - `Statistics` counts draw calls and quads.
  - A new batch starts when 20000 quads or 32 texture slots are in use.
  - `draw_sprite` takes any object with `color`, `texture` and `tiling_factor` attributes.

## Example

```python
from hazel_engine.camera import OrthographicCamera
from hazel_engine.renderer2d import Renderer2D

renderer = Renderer2D()
camera = OrthographicCamera(-1.6, 1.6, -0.9, 0.9)

renderer.begin_scene(camera)
renderer.draw_quad_at((0.0, 0.0), (1.0, 1.0), (1.0, 0.2, 0.2, 1.0))
renderer.draw_rect((0.5, 0.5, 0.0), (0.5, 0.5), (0.0, 1.0, 0.0, 1.0))
renderer.end_scene()

print(renderer.stats())                          # Statistics(draw_calls=2, quad_count=1)
print([call[0] for call in renderer.api.calls])  # ['init', 'indexed', 'line_width', 'lines']
```

## What it does not do

- It opens no window and draws nothing on screen. Drawing stops at the `RendererAPI` object, and you supply a real backend yourself.
- There is no application main loop and no event system. Cameras and layers receive plain values, such as offsets, sizes and a key-pressed callback.
- There is no entity or scene system.
- There is no scene file format for saving or loading levels.

## Tests

```
pytest
```
# heshen

A small CPU renderer in plain Python with no third-party dependencies.
It draws coloured wireframe lines into an in-memory image. It also
includes a reader for RIFF/WAVE audio files.

## What is in the package

- `heshen.matrix`: `Vector` and `Matrix` of floats.
  - `Vector` supports element-wise `+`, `-`, scalar `*` and `/`, and
    negation. It also has `dot`, `cross` (3D only), `normalize` (which
    returns a copy), `length` and `is_zero`.
  - `Matrix` supports `+`, `-`, scalar `*` and `/`, and `matrix @ matrix`
    and `matrix @ vector`. It has `set_row`, `set_column`,
    `Matrix.identity` and `Matrix.from_rows`.
  - A dimension mismatch raises `ValueError`.
- `heshen.image`: the `Rect` dataclass, a row-major `Image`, and `psnr`.
  - `Image.get` raises `IndexError` outside the image.
  - `Image.set` ignores writes that fall outside the image.
  - `psnr` compares two images of the same size. It returns `PSNR_MAX`
    (100) for identical images.
- `heshen.color`: `BaseColor` (named 24-bit colours) and a frozen `Color`
  with `r`, `g`, `b`, `a` channels.
  - `Color.from_argb` and `to_argb` convert between a `Color` and a
    packed 32-bit ARGB value.
  - `Color.lerp` blends two colours, with `t` clamped to [0, 1].
- `heshen.commands`: `ShaderType`, `PrimitiveType`, `ShaderBuffer`,
  `ShaderCommand` and `CommandList`.
- `heshen.lineshader`: `LineShaderPipeline`. It transforms the endpoints by
  a model-view-projection matrix, maps them to the viewport, rasterises
  with Bresenham and interpolates the endpoint colours.
- `heshen.renderer`: `Renderer` queues command lists and runs their `LINE`
  commands into a render target image.
  - `prepare` starts a frame, `render` runs the queue, and `present` hands
    the image to the function given to `set_present_func`.
  - `Renderer.instance()` returns a shared renderer.
- `heshen.camera`:
  - `Camera2D` has view and projection matrices and an orthographic matrix
    that spans its world's resolution.
  - `Camera3D` has a perspective projection. `move_local` moves it in its
    own frame. `rotate_local` turns it by yaw and pitch in degrees, with
    pitch clamped to ±89.
- `heshen.nodes`:
  - `Node2D` is a tree node with position, scale and children.
  - `Line2D` is a two-point segment.
  - `Node3D` is an abstract base.
  - `Cube` is a wireframe box with width, height, depth and a colour per
    corner.
  - Nodes queue their draw commands on their world's `command_list`.
- `heshen.input`: `KeyCode`, `KeyEvent` and `InputManager`. The manager
  tracks pressed keys, mouse buttons, mouse position, per-frame mouse
  motion and focus, and notifies registered handlers of key events.
  `translate_virtual_key` and `translate_window_message` map raw key codes
  and window message numbers to these enums.
- `heshen.playercontrol`: `PlayerControl` steers a 3D world's camera.
  - W/S move forward and back, A/D move sideways, Q/E move up and down.
  - Dragging with the right mouse button turns the camera.
  - `InputSubscription` keeps a handler registered until `close()`. It can
    also be used as a context manager.
- `heshen.world`:
  - `World2D` holds a root `Node2D` and a `Camera2D`.
  - `World3D` holds `Node3D`s, a `Camera3D` and a `PlayerControl`.
  - `render()` rebuilds the world's command list and submits it to the
    renderer.
- `heshen.scene`: `Scene` holds 2D and 3D worlds and a resolution. Its
  `update` and `render` drive the 2D worlds first, then the 3D ones.
- `heshen.wavereader`: `WaveReader.load` checks the RIFF/WAVE header and
  reads the `fmt ` chunk into `reader.fmt` (a `WavFmt`). It puts the
  `data` chunk's bytes in `reader.raw_data` and skips other chunks.
  - It raises `WaveFormatError` for files it does not accept.
  - `get_chunk_type` and `remaining_size` are available as helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Drawing a cube

```python
from heshen.color import Color
from heshen.image import Rect
from heshen.nodes import Cube
from heshen.renderer import Renderer
from heshen.scene import Scene
from heshen.world import World3D

scene = Scene()
scene.set_resolution(800, 600)

world = World3D()
scene.add_world(world)

cube = Cube()
cube.width = cube.height = cube.depth = 100
cube.set_color(0, Color(255, 0, 0))
world.add_node(cube)

frames = []
renderer = Renderer.instance()
renderer.set_present_func(frames.append)

renderer.prepare(Rect(0, 0, 800, 600))
scene.update()
scene.render()
renderer.render()
renderer.present()

image = frames[-1]          # an Image of packed ARGB integers
print(image.get(400, 300))
```

A `World2D` works the same way with `Line2D` nodes:

```python
from heshen.nodes import Line2D
from heshen.world import World2D

world2d = World2D()
scene.add_world(world2d)

line = Line2D()
line.set_pos1(0, 0)
line.set_pos2(200, 100)
world2d.add_node(line)
```

Its orthographic camera needs the scene resolution to be set. Without it,
rendering raises `ValueError`.

## Reading a WAVE file

```python
from heshen.wavereader import WaveReader

reader = WaveReader()
reader.load("sound.wav")
print(reader.fmt.channels, reader.fmt.sample_rate, len(reader.raw_data))
```

## What it does not do

- **No display.** Finished frames are only `Image` objects passed to your
  present function.
- **No window, event loop or frame timer.** Key and mouse input must be
  fed to `InputManager` by your own code.
- **No triangles or filled shapes.** Only `LINE` commands are drawn.
- **No command-line program.**
- **No audio decoding or playback.** `WaveReader` only reads the format
  and the raw sample bytes.
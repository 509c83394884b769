# toonview

A small interactive viewer that loads a Wavefront OBJ model and draws it with a
toon shader, or with a textured cross-hatch shader. The camera orbits the model
on its own; you turn the model with the mouse and zoom with the scroll wheel.

The window uses an OpenGL 3.3 context through pyglet; textures are read with
Pillow.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Toon-shaded view:

```
toonview [path/to/model.obj]
```

Without an argument the viewer opens `tralalero-tralala.obj` from the current
directory. The shaders are read from `shaders/toon.vert` and
`shaders/toon.frag`, relative to the current directory, and the model is drawn
at a scale of 50.5.

Textured cross-hatch view:

```
toonview-textured [path/to/model.obj] [path/to/texture.png]
```

The defaults are `teapot.obj` and `default_texture.png`. The shaders are read
from `../shaders/crosshatch.vert` and `../shaders/crosshatch.frag`, and the
model is drawn at a scale of 8. The texture must be a PNG file.

The shader files themselves are not part of this package; supply your own
GLSL programs at those paths. They receive the uniforms `projection`, `view`,
`model`, `normalMatrix`, `lightDir`, `lightColor`, `objectColor` and `viewPos`,
plus `textureSampler` in the textured view. Vertex attributes are the position
(location 0), the normal (location 1) and, in the textured view, the texture
coordinate (location 2).

Both commands return exit status 1 when the window, shaders, texture or model
cannot be loaded.

### Controls

- Hold the left mouse button and drag to rotate the model (pitch is limited to ±89°).
- Scroll to change the field of view, between 1° and 60° (45° at start).
- Press Escape to close the window.

## Library use

The OBJ loading, matrix helpers and camera state work without a window:

```python
import math

from toonview.mesh import load_obj_model
from toonview.transforms import look_at, perspective

mesh = load_obj_model("teapot.obj", with_texcoords=True)
print(len(mesh.vertices), len(mesh.indices))

projection = perspective(math.radians(45.0), 800 / 600, 0.1, 100.0)
view = look_at((0.0, 0.5, 40.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
```

- `toonview.mesh`: `parse_obj` and `read_obj` give an `ObjData` of positions,
  normals, texture coordinates and triangle faces (`FaceIndex` corners, zero
  based, -1 for a missing attribute). Polygons with more than three corners are
  split into triangle fans; faces with fewer than three are dropped.
  `build_mesh` merges corners that share position and normal (and texture
  coordinate when `with_texcoords` is true) into unique `Vertex` entries of a
  `MeshData`; corners without a valid normal get `(0, 1, 0)`.
  `load_obj_model` combines both. It raises `ObjLoadError` when the file cannot
  be read, holds a malformed number or index, or refers to a vertex that does
  not exist, and, with `with_texcoords`, when the resulting mesh is empty.
- `toonview.transforms`: `normalize`, `perspective` (field of view in radians),
  `look_at`, `rotate`, `scale`, `translate`, `normal_matrix` and
  `model_matrix`, on numpy arrays in row/column layout applied as `m @ v`.
- `toonview.camera`: `OrbitCamera` (`advance`, `position`, `view_matrix`) and
  `ModelController` (`on_mouse_button`, `on_cursor`, `on_scroll`,
  `projection`, `model_matrix`).
- `toonview.shader`: `Shader` compiles and links a vertex and fragment file and
  sets uniforms (`set_bool`, `set_int`, `set_float`, `set_vec2`..`set_vec4`,
  `set_mat2`..`set_mat4`); `load_shaders` does the same for several files and
  makes the program current; `make_texture` creates a linearly filtered RGBA
  texture. These need a current OpenGL context. `read_text_file` and
  `load_image_rgba` do not.
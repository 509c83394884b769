"""Command-line entry points and the interactive viewer window."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional

from toonview import transforms
from toonview.camera import (
    MOUSE_BUTTON_LEFT,
    PRESS,
    RELEASE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    ModelController,
    OrbitCamera,
)
from toonview.mesh import MeshData, ObjLoadError, load_obj_model
from toonview.shader import Shader, make_texture

DEFAULT_OBJ = "tralalero-tralala.obj"
DEFAULT_TEXTURED_OBJ = "teapot.obj"
DEFAULT_TEXTURE = "default_texture.png"
WINDOW_TITLE = "Toon Shading OBJ Example"

LIGHT_DIRECTION = (0.8, 0.8, 0.8)
LIGHT_COLOR = (1.0, 1.0, 1.0)
OBJECT_COLOR = (0.6, 0.6, 0.6)
CLEAR_COLOR = (0.1, 0.1, 0.2, 1.0)


@dataclass
class ViewerConfig:
    """Everything the viewer needs to start."""

    obj_path: str = DEFAULT_OBJ
    texture_path: Optional[str] = None
    vertex_shader: str = "shaders/toon.vert"
    fragment_shader: str = "shaders/toon.frag"
    scale_factor: float = 50.5
    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    title: str = WINDOW_TITLE

    @property
    def textured(self) -> bool:
        return self.texture_path is not None


def parse_arguments(argv) -> ViewerConfig:
    """Build the toon-shaded viewer config from the arguments after the program name."""
    args = list(argv)
    config = ViewerConfig()
    if args:
        config.obj_path = args[0]
    else:
        print("Usage: toonview [path/to/model.obj]")
        print(f"No OBJ path provided, using default: {config.obj_path}")
    return config


def parse_textured_arguments(argv) -> ViewerConfig:
    """Build the cross-hatched, textured viewer config from the arguments."""
    args = list(argv)
    config = ViewerConfig(
        obj_path=DEFAULT_TEXTURED_OBJ,
        texture_path=DEFAULT_TEXTURE,
        vertex_shader="../shaders/crosshatch.vert",
        fragment_shader="../shaders/crosshatch.frag",
        scale_factor=8.0,
    )
    usage = "Usage: toonview-textured [path/to/model.obj] [path/to/texture.png]"
    if len(args) == 1:
        config.obj_path = args[0]
        print(usage)
        print(f"No texture path provided, using default: {config.texture_path}")
    elif len(args) >= 2:
        config.obj_path, config.texture_path = args[0], args[1]
    else:
        print(usage)
        print(
            f"No paths provided, using defaults: {config.obj_path} and {config.texture_path}"
        )
    return config


def _upload_mesh(shader: Shader, mesh: MeshData, textured: bool, gl):
    native = shader.program.native
    by_location = {info["location"]: name for name, info in native.attributes.items()}
    columns = {
        0: [c for v in mesh.vertices for c in v.position],
        1: [c for v in mesh.vertices for c in v.normal],
    }
    if textured:
        columns[2] = [c for v in mesh.vertices for c in v.tex_coords]
    data = {
        by_location[location]: ("f", values)
        for location, values in columns.items()
        if location in by_location
    }
    return native.vertex_list_indexed(
        len(mesh.vertices), gl.GL_TRIANGLES, list(mesh.indices), **data
    )


def run(config: ViewerConfig) -> int:
    """Open the window and render until it is closed; return an exit status."""
    import pyglet
    from pyglet import gl

    gl_config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    try:
        window = pyglet.window.Window(
            config.width, config.height, config.title, config=gl_config, resizable=True
        )
    except Exception as exc:
        print(f"Failed to create window: {exc}", file=sys.stderr)
        return 1

    gl.glEnable(gl.GL_DEPTH_TEST)

    try:
        shader = Shader(config.vertex_shader, config.fragment_shader)
    except (OSError, RuntimeError) as exc:
        print(f"Error loading shaders: {exc}", file=sys.stderr)
        window.close()
        return 1

    texture = None
    if config.textured:
        try:
            texture = make_texture(config.texture_path)
        except (OSError, ValueError) as exc:
            print(f"Error loading texture: {exc}", file=sys.stderr)
            shader.delete()
            window.close()
            return 1
        print(f"Loaded texture: {config.texture_path} with ID: {texture.id}")

    try:
        mesh = load_obj_model(config.obj_path, with_texcoords=config.textured)
    except ObjLoadError as exc:
        print(f"Error loading OBJ: {exc}", file=sys.stderr)
        shader.delete()
        window.close()
        return 1
    print(
        f"Loaded OBJ model '{config.obj_path}' with {len(mesh.vertices)} unique "
        f"vertices and {len(mesh.indices)} indices."
    )

    vertex_list = _upload_mesh(shader, mesh, config.textured, gl) if mesh.indices else None
    camera = OrbitCamera()
    controller = ModelController()
    light_direction = transforms.normalize(LIGHT_DIRECTION)
    aspect = SCREEN_WIDTH / SCREEN_HEIGHT

    @window.event
    def on_resize(width, height):
        gl.glViewport(0, 0, *window.get_framebuffer_size())
        return pyglet.event.EVENT_HANDLED

    @window.event
    def on_mouse_press(x, y, button, modifiers):
        if button == pyglet.window.mouse.LEFT:
            controller.on_mouse_button(MOUSE_BUTTON_LEFT, PRESS)

    @window.event
    def on_mouse_release(x, y, button, modifiers):
        if button == pyglet.window.mouse.LEFT:
            controller.on_mouse_button(MOUSE_BUTTON_LEFT, RELEASE)

    @window.event
    def on_mouse_motion(x, y, dx, dy):
        controller.on_cursor(x, window.height - y)

    @window.event
    def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
        controller.on_cursor(x, window.height - y)

    @window.event
    def on_mouse_scroll(x, y, scroll_x, scroll_y):
        controller.on_scroll(scroll_x, scroll_y)

    @window.event
    def on_draw():
        position = camera.advance()
        gl.glClearColor(*CLEAR_COLOR)
        window.clear()

        shader.use()
        shader.set_mat4("projection", controller.projection(aspect))
        shader.set_mat4("view", camera.view_matrix())
        model = controller.model_matrix(config.scale_factor)
        shader.set_mat4("model", model)
        shader.set_mat3("normalMatrix", transforms.normal_matrix(model))
        shader.set_vec3("lightDir", light_direction)
        shader.set_vec3("lightColor", LIGHT_COLOR)
        shader.set_vec3("objectColor", OBJECT_COLOR)
        shader.set_vec3("viewPos", position)

        if texture is not None:
            gl.glActiveTexture(gl.GL_TEXTURE0)
            gl.glBindTexture(texture.target, texture.id)
            shader.set_int("textureSampler", 0)

        if vertex_list is not None:
            vertex_list.draw(gl.GL_TRIANGLES)

        if texture is not None:
            gl.glBindTexture(texture.target, 0)

    pyglet.app.run()

    if vertex_list is not None:
        vertex_list.delete()
    if texture is not None:
        texture.delete()
    shader.delete()
    return 0


def main(argv=None) -> int:
    """Toon-shaded OBJ viewer."""
    args = sys.argv[1:] if argv is None else argv
    return run(parse_arguments(args))


def main_textured(argv=None) -> int:
    """Cross-hatched, textured OBJ viewer."""
    args = sys.argv[1:] if argv is None else argv
    return run(parse_textured_arguments(args))
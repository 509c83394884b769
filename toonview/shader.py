"""GLSL program wrapper, shader source loading and texture creation."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Callable, Protocol, Sequence, Union

import numpy as np

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class _Program(Protocol):
    def use(self) -> None: ...

    def delete(self) -> None: ...

    def set_uniform(self, name: str, value: Any) -> None: ...


ProgramFactory = Callable[[Sequence[str], Sequence[str]], _Program]
TextureFactory = Callable[[int, int, bytes], Any]


class _PygletProgram:
    """A linked program built with pyglet; needs a current GL context."""

    def __init__(self, vertex_sources: Sequence[str], fragment_sources: Sequence[str]):
        from pyglet.graphics import shader as glsl

        stages = []
        for kind, label, sources in (
            ("vertex", "VERTEX", vertex_sources),
            ("fragment", "FRAGMENT", fragment_sources),
        ):
            for source in sources:
                try:
                    stages.append(glsl.Shader(source, kind))
                except glsl.ShaderException as exc:
                    raise RuntimeError(
                        f"shader compilation error of type: {label}\n{exc}"
                    ) from exc
        try:
            self.native = glsl.ShaderProgram(*stages)
        except glsl.ShaderException as exc:
            raise RuntimeError(f"program linking error of type: PROGRAM\n{exc}") from exc
        finally:
            for stage in stages:
                stage.delete()

    def use(self) -> None:
        self.native.use()

    def delete(self) -> None:
        self.native.delete()

    def set_uniform(self, name: str, value: Any) -> None:
        # Unknown or optimised-away uniforms are ignored, as GL does for location -1.
        if name in self.native.uniforms:
            self.native[name] = value


def _vector(args: tuple, size: int) -> tuple[float, ...]:
    if len(args) == 1:
        values = np.asarray(args[0], dtype=float).ravel()
    elif len(args) == size:
        values = np.asarray(args, dtype=float)
    else:
        raise TypeError(f"expected one vector or {size} components, got {len(args)} arguments")
    if values.size != size:
        raise ValueError(f"expected {size} components, got {values.size}")
    return tuple(float(v) for v in values)


def _matrix(matrix, size: int) -> tuple[float, ...]:
    m = np.asarray(matrix, dtype=float)
    if m.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {m.shape}")
    # GL expects column-major order.
    return tuple(float(v) for v in m.T.ravel())


class Shader:
    """A vertex and fragment shader pair linked into one program."""

    def __init__(
        self,
        vertex_path: PathLike,
        fragment_path: PathLike,
        *,
        program_factory: ProgramFactory | None = None,
    ):
        vertex_source = read_text_file(vertex_path)
        fragment_source = read_text_file(fragment_path)
        self._setup([vertex_source], [fragment_source], program_factory)

    def _setup(self, vertex_sources, fragment_sources, program_factory) -> None:
        factory = program_factory or _PygletProgram
        self.program: _Program = factory(list(vertex_sources), list(fragment_sources))
        self._deleted = False

    @classmethod
    def _from_sources(cls, vertex_sources, fragment_sources, program_factory=None) -> "Shader":
        shader = cls.__new__(cls)
        shader._setup(vertex_sources, fragment_sources, program_factory)
        return shader

    def __enter__(self) -> "Shader":
        return self

    def __exit__(self, *exc_info) -> None:
        self.delete()

    def use(self) -> None:
        self.program.use()

    def delete(self) -> None:
        """Release the program; further calls do nothing."""
        if not self._deleted:
            self.program.delete()
            self._deleted = True

    def set_bool(self, name: str, value) -> None:
        self.program.set_uniform(name, int(bool(value)))

    def set_int(self, name: str, value) -> None:
        self.program.set_uniform(name, int(value))

    def set_float(self, name: str, value) -> None:
        self.program.set_uniform(name, float(value))

    def set_vec2(self, name: str, *args) -> None:
        """Set a vec2 from one 2-vector or from two floats."""
        self.program.set_uniform(name, _vector(args, 2))

    def set_vec3(self, name: str, *args) -> None:
        """Set a vec3 from one 3-vector or from three floats."""
        self.program.set_uniform(name, _vector(args, 3))

    def set_vec4(self, name: str, *args) -> None:
        """Set a vec4 from one 4-vector or from four floats."""
        self.program.set_uniform(name, _vector(args, 4))

    def set_mat2(self, name: str, matrix) -> None:
        self.program.set_uniform(name, _matrix(matrix, 2))

    def set_mat3(self, name: str, matrix) -> None:
        self.program.set_uniform(name, _matrix(matrix, 3))

    def set_mat4(self, name: str, matrix) -> None:
        self.program.set_uniform(name, _matrix(matrix, 4))


def read_text_file(path: PathLike) -> str:
    """Return the whole text of ``path``."""
    return Path(path).read_text(encoding="utf-8")


def _as_list(paths) -> list:
    if isinstance(paths, (str, os.PathLike)):
        return [paths]
    return list(paths)


def _read_sources(vertex_paths, fragment_paths) -> tuple[list[str], list[str]]:
    sources: dict[str, list[str]] = {"vertex": [], "fragment": []}
    for kind, paths in (("vertex", vertex_paths), ("fragment", fragment_paths)):
        for path in _as_list(paths):
            text = read_text_file(path)
            if not text:
                raise ValueError(f"shader file {path} is empty")
            sources[kind].append(text)
    return sources["vertex"], sources["fragment"]


def load_shaders(vertex_paths, fragment_paths) -> Shader:
    """Build a program from one or more vertex and fragment files and make it current."""
    vertex_sources, fragment_sources = _read_sources(vertex_paths, fragment_paths)
    shader = Shader._from_sources(vertex_sources, fragment_sources)
    shader.use()
    return shader


def load_image_rgba(path: PathLike) -> tuple[int, int, bytes]:
    """Read a PNG file as ``(width, height, rgba_bytes)``."""
    from PIL import Image

    with Image.open(path) as image:
        if image.format != "PNG":
            raise ValueError(f"{path} is not a PNG image")
        rgba = image.convert("RGBA")
        return rgba.width, rgba.height, rgba.tobytes()


def _pyglet_texture(width: int, height: int, pixels: bytes):
    import pyglet
    from pyglet import gl

    image = pyglet.image.ImageData(width, height, "RGBA", pixels, pitch=width * 4)
    texture = image.get_texture()
    gl.glBindTexture(texture.target, texture.id)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
    gl.glTexParameteri(texture.target, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR)
    return texture


def make_texture(path: PathLike):
    """Load a PNG file into a linearly filtered RGBA texture."""
    width, height, pixels = load_image_rgba(path)
    return _pyglet_texture(width, height, pixels)
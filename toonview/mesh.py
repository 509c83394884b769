"""Wavefront OBJ reading and conversion to an indexed, de-duplicated vertex mesh."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

log = logging.getLogger(__name__)

PLACEHOLDER_NORMAL = (0.0, 1.0, 0.0)

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


class ObjLoadError(ValueError):
    """Raised when an OBJ file cannot be read or turned into a mesh."""


@dataclass(frozen=True)
class FaceIndex:
    """Zero-based indices of one face corner; -1 marks a missing attribute."""

    vertex_index: int
    normal_index: int = -1
    texcoord_index: int = -1


@dataclass
class ObjData:
    """Raw attributes and faces of an OBJ file, faces grouped by shape."""

    positions: list[Vec3] = field(default_factory=list)
    normals: list[Vec3] = field(default_factory=list)
    texcoords: list[Vec2] = field(default_factory=list)
    shapes: list[list[tuple[FaceIndex, ...]]] = field(default_factory=list)


@dataclass(frozen=True)
class Vertex:
    position: Vec3
    normal: Vec3
    tex_coords: Vec2 = (0.0, 0.0)


@dataclass
class MeshData:
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def _floats(tokens: list[str], count: int, line_no: int) -> tuple[float, ...]:
    try:
        values = [float(t) for t in tokens[:count]]
    except ValueError as exc:
        raise ObjLoadError(f"line {line_no}: invalid number") from exc
    values.extend([0.0] * (count - len(values)))
    return tuple(values)


def _resolve(token: str, count: int, line_no: int) -> int:
    if not token:
        return -1
    try:
        raw = int(token)
    except ValueError as exc:
        raise ObjLoadError(f"line {line_no}: invalid index {token!r}") from exc
    if raw == 0:
        raise ObjLoadError(f"line {line_no}: index 0 is not allowed")
    return raw - 1 if raw > 0 else count + raw


def _face_corner(token: str, obj: ObjData, line_no: int) -> FaceIndex:
    parts = token.split("/")
    if len(parts) > 3 or not parts[0]:
        raise ObjLoadError(f"line {line_no}: malformed face element {token!r}")
    parts += [""] * (3 - len(parts))
    return FaceIndex(
        vertex_index=_resolve(parts[0], len(obj.positions), line_no),
        texcoord_index=_resolve(parts[1], len(obj.texcoords), line_no),
        normal_index=_resolve(parts[2], len(obj.normals), line_no),
    )


def parse_obj(text: str) -> ObjData:
    """Parse OBJ text; polygons are split into triangle fans, degenerate faces dropped."""
    obj = ObjData()
    current: list[tuple[FaceIndex, ...]] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        tokens = line.split("#", 1)[0].split()
        if not tokens:
            continue
        keyword, args = tokens[0], tokens[1:]
        if keyword == "v":
            obj.positions.append(_floats(args, 3, line_no))
        elif keyword == "vn":
            obj.normals.append(_floats(args, 3, line_no))
        elif keyword == "vt":
            obj.texcoords.append(_floats(args, 2, line_no))
        elif keyword == "f":
            corners = [_face_corner(t, obj, line_no) for t in args]
            if len(corners) < 3:
                continue
            first = corners[0]
            current.extend(
                (first, b, c) for b, c in zip(corners[1:-1], corners[2:])
            )
        elif keyword in ("o", "g") and current:
            obj.shapes.append(current)
            current = []
    if current:
        obj.shapes.append(current)
    return obj


def read_obj(path) -> ObjData:
    """Read and parse an OBJ file."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise ObjLoadError(f"Cannot open file [{path}]") from exc
    return parse_obj(text)


def _unit(v: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0.0:
        return v
    return tuple(c / length for c in v)


def build_mesh(obj: ObjData, with_texcoords: bool = False) -> MeshData:
    """Turn triangle faces into unique vertices plus an index list.

    Corners sharing position and normal (and texture coordinate, when
    ``with_texcoords``) become one vertex. With texture coordinates the
    normals are also normalised.
    """
    mesh = MeshData()
    unique: dict[tuple[int, ...], int] = {}
    for faces in obj.shapes:
        for face in faces:
            if len(face) != 3:
                log.warning("Non-triangle face (vertices=%d). Skipping.", len(face))
                continue
            for corner in face:
                key: tuple[int, ...] = (corner.vertex_index, max(corner.normal_index, -1))
                if with_texcoords:
                    key += (max(corner.texcoord_index, -1),)
                if key not in unique:
                    mesh.vertices.append(_make_vertex(obj, corner, with_texcoords))
                    unique[key] = len(mesh.vertices) - 1
                mesh.indices.append(unique[key])
    return mesh


def _make_vertex(obj: ObjData, corner: FaceIndex, with_texcoords: bool) -> Vertex:
    if not 0 <= corner.vertex_index < len(obj.positions):
        raise ObjLoadError("Invalid vertex index in OBJ file.")
    position = obj.positions[corner.vertex_index]
    if 0 <= corner.normal_index < len(obj.normals):
        normal = obj.normals[corner.normal_index]
        if with_texcoords:
            normal = _unit(normal)
    else:
        log.warning("Missing or invalid normal index for vertex. Using placeholder (0,1,0).")
        normal = PLACEHOLDER_NORMAL
    tex = (0.0, 0.0)
    if with_texcoords and 0 <= corner.texcoord_index < len(obj.texcoords):
        tex = obj.texcoords[corner.texcoord_index]
    return Vertex(position=position, normal=normal, tex_coords=tex)


def load_obj_model(path, with_texcoords: bool = False) -> MeshData:
    """Read an OBJ file into a mesh.

    An empty result is only a warning, except with texture coordinates where
    it is an error.
    """
    mesh = build_mesh(read_obj(path), with_texcoords)
    if not mesh.vertices or not mesh.indices:
        if with_texcoords:
            raise ObjLoadError("Loaded OBJ file resulted in empty mesh data.")
        log.warning("Loaded OBJ file resulted in empty mesh data.")
    return mesh
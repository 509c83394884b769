"""Orbiting camera and mouse-driven model orientation state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from toonview import transforms

TWO_PI = 2.0 * 3.14159265

MOUSE_BUTTON_LEFT = 0
RELEASE = 0
PRESS = 1

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

MIN_FOV = 1.0
MAX_FOV = 60.0
PITCH_LIMIT = 89.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0


@dataclass
class OrbitCamera:
    """A camera circling the target at a fixed height."""

    radius: float = 40.0
    speed: float = 0.005
    height: float = 0.5
    angle_x: float = 0.0
    angle_z: float = 0.0
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    up: tuple[float, float, float] = (0.0, 1.0, 0.0)

    @property
    def position(self) -> np.ndarray:
        return np.array(
            [
                self.radius * math.sin(self.angle_x),
                self.height,
                self.radius * math.cos(self.angle_z),
            ]
        )

    def advance(self) -> np.ndarray:
        """Step the orbit by one frame and return the new camera position."""
        self.angle_x += self.speed
        self.angle_z += self.speed
        if self.angle_x > TWO_PI:
            self.angle_x -= TWO_PI
        if self.angle_z > TWO_PI:
            self.angle_z -= TWO_PI
        return self.position

    def view_matrix(self) -> np.ndarray:
        return transforms.look_at(self.position, self.target, self.up)


@dataclass
class ModelController:
    """Tracks drag rotation of the model and scroll zoom of the field of view."""

    yaw: float = 0.0
    pitch: float = 0.0
    fov: float = 45.0
    sensitivity: float = 0.2
    last_x: float = SCREEN_WIDTH / 2.0
    last_y: float = SCREEN_HEIGHT / 2.0
    first_mouse: bool = field(default=True)
    button_pressed: bool = field(default=False)

    def on_mouse_button(self, button: int, action: int) -> None:
        if button != MOUSE_BUTTON_LEFT:
            return
        if action == PRESS:
            self.button_pressed = True
            self.first_mouse = True
        elif action == RELEASE:
            self.button_pressed = False

    def on_cursor(self, x: float, y: float) -> None:
        x = float(x)
        y = float(y)
        if not self.button_pressed:
            self.last_x = x
            self.last_y = y
            self.first_mouse = True
            return
        if self.first_mouse:
            self.last_x = x
            self.last_y = y
            self.first_mouse = False
        x_offset = (x - self.last_x) * self.sensitivity
        y_offset = (self.last_y - y) * self.sensitivity
        self.last_x = x
        self.last_y = y
        self.yaw += x_offset
        self.pitch = min(PITCH_LIMIT, max(-PITCH_LIMIT, self.pitch + y_offset))

    def on_scroll(self, x_offset: float, y_offset: float) -> None:
        self.fov = min(MAX_FOV, max(MIN_FOV, self.fov - float(y_offset)))

    def projection(self, aspect: float) -> np.ndarray:
        return transforms.perspective(math.radians(self.fov), aspect, NEAR_PLANE, FAR_PLANE)

    def model_matrix(self, scale_factor: float) -> np.ndarray:
        return transforms.model_matrix(self.pitch, self.yaw, scale_factor)
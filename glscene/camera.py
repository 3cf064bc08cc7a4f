"""A first-person fly camera driven by pitch/yaw angles and movement keys."""

from __future__ import annotations

import math

import numpy as np

from glscene.transforms import look_at, normalize

PITCH_UP_LIMIT = 75.0
PITCH_DOWN_LIMIT = -75.0


class Camera:
    """Free-flying camera.

    At zero pitch and yaw the camera looks down the negative z axis. Positive
    pitch tilts the view up, positive yaw turns it to the right. Angles are
    kept in degrees.
    """

    def __init__(self, position) -> None:
        self.position = np.asarray(position, dtype=np.float64).reshape(3).copy()
        self.pitch = 0.0
        self.yaw = 0.0
        self.roll = 0.0
        self.direction = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        # x scales yaw, y scales pitch, z scales roll.
        self.sensitivity = np.array([0.1, 0.1, 0.1])
        self.speed = 3.0
        self.dead_zone_enabled = True
        self.dead_zone_x = 2.0
        self.dead_zone_y = 2.0
        self.update()

    def sync_angle(self, pitch_offset: float, yaw_offset: float, roll_offset: float) -> np.ndarray:
        """Apply raw angle offsets (e.g. mouse motion) and return the new view matrix."""
        if self.dead_zone_enabled:
            if abs(pitch_offset) < self.dead_zone_x:
                pitch_offset = 0.0
            if abs(yaw_offset) < self.dead_zone_y:
                yaw_offset = 0.0

        self.pitch += pitch_offset * self.sensitivity[1]
        self.pitch = min(max(self.pitch, PITCH_DOWN_LIMIT), PITCH_UP_LIMIT)
        self.yaw = math.fmod(self.yaw + yaw_offset * self.sensitivity[0], 360.0)
        self.roll += roll_offset * self.sensitivity[2]
        return self.update()

    def sync_position(self, delta_time: float, direction) -> np.ndarray:
        """Move along one camera-relative axis selected by ``direction``.

        The first non-zero component of ``direction`` in x, y, z order picks
        the move: x is strafe right/left, y is up/down, negative z is forward
        and positive z is backward.
        """
        dx, dy, dz = np.asarray(direction, dtype=np.float64).reshape(3)
        step = delta_time * self.speed
        right = np.cross(self.direction, self.up)
        if dx > 0:
            self.position = self.position + right * step
        elif dx < 0:
            self.position = self.position - right * step
        elif dy > 0:
            self.position = self.position + self.up * step
        elif dy < 0:
            self.position = self.position - self.up * step
        elif dz > 0:
            self.position = self.position - self.direction * step
        elif dz < 0:
            self.position = self.position + self.direction * step
        return self.update()

    def update(self) -> np.ndarray:
        """Recompute the viewing axes from the angles and return the view matrix."""
        pitch = math.radians(self.pitch)
        yaw = math.radians(self.yaw)
        self.direction = normalize(
            [
                math.cos(pitch) * math.sin(yaw),
                math.sin(pitch),
                -math.cos(pitch) * math.cos(yaw),
            ]
        )
        tilted = math.radians(self.pitch + 90.0)
        self.up = np.array(
            [
                math.cos(tilted) * math.sin(yaw),
                math.sin(tilted),
                -math.cos(tilted) * math.cos(yaw),
            ]
        )
        return look_at(self.position, self.position + self.direction, self.up)
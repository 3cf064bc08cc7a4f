"""Vertex and index data for the scene's meshes.

Vertex arrays are ``float32`` and interleaved, one vertex per row:
positions first, then normals if present, then texture coordinates.
"""

from __future__ import annotations

import numpy as np

# One face per entry: (normal, [(position, texcoord), ...] in draw order).
_CUBE_FACES = (
    (
        (0.0, 0.0, -1.0),
        [
            ((-0.5, -0.5, -0.5), (0.0, 0.0)),
            ((0.5, -0.5, -0.5), (1.0, 0.0)),
            ((0.5, 0.5, -0.5), (1.0, 1.0)),
            ((0.5, 0.5, -0.5), (1.0, 1.0)),
            ((-0.5, 0.5, -0.5), (0.0, 1.0)),
            ((-0.5, -0.5, -0.5), (0.0, 0.0)),
        ],
    ),
    (
        (0.0, 0.0, 1.0),
        [
            ((-0.5, -0.5, 0.5), (0.0, 0.0)),
            ((0.5, -0.5, 0.5), (1.0, 0.0)),
            ((0.5, 0.5, 0.5), (1.0, 1.0)),
            ((0.5, 0.5, 0.5), (1.0, 1.0)),
            ((-0.5, 0.5, 0.5), (0.0, 1.0)),
            ((-0.5, -0.5, 0.5), (0.0, 0.0)),
        ],
    ),
    (
        (-1.0, 0.0, 0.0),
        [
            ((-0.5, 0.5, 0.5), (1.0, 0.0)),
            ((-0.5, 0.5, -0.5), (1.0, 1.0)),
            ((-0.5, -0.5, -0.5), (0.0, 1.0)),
            ((-0.5, -0.5, -0.5), (0.0, 1.0)),
            ((-0.5, -0.5, 0.5), (0.0, 0.0)),
            ((-0.5, 0.5, 0.5), (1.0, 0.0)),
        ],
    ),
    (
        (1.0, 0.0, 0.0),
        [
            ((0.5, 0.5, 0.5), (1.0, 0.0)),
            ((0.5, 0.5, -0.5), (1.0, 1.0)),
            ((0.5, -0.5, -0.5), (0.0, 1.0)),
            ((0.5, -0.5, -0.5), (0.0, 1.0)),
            ((0.5, -0.5, 0.5), (0.0, 0.0)),
            ((0.5, 0.5, 0.5), (1.0, 0.0)),
        ],
    ),
    (
        (0.0, -1.0, 0.0),
        [
            ((-0.5, -0.5, -0.5), (0.0, 1.0)),
            ((0.5, -0.5, -0.5), (1.0, 1.0)),
            ((0.5, -0.5, 0.5), (1.0, 0.0)),
            ((0.5, -0.5, 0.5), (1.0, 0.0)),
            ((-0.5, -0.5, 0.5), (0.0, 0.0)),
            ((-0.5, -0.5, -0.5), (0.0, 1.0)),
        ],
    ),
    (
        (0.0, 1.0, 0.0),
        [
            ((-0.5, 0.5, -0.5), (0.0, 1.0)),
            ((0.5, 0.5, -0.5), (1.0, 1.0)),
            ((0.5, 0.5, 0.5), (1.0, 0.0)),
            ((0.5, 0.5, 0.5), (1.0, 0.0)),
            ((-0.5, 0.5, 0.5), (0.0, 0.0)),
            ((-0.5, 0.5, -0.5), (0.0, 1.0)),
        ],
    ),
)

_FLOOR_CORNERS = (
    ((-0.9, 0.9, 0.0), (0.0, 1.0)),
    ((0.9, 0.9, 0.0), (1.0, 1.0)),
    ((-0.9, -0.9, 0.0), (0.0, 0.0)),
    ((0.9, -0.9, 0.0), (1.0, 0.0)),
)

_FLOOR_NORMAL = (0.0, 0.0, 1.0)

CUBE_VERTEX_COUNT = 36
FLOOR_INDEX_COUNT = 6


def cube_vertices() -> np.ndarray:
    """Unit cube centred on the origin as 36 rows of position, normal, texcoord."""
    rows = [
        (*position, *normal, *texcoord)
        for normal, corners in _CUBE_FACES
        for position, texcoord in corners
    ]
    return np.array(rows, dtype=np.float32)


def floor_vertices(with_normals: bool = True) -> np.ndarray:
    """The floor quad's four corners, in the z = 0 plane.

    Rows are position, normal (if ``with_normals``) and texcoord.
    """
    rows = [
        (*position, *(_FLOOR_NORMAL if with_normals else ()), *texcoord)
        for position, texcoord in _FLOOR_CORNERS
    ]
    return np.array(rows, dtype=np.float32)


def floor_indices() -> np.ndarray:
    """Element indices drawing the floor quad as two triangles."""
    return np.array([0, 1, 2, 1, 2, 3], dtype=np.uint32)
"""JSON scene loading.

A scene bundles everything one hull computation needs::

    {
        "circles": [{"id": "a", "x": 0, "y": 0, "radius": 2}, ...],
        "order": ["a", "b"],
        "closed": true,
        "global_stretch": 0.0,
        "mirror": {"plane_count": 2, "start_angle": 0.0}
    }

Only ``circles`` is required. A missing ``order`` means the order of the
circle list.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from serpentine.domain import Circle, MirrorConfig, PathOptions, Point
from serpentine.exceptions import SceneFormatError, SceneLoadError


class CircleEntry(BaseModel):
    """One circle as written in a scene file."""

    id: str
    x: float
    y: float
    radius: float = Field(gt=0.0)
    mirrored: bool = False


class MirrorEntry(BaseModel):
    """Mirror settings as written in a scene file."""

    plane_count: int = Field(default=0, ge=0)
    start_angle: float = 0.0


class SceneDocument(BaseModel):
    """Validated contents of a scene file."""

    circles: list[CircleEntry]
    order: list[str] | None = None
    closed: bool = False
    use_start_point: bool = False
    use_end_point: bool = False
    global_stretch: float = Field(default=0.0, ge=-1.0, le=1.0)
    mirror: MirrorEntry = Field(default_factory=MirrorEntry)


@dataclass
class Scene:
    """Domain values loaded from a scene file.

    Attributes:
        circles: Circles available to the hull
        order: Circle ids in traversal order
        options: Topology flags and stretch
        mirror_config: Mirror symmetry
    """

    circles: list[Circle]
    order: list[str]
    options: PathOptions = field(default_factory=PathOptions)
    mirror_config: MirrorConfig = field(default_factory=MirrorConfig)

    @classmethod
    def from_document(cls, document: SceneDocument) -> "Scene":
        """Convert a validated document into domain values."""
        circles = [
            Circle(
                id=entry.id,
                center=Point(entry.x, entry.y),
                radius=entry.radius,
                mirrored=entry.mirrored,
            )
            for entry in document.circles
        ]
        order = document.order if document.order is not None else [c.id for c in circles]
        return cls(
            circles=circles,
            order=order,
            options=PathOptions(
                closed=document.closed,
                use_start_point=document.use_start_point,
                use_end_point=document.use_end_point,
                global_stretch=document.global_stretch,
            ),
            mirror_config=MirrorConfig(
                plane_count=document.mirror.plane_count,
                start_angle=document.mirror.start_angle,
            ),
        )


def read_scene(path: Path) -> Scene:
    """Load and validate a scene file.

    Args:
        path: Path to the JSON scene file

    Returns:
        Scene with domain values

    Raises:
        SceneLoadError: If the file does not exist or cannot be read
        SceneFormatError: If the file is not valid JSON or fails validation
    """
    if not path.is_file():
        raise SceneLoadError(str(path), "file not found")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SceneLoadError(str(path), str(e)) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SceneFormatError(str(path), f"invalid JSON: {e}") from e

    try:
        document = SceneDocument.model_validate(data)
    except ValidationError as e:
        raise SceneFormatError(str(path), str(e)) from e

    return Scene.from_document(document)

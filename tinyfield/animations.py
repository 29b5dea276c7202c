"""Global animation resources: sprite-sheet layout of each animation."""

from __future__ import annotations

from dataclasses import dataclass

MAX_ANIMATION_RESOURCES = 10


@dataclass(frozen=True)
class AnimationResource:
    """Where an animation's frames sit on its sprite sheet."""

    idle_x: int = 0
    x_offset: int = 0
    y_offset: int = 0
    frame_amount: int = 0


def default_resources() -> list[AnimationResource]:
    """Return the built-in resource table; unused slots are empty."""
    resources = [AnimationResource() for _ in range(MAX_ANIMATION_RESOURCES)]
    resources[0] = AnimationResource(idle_x=5, x_offset=66, y_offset=86, frame_amount=8)
    return resources
"""Per-frame queue of player actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional

from tinyfield.collision_queue import QueueFullError
from tinyfield.entities import EntityKey

MAX_ACTIONS = 64


class ActionType(Enum):
    PLAYER_ATTACK = auto()
    DAMAGE_COLLISION = auto()


@dataclass(frozen=True)
class Action:
    """An action; ``victim`` is only used by collision actions."""

    type: ActionType
    attacker: EntityKey
    victim: Optional[EntityKey] = None

    @classmethod
    def player_attack(cls, attacker: EntityKey) -> "Action":
        return cls(ActionType.PLAYER_ATTACK, attacker)


class ActionQueue:
    """Bounded FIFO of actions collected during one frame."""

    def __init__(self, capacity: int = MAX_ACTIONS) -> None:
        self.capacity = capacity
        self._actions: list[Action] = []

    def push(self, action: Action) -> None:
        if len(self._actions) >= self.capacity:
            raise QueueFullError("surpassed amount of max actions per frame")
        self._actions.append(action)

    def clear(self) -> None:
        self._actions.clear()

    def __len__(self) -> int:
        return len(self._actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(list(self._actions))
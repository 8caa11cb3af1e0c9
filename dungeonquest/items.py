"""Inventory items a player can carry, buy, sell and use."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from dungeonquest.player import Player


class ItemType(enum.Enum):
    """Kinds of item known to the game."""

    NONE = enum.auto()
    HEALTH_POTION = enum.auto()
    ATTACK_BOOST = enum.auto()
    MONSTER_LEATHER = enum.auto()


@dataclass
class Item(ABC):
    """A stack of identical items held in an inventory."""

    name: str
    count: int = 0

    price: ClassVar[int] = 0

    @abstractmethod
    def use(self, player: Player) -> None:
        """Apply the item's effect to ``player``."""

    def reduce_count(self) -> None:
        """Remove one item from the stack."""
        self.count -= 1

    def increase_count(self) -> None:
        """Add one item to the stack."""
        self.count += 1


@dataclass
class HealthPotion(Item):
    """Restores health when drunk."""

    price: ClassVar[int] = 10
    amount: ClassVar[int] = 50

    def use(self, player: Player) -> None:
        self.reduce_count()
        player.heal(self.amount)


@dataclass
class AttackBoost(Item):
    """Raises the player's damage until it is reset."""

    price: ClassVar[int] = 15
    amount: ClassVar[int] = 10

    def use(self, player: Player) -> None:
        self.reduce_count()
        player.increase_damage(self.amount)


@dataclass
class MonsterLeather(Item):
    """A trade good; using it has no effect."""

    price: ClassVar[int] = 5

    def use(self, player: Player) -> None:
        return None
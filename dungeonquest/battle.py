"""Turn-by-turn resolution of a fight between the player and a monster."""

from __future__ import annotations

import enum
import random
from typing import TYPE_CHECKING

from dungeonquest.items import ItemType

if TYPE_CHECKING:
    from dungeonquest.monsters import Monster
    from dungeonquest.player import Player

ROLL_MAX = 100
HEALTH_POTION_ABOVE = 75
ATTACK_BOOST_BELOW = 25
HIT_ABOVE = 50


class BattleTurn(enum.Enum):
    """Who acted in a battle step."""

    USE_ITEM = enum.auto()
    PLAYER_ATTACK = enum.auto()
    MONSTER_ATTACK = enum.auto()


class BattleResult(enum.Enum):
    """What came of a battle step."""

    ATTACK_SUCCESS = enum.auto()
    ATTACK_FAIL = enum.auto()
    USE_HEALTH_POTION = enum.auto()
    USE_ATTACK_BOOST = enum.auto()


BattleLog = list[tuple[BattleTurn, BattleResult]]


class BattleManager:
    """Advances a battle one step at a time and records who won."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.is_player_winner = False
        self.is_end_battle = False

    def reset(self) -> None:
        """Prepare for a new battle."""
        self.is_end_battle = False

    def _roll(self) -> int:
        return self._rng.randint(0, ROLL_MAX)

    def battle(self, player: Player, monster: Monster, log: BattleLog) -> None:
        """Play one step of the battle, appending what happened to ``log``.

        When either side is already down, no step is played; instead the battle
        is marked as over and the winner recorded.
        """
        if player.health <= 0 or monster.health <= 0:
            self.is_end_battle = True
            if monster.health <= 0:
                self.is_player_winner = True
            elif player.health <= 0:
                self.is_player_winner = False
            return

        def players_turn() -> bool:
            return not log or log[-1][0] is BattleTurn.MONSTER_ATTACK

        item_roll = self._roll()
        if players_turn():
            if item_roll > HEALTH_POTION_ABOVE:
                if player.item_count(ItemType.HEALTH_POTION) > 0:
                    player.use_item(ItemType.HEALTH_POTION)
                    log.append((BattleTurn.USE_ITEM, BattleResult.USE_HEALTH_POTION))
                    return
            elif item_roll < ATTACK_BOOST_BELOW:
                if player.item_count(ItemType.ATTACK_BOOST) > 0:
                    player.use_item(ItemType.ATTACK_BOOST)
                    log.append((BattleTurn.USE_ITEM, BattleResult.USE_ATTACK_BOOST))
                    return

        attack_roll = self._roll()
        if players_turn():
            if attack_roll > HIT_ABOVE:
                monster.hit(player.damage)
                log.append((BattleTurn.PLAYER_ATTACK, BattleResult.ATTACK_SUCCESS))
            else:
                log.append((BattleTurn.PLAYER_ATTACK, BattleResult.ATTACK_FAIL))
            return

        monster_roll = self._roll()
        if log[-1][0] is not BattleTurn.MONSTER_ATTACK:
            if monster_roll > HIT_ABOVE:
                player.hit(monster.damage)
                log.append((BattleTurn.MONSTER_ATTACK, BattleResult.ATTACK_SUCCESS))
            else:
                log.append((BattleTurn.MONSTER_ATTACK, BattleResult.ATTACK_FAIL))
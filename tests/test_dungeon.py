import io
import random
import re

import pytest

from dungeonquest.battle import BattleManager, BattleResult, BattleTurn
from dungeonquest.dungeon import (
    BORDER,
    CLEAR_SCREEN,
    NextStage,
    NormalDungeonStage,
    pad,
)
from dungeonquest.monsters import Goblin, Orc
from dungeonquest.player import Player

ANSI = re.compile(r"\033\[[0-9;]*[A-Za-z]")


def make_stage(player=None, monster=None, color=False, **kwargs):
    player = player if player is not None else Player()
    player.name = player.name or "Hero"
    monster = monster if monster is not None else Goblin(1, random.Random(0))
    out = io.StringIO()
    stage = NormalDungeonStage(
        player,
        monster,
        BattleManager(random.Random(1)),
        rng=random.Random(2),
        out=out,
        color=color,
        **kwargs,
    )
    return stage, out


def body_rows(screen):
    text = screen[len(CLEAR_SCREEN):]
    lines = text.split("\n")
    assert lines[0] == BORDER
    assert lines[-1] == BORDER
    return lines[1:-1]


def run_until_leave(stage, limit=2000):
    for _ in range(limit):
        result = stage.tick(1.0, True)
        if result is not None:
            return result
    raise AssertionError("stage never finished")


def test_pad_extends_to_width():
    assert pad("ab", 5) == "ab   "


def test_pad_leaves_long_text():
    assert pad("abcdef", 3) == "abcdef"


def test_initial_render_written_to_out():
    stage, out = make_stage()
    assert out.getvalue() == stage.render()
    assert "Goblin" in out.getvalue()


def test_rows_have_equal_width():
    stage, _ = make_stage()
    rows = body_rows(stage.render())
    assert len(rows) == 48
    assert len({len(row) for row in rows}) == 1


def test_rows_equal_width_after_battle_end():
    player = Player()
    player.set_name("master")
    stage, _ = make_stage(player=player)
    run_until_leave(stage)
    rows = body_rows(stage.render())
    assert len({len(row) for row in rows}) == 1


def test_render_shows_names_and_stats():
    stage, _ = make_stage()
    screen = stage.render()
    assert "  Hero" in screen
    assert f"  Damage : {stage.monster.damage}" in screen
    assert f"Health Point : {stage.player.health}" in screen


def test_render_miss_and_hit_entries():
    stage, _ = make_stage()
    stage.battle_log.append((BattleTurn.PLAYER_ATTACK, BattleResult.ATTACK_FAIL))
    stage.battle_log.append((BattleTurn.MONSTER_ATTACK, BattleResult.ATTACK_SUCCESS))
    screen = stage.render()
    assert "  MISS" in screen
    assert f"  HIT : {stage.monster.damage}" in screen


def test_render_item_use_entries():
    stage, _ = make_stage()
    stage.battle_log.append((BattleTurn.USE_ITEM, BattleResult.USE_HEALTH_POTION))
    stage.battle_log.append((BattleTurn.USE_ITEM, BattleResult.USE_ATTACK_BOOST))
    screen = stage.render()
    assert "  Use Heal" in screen
    assert "  Use Damage Up" in screen


def test_hit_log_wraps_and_clears():
    stage, _ = make_stage()
    entry = (BattleTurn.PLAYER_ATTACK, BattleResult.ATTACK_FAIL)
    stage.battle_log.extend([entry] * 30)
    assert stage.render().count("MISS") == 30
    stage.battle_log.append(entry)
    assert stage.render().count("MISS") == 1


def test_tick_accumulates_before_first_step():
    stage, _ = make_stage()
    assert stage.tick(0.5, True) is None
    assert stage.battle_log == []


def test_winner_goes_to_village_and_gains_reward():
    player = Player()
    player.set_name("master")
    gold_before = player.gold
    stage, out = make_stage(player=player)
    assert run_until_leave(stage) is NextStage.VILLAGE
    assert stage.battle_manager.is_player_winner
    assert stage.drop_item_name.endswith("$")
    if ", " in stage.drop_item_name:
        assert player.gold > gold_before
    else:
        assert player.gold == gold_before
    screen = out.getvalue()
    assert "Press Spacebar" in screen
    assert " Get : " in screen


def test_loser_goes_to_church():
    player = Player()
    player.experience = 30
    player.health = 0
    player.heal_access = False
    stage, _ = make_stage(player=player)
    assert run_until_leave(stage) is NextStage.CHURCH
    assert player.experience == 20
    assert player.heal_access is True
    assert stage.drop_item_name == ""


def test_no_leave_without_space():
    player = Player()
    player.health = 0
    stage, _ = make_stage(player=player)
    for _ in range(10):
        assert stage.tick(1.0, False) is None
    assert stage.is_able_next_step


def test_finish_stage_resets_damage_and_calls_hook():
    calls = []
    player = Player()
    player.increase_damage(10)
    stage, _ = make_stage(player=player, on_finish=lambda: calls.append(1))
    stage.battle_manager.is_player_winner = False
    stage.finish_stage()
    assert player.damage == player.character_damage
    assert calls == [1]
    assert stage.is_process_once_done


def test_finish_stage_win_gives_experience():
    player = Player()
    stage, _ = make_stage(player=player, monster=Orc(1, random.Random(5)))
    stage.battle_manager.is_player_winner = True
    stage.finish_stage()
    assert player.experience == 50


@pytest.mark.parametrize("color", [True, False])
def test_color_codes_only_when_enabled(color):
    stage, _ = make_stage(color=color)
    stage.battle_log.append((BattleTurn.PLAYER_ATTACK, BattleResult.ATTACK_SUCCESS))
    screen = stage.render()
    assert bool(ANSI.sub("", screen[len(CLEAR_SCREEN):]) != screen[len(CLEAR_SCREEN):]) is color


def test_colored_render_strips_to_plain():
    plain, _ = make_stage(color=False)
    colored, _ = make_stage(color=True)
    assert ANSI.sub("", colored.render()[len(CLEAR_SCREEN):]) == plain.render()[len(CLEAR_SCREEN):]
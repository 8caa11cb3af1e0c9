import pytest

from dungeonquest.items import ItemType
from dungeonquest.player import Player


@pytest.fixture
def player():
    return Player()


def test_initial_stats(player):
    assert player.level == 1
    assert player.health == player.max_health == 200
    assert player.damage == 30
    assert player.max_experience == 100
    assert player.gold == 10
    assert player.heal_access is True


def test_item_names(player):
    assert player.item_names() == {
        ItemType.HEALTH_POTION: "Health Potion",
        ItemType.ATTACK_BOOST: "Attack Boost",
        ItemType.MONSTER_LEATHER: "Monster Leather",
    }
    assert player.item_name(ItemType.MONSTER_LEATHER) == "Monster Leather"


def test_item_count_unknown_slot(player):
    with pytest.raises(KeyError):
        player.item_count(ItemType.NONE)


def test_add_and_use_item(player):
    player.add_item(ItemType.ATTACK_BOOST)
    assert player.item_count(ItemType.ATTACK_BOOST) == 1
    player.use_item(ItemType.ATTACK_BOOST)
    assert player.item_count(ItemType.ATTACK_BOOST) == 0
    assert player.damage == 30 + 10
    player.reset_damage()
    assert player.damage == 30


def test_master_name(player):
    player.set_name("master")
    assert player.name == "master"
    assert player.level == 10
    assert player.damage == 999
    assert player.health == player.max_health == 999
    assert player.gold == 500
    for kind in player.item_names():
        assert player.item_count(kind) == 4


def test_plain_name_keeps_stats(player):
    player.set_name("hero")
    assert player.name == "hero"
    assert player.level == 1


def test_hit_floors_at_zero(player):
    player.hit(10_000)
    assert player.health == 0


def test_heal_caps(player):
    player.hit(50)
    player.heal(10_000)
    assert player.health == player.max_health


def test_level_up_through_experience(player):
    old_max_health = player.max_health
    player.hit(100)
    player.exp_up(50)
    assert player.level == 1
    player.exp_up(50)
    assert player.level == 2
    assert player.experience == 0
    assert player.max_experience > 100
    assert player.max_health == old_max_health + 20
    assert player.health == player.max_health
    player.reset_damage()
    assert player.damage - 30 == 5


def test_max_level_stops_progress(player):
    for _ in range(20):
        player.increase_level()
    assert player.level == player.max_level
    assert player.experience == 0
    assert player.max_experience == 0
    player.exp_up(50)
    assert player.experience == 0


def test_exp_down(player):
    player.exp_up(50)
    player.exp_down()
    assert player.experience == 34


def test_church_heal(player):
    player.hit(50)
    before_gold = player.gold
    player.church_heal()
    assert player.health == player.max_health
    assert player.gold == before_gold - before_gold // 3


def test_gold_flow(player):
    assert player.can_pay_gold(10)
    assert not player.can_pay_gold(11)
    player.receive_gold(5)
    player.pay_gold(15)
    assert player.gold == 0
import pytest

from dungeonquest.items import AttackBoost, HealthPotion, Item, MonsterLeather
from dungeonquest.player import Player


def test_prices_fixed_by_kind():
    assert HealthPotion("Health Potion").price == 10
    assert AttackBoost("Attack Boost").price == 15
    assert MonsterLeather("Monster Leather").price == 5


def test_item_is_abstract():
    with pytest.raises(TypeError):
        Item("thing")


def test_count_round_trip():
    potion = HealthPotion("Health Potion", 3)
    potion.increase_count()
    potion.reduce_count()
    assert potion.count == 3


def test_health_potion_heals_and_consumes():
    player = Player()
    player.hit(100)
    before = player.health
    potion = HealthPotion("Health Potion", 2)
    potion.use(player)
    assert potion.count == 1
    assert player.health - before == HealthPotion.amount


def test_health_potion_does_not_overheal():
    player = Player()
    potion = HealthPotion("Health Potion", 1)
    potion.use(player)
    assert player.health == player.max_health


def test_attack_boost_raises_damage():
    player = Player()
    before = player.damage
    boost = AttackBoost("Attack Boost", 1)
    boost.use(player)
    assert boost.count == 0
    assert player.damage == before + AttackBoost.amount


def test_leather_has_no_effect():
    player = Player()
    leather = MonsterLeather("Monster Leather", 2)
    leather.use(player)
    assert leather.count == 2
    assert player.health == player.max_health
    assert player.damage == 30
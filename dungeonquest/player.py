"""The player character: stats, experience, gold and inventory."""

from __future__ import annotations

from dungeonquest.items import AttackBoost, HealthPotion, Item, ItemType, MonsterLeather

MASTER_NAME = "master"


class Player:
    """The hero controlled by the user."""

    max_name_length = 10
    max_level = 10

    def __init__(self) -> None:
        self.name = ""
        self.level = 1
        self.max_health = 200
        self.health = self.max_health
        self.character_damage = 30
        self.damage = self.character_damage
        self.experience = 0
        self.max_experience = 100
        self.gold = 10
        self.heal_access = True
        self.inventory: dict[ItemType, Item] = {
            ItemType.HEALTH_POTION: HealthPotion("Health Potion", 0),
            ItemType.ATTACK_BOOST: AttackBoost("Attack Boost", 0),
            ItemType.MONSTER_LEATHER: MonsterLeather("Monster Leather", 0),
        }

    def set_name(self, name: str) -> None:
        """Set the name; the demo name ``master`` unlocks a strong character."""
        self.name = name
        if name == MASTER_NAME:
            self.register_master()

    def item_count(self, item_type: ItemType) -> int:
        """Number of items of ``item_type`` held; KeyError if not stocked."""
        try:
            return self.inventory[item_type].count
        except KeyError:
            raise KeyError(f"no inventory slot for {item_type}") from None

    def item_names(self) -> dict[ItemType, str]:
        """Mapping of every inventory slot to its item's name."""
        return {kind: item.name for kind, item in self.inventory.items()}

    def register_master(self) -> None:
        """Turn the character into the demonstration account."""
        self.level = 10
        self.max_experience = 0
        self.damage = 999
        self.max_health = 999
        self.health = self.max_health
        self.gold = 500
        for kind in (ItemType.HEALTH_POTION, ItemType.ATTACK_BOOST, ItemType.MONSTER_LEATHER):
            for _ in range(4):
                self.add_item(kind)

    def increase_level(self) -> None:
        """Gain a level, unless already at the maximum."""
        if self.level == self.max_level:
            return
        self.level += 1
        if self.level == self.max_level:
            self.experience = 0
            self.max_experience = 0
        else:
            self.experience %= self.max_experience
            self.max_experience = int(self.max_experience * 1.1)
        self.max_health += 20
        self.health = self.max_health
        self.character_damage += 5

    def hit(self, damage: int) -> None:
        """Take damage; health never drops below zero."""
        self.health = max(self.health - damage, 0)

    def heal(self, amount: int) -> None:
        """Restore health up to the maximum."""
        self.health = min(self.health + amount, self.max_health)

    def increase_damage(self, amount: int) -> None:
        self.damage += amount

    def use_item(self, item_type: ItemType) -> None:
        """Use one item of the given kind on this player."""
        self.inventory[item_type].use(self)

    def exp_up(self, amount: int) -> None:
        """Gain experience, levelling up when the threshold is reached."""
        if self.level == self.max_level:
            return
        self.experience += amount
        if self.experience >= self.max_experience:
            self.increase_level()

    def exp_down(self) -> None:
        """Lose a third of the current experience."""
        self.experience -= self.experience // 3

    def add_item(self, item_type: ItemType) -> None:
        self.inventory[item_type].increase_count()

    def can_pay_gold(self, price: int) -> bool:
        return self.gold - price >= 0

    def pay_gold(self, price: int) -> None:
        self.gold -= price

    def receive_gold(self, price: int) -> None:
        self.gold += price

    def reset_damage(self) -> None:
        """Drop temporary boosts, back to the character's base damage."""
        self.damage = self.character_damage

    def church_heal(self) -> None:
        """Offer a third of the gold to regain a third of maximum health."""
        self.health = min(self.health + self.max_health // 3, self.max_health)
        self.gold -= self.gold // 3

    def item_name(self, item_type: ItemType) -> str:
        return self.inventory[item_type].name
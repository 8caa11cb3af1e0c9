# dungeonquest

Game logic for a small text role-playing game: items, a player character,
monsters, turn-based battles, a dungeon battle screen and an ending screen.

## What is in it

- **`dungeonquest.items`**: the `ItemType` enum (`NONE`, `HEALTH_POTION`,
  `ATTACK_BOOST`, `MONSTER_LEATHER`) and the abstract `Item` dataclass. An
  item has a `name`, a `count` and a class-level `price`. It also has
  `reduce_count()`, `increase_count()` and `use(player)`. There are three
  concrete items:
  - `HealthPotion` costs 10. Using it removes one from the stack and heals
    the player by 50.
  - `AttackBoost` costs 15. Using it removes one from the stack and adds 10
    to the player's damage.
  - `MonsterLeather` costs 5. Using it does nothing.
- **`dungeonquest.player`**: `Player` holds the name, level, experience,
  health, damage, gold and an inventory with one slot per item kind.
  - It starts at level 1 with 200 health, 30 damage, 10 gold and 100
    experience needed for the next level.
  - `exp_up` levels the player up when the threshold is reached. Level 10 is
    the cap. Each level adds 20 maximum health and 5 base damage, refills
    health, and raises the next threshold by 10%. `exp_down` takes away a
    third of the current experience.
  - `hit` and `heal` keep health between 0 and the maximum.
  - `increase_damage` adds temporary damage. `reset_damage` puts damage back
    to the base value.
  - `church_heal` restores a third of maximum health and costs a third of the
    gold.
  - Calling `set_name("master")` turns the character into a strong demo
    account: level 10, 999 health and damage, 500 gold and four of each item.
  - `item_count`, `item_names`, `item_name`, `add_item`, `use_item`,
    `can_pay_gold`, `pay_gold` and `receive_gold` cover the inventory and
    gold.
- **`dungeonquest.keys`**: `KeyManager.tick(pressed)` takes the set of
  `KeyType` keys held down this frame. After that, `state(key)` returns
  `KeyState.TAP`, `PRESSED`, `RELEASE` or `NONE`.
- **`dungeonquest.monsters`**: `Goblin`, `Orc` and `BossMonster` (the
  dragon). A monster of level *n* gets random health in *n*·20 to *n*·30 and
  random damage in *n*·5 to *n*·10. The dragon's stats are multiplied by 1.5.
  - `hit` lowers health, never below zero. `drop_item` rolls for loot.
  - `roll_drop(roll)` maps a roll from 0 to 100 to an item. Rolls of 0–10
    give a health potion, 11–20 an attack boost and 21–30 monster leather.
    Anything higher gives `ItemType.NONE`.
  - `GoblinFactory`, `OrcFactory` and `BossMonsterFactory` each provide
    `create_monster(level)`. Factories and monsters accept an optional
    `random.Random`, so results can be reproduced.
- **`dungeonquest.battle`**: `BattleManager.battle(player, monster, log)`
  plays one step and appends a `(BattleTurn, BattleResult)` pair to `log`.
  - On the player's turn the player may drink a potion or use a boost.
    Otherwise the player attacks. The monster answers on the next step. Each
    attack hits on a roll above 50.
  - Once either side is at 0 health, the next call sets `is_end_battle` and
    `is_player_winner` instead of playing a step.
  - `reset()` prepares the manager for a new battle.
- **`dungeonquest.dungeon`**: `NormalDungeonStage` runs one battle as a text
  screen.
  - Creating the stage draws the screen to `out`, which defaults to standard
    output.
  - Call `tick(delta, space_tapped)` from the game loop. It plays one battle
    step per second of accumulated `delta`.
  - When the fight is over, `finish_stage` hands out the results. A win gives
    50 experience, a loot roll and 10–20 gold. The gold is added to the
    player only when an item drops; the screen shows the amount either way. A
    loss takes away experience.
  - After that, a tick with `space_tapped` set returns `NextStage.VILLAGE`
    after a win, or `NextStage.CHURCH` after a loss.
  - `render()` returns the screen as a string. `color=False` leaves out the
    ANSI colour codes. `pad(text, width)` right-pads text with spaces.
- **`dungeonquest.ending`**: `render_ending(player_name)` returns the closing
  screen as a string.

## Installing

```
pip install .
```

## Example

```python
from dungeonquest.player import Player
from dungeonquest.items import ItemType
from dungeonquest.monsters import GoblinFactory
from dungeonquest.battle import BattleManager

player = Player()
player.set_name("hero")
player.add_item(ItemType.HEALTH_POTION)

monster = GoblinFactory().create_monster(player.level)
manager = BattleManager()
log = []
while not manager.is_end_battle:
    manager.battle(player, monster, log)

print("won" if manager.is_player_winner else "lost", len(log), "turns")
```

## What it does not do

This is a library of game pieces, not a playable game. It has:

- no command to start the game and no main loop;
- nothing that reads the keyboard (`KeyManager` only interprets the key sets
  you pass it);
- no title, village, church, shop, status or dungeon-entrance screens, and no
  boss-dungeon stage;
- no shop stock, buying or selling.

`NextStage` only names where to go next. Switching screens is up to the
caller.

## Running the tests

```
pip install .[test]
pytest
```
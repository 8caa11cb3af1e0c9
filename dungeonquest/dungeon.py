"""Dungeon screens: an automatic battle against one monster, shown as a text screen."""

from __future__ import annotations

import enum
import random
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TextIO

from dungeonquest.battle import BattleLog, BattleManager, BattleResult, BattleTurn
from dungeonquest.items import ItemType
from dungeonquest.monsters import Monster
from dungeonquest.player import Player

CLEAR_SCREEN = "\033[2J\033[H"
BORDER = "□" * 100

TEXT_BOX_WIDTH = 28
MONSTER_BOX_WIDTH = 69
LEFT_ART_WIDTH = 67
HIT_LOG_ROWS = 31
SCREEN_ROWS = 47
INNER_WIDTH = LEFT_ART_WIDTH + 2 * TEXT_BOX_WIDTH + 4 + MONSTER_BOX_WIDTH

WIN_EXP = 50
GOLD_REWARD_RANGE = (10, 20)

DEFAULT_COLOR = 7
RED = 4
GREEN = 2
YELLOW = 6

_ANSI = {
    DEFAULT_COLOR: "\033[0m",
    RED: "\033[31m",
    GREEN: "\033[32m",
    YELLOW: "\033[33m",
}

_HERO_ART = (
    "                                  @@.",
    "                               @@@@@@@@",
    "                            *@@@!     @@@@",
    "                            @@          @@",
    "                            @@ ...,-....@@",
    "                            @@ @#@##@#@#@@",
    "                            @@ @ *  # @ @@",
    "                         .  @@,# *  # #,@@",
    "                       ,,@,,$#@-,=  #,;@@$,,,,,",
    "                    ,,,@$$#@,~@$$@,,@$$@@,@@$#@,,,",
    "                   ,@@$$  ;$@@@  $$$$  @@@$$ ,$$@@,",
    "                  -@==      =@@--    --@@=      !=@-",
    "                  @@     --- =@@@----@=@@ ---     @@",
    "                 :@@-----@@@-~@===$@== @@-@@@-----$@-",
    "                 @@@@@@@@@@@===   ,=   ===@@@@@@@@@@=",
    "                 @*******@@@-            -@@@******@~ ,~",
    "                :@~~~~~~~@@@@~~        ~~#@@@~~~~~~@@~=@~~~",
    "                *@@$@@@@@@@**#@~~    ~~@@***@@**@@@@******@:~~~",
    "                 @@~;!!$@@@  ;!!@::::@@!!  :@@::@!!!      !!!!@:::",
    "                 @@::.:=@!@:    !*@@@!!   ~@@@#!!    :::::    !!@@",
    "              :::@!!@!@@!:@@::::::@@@:::::@@!@$      @@!@@      @@",
    "              @@@@:;@@@@:#@@!!!!!@@!@$!!!!@@ @$     .@@ @@      @@",
    "              @@;;;;;@@=;#@@;;;;;@@;@=;;;;@@;@$  ;;;!@@ @@;;;;  @@",
    "              @@     @@=;@;;;;;;;;;;;;;;;;;;@@# ;@;;;;; ;;;;;@; @@",
    "          ;;; @@    !@@@@@;;:            ~;;@@# @@;;;;; ;;;;;@@ @@",
    "         ;@;:;@@;  ;@;;@@@@@#!;;;;;;;;;;;#@@@@@ ;;;;;@@ @@;;;;; @@",
    "         :*!!@::@!!@:  @@::::@@:::@@:::@@::::@@      @@ @@      @@",
    "          ,::@! :::@!! @@    @@   @@   @@    @@      @@ @@     !@@",
    "            !@@!!!!@::!@@    @@   @@   @@    @@!!    !@!@:    !@@:",
    "           !@:@@@@@:!!@@@:   @@   @@   @@    ~@@@!!  .:::   !!@:~",
    "          *@~*@~@@~ ~~@@:-   @@   @@   @@     @@~@@*      **@!~",
    "         *@@*@~*@~    @@   . @@   @@   @@     @@,;;@**  ,*@@~.",
    "        *@~@@~*@~ -***@@***=*@@ **@@***@@  ***@@===@@@**=@~~",
    "       =@-=@-=@$  .@@-------@@@ --@@;;:@@ =@-------@@-!@--",
    "      =@-;@-=@#,   -@=      @@@   @@   @@=@@      =@- .-",
    "     =@@=#-=@!,     @@=    =@@@===--===@@@=@=    =@-",
    "    =@-#@-=@*.      @@@====@-@@@-@==@---@@#-@====@@",
    "   $@,!@,=@=.       @@,,,,@@$@,, ,@@~   ,~@$@@,,,,@$",
    "  $@,!@,$@$.       *@@    ,@@,    =,      :@@,    @@",
    " :@:!@!=@@.        @@,    *@=     .        @@     ,@$",
    "  @#@,@@@,        ;@@     @@.              ,@$     @@",
    "  @@@#@$.         @@.    #@:                @@     *@#",
    "  @@....         :@@     @@                 .@#     @@",
    "  ..            #@@@##  #@.                  @@*  ##@@#;",
    "              @@@   @@@@@@                    @@@@@   @@@",
    "            #@@*       @@                     @@@       @@@",
    "           @@@@@@@@@@@@@@                     @@@@@@@@@@@@@@",
)

_WIN_ART = (
    " ",
    " ",
    "    #  $$$         / $$$",
    "    'Y  $$$      |  $$$",
    "     |  $$$ - d$b|  $$$",
    "     |  $$$  $$$$$  $$$",
    "     |  $$$V$$# $$bd$$$",
    "     Y.  Y$$$# Y  $$$$P",
    "      'Y  $$P   Y  $$P",
    "        Y__/     Y__/",
    " ",
    "      / $$$$$$$$$$$$$",
    "      |____   $$$___'",
    "           |  $$$",
    "           |  $$$",
    "           |  $$$",
    "           |  $$$",
    "           |  $$$",
    "       # $$$$$$$$$$$$$",
    "      |______________/",
    " ",
    "     # $$$,        / $$$",
    "     L  $$$$      | $$$",
    "     'Y  $$$$,    | $$$",
    "      |  $$$$$$$  | $$$",
    "     .| $$$Y. $$$$  $$$",
    "    ,#  $$$  Y.  $$$$$$",
    "    #  $$$     Y.  $$$$",
    "    8___/       'Y___/",
    " ",
    " ",
)

_LOSE_ART = (
    " ",
    "       # $$b",
    "      |  $$$",
    "      |  $$$",
    "      |  $$$",
    "      |  O$$$$$$$$$$$D",
    "      'Y_____________#",
    " ",
    "         .d$$$$$$$$b",
    "       #d$Y______ '$$b",
    "      | O$$     'Y $$$",
    "      | S$B.   ,J J$$B",
    "      |  'Y$$$$$$$$MP'",
    "       'b__________*",
    " ",
    "         d$$$$$$$$$$b",
    "      # $$K       ,'",
    "      ( 'Y$$$$$$$$$b",
    "      'Y________, 'Y$b",
    "                )  ,9$",
    "      # 0$$$$$$$$$$$P",
    "      l____________#",
    " ",
    "      # $$$$$$$$$$$$$$",
    "      | $$$________,'",
    "      | $$$$$$$$$$$$$$",
    "      | $$$________,'",
    "      | $$$",
    "      | $$$$$$$$$$$$$$",
    "      Y_____________,'",
    "",
)


def pad(text: str, width: int) -> str:
    """Right-pad ``text`` with spaces to ``width``; longer text is left as is."""
    return text.ljust(width)


class NextStage(enum.Enum):
    """Where the game goes once the dungeon is left."""

    VILLAGE = enum.auto()
    CHURCH = enum.auto()


class DungeonStage(ABC):
    """A dungeon in which the player fights one monster until either falls."""

    def __init__(
        self,
        player: Player,
        monster: Monster,
        battle_manager: BattleManager | None = None,
        *,
        out: TextIO | None = None,
        color: bool = True,
    ) -> None:
        self.player = player
        self.monster = monster
        self.battle_manager = battle_manager if battle_manager is not None else BattleManager()
        self.out = out if out is not None else sys.stdout
        self.color = color
        self.battle_log: BattleLog = []
        self.drop_item_name = ""
        self.tick_timer = 1.0
        self.cur_timer = 0.0
        self.is_process_once_done = False
        self.is_able_next_step = False
        self.battle_manager.reset()
        self._show()

    @abstractmethod
    def tick(self, delta: float, space_tapped: bool) -> NextStage | None:
        """Advance the stage by ``delta`` seconds."""

    @abstractmethod
    def finish_stage(self) -> None:
        """Hand out rewards or penalties once the battle is over."""

    def _show(self) -> None:
        self.out.write(self.render())
        self.out.flush()

    def _paint(self, code: int, text: str) -> str:
        if not self.color:
            return text
        return f"{_ANSI[code]}{text}{_ANSI[DEFAULT_COLOR]}"

    def _logs(self) -> tuple[list[str], list[str], dict[str, int]]:
        blank = pad("", TEXT_BOX_WIDTH)
        player_log = [blank] * HIT_LOG_ROWS
        monster_log = [blank] * HIT_LOG_ROWS
        colors = {"player_hp": DEFAULT_COLOR, "monster_hp": DEFAULT_COLOR,
                  "drop": DEFAULT_COLOR, "damage": DEFAULT_COLOR, "exp": DEFAULT_COLOR}

        if not self.battle_manager.is_end_battle:
            p_index = m_index = 0
            for turn, result in self.battle_log:
                colors.update(player_hp=DEFAULT_COLOR, monster_hp=DEFAULT_COLOR,
                              drop=DEFAULT_COLOR, damage=DEFAULT_COLOR)
                if turn is BattleTurn.PLAYER_ATTACK:
                    if result is BattleResult.ATTACK_SUCCESS:
                        entry = f"  HIT : {self.player.damage}"
                        colors["monster_hp"] = RED
                    else:
                        entry = "  MISS"
                    player_log[p_index] = pad(entry, TEXT_BOX_WIDTH)
                    p_index = (p_index + 1) % HIT_LOG_ROWS
                    if p_index == 0:
                        player_log[:-1] = [blank] * (HIT_LOG_ROWS - 1)
                elif turn is BattleTurn.MONSTER_ATTACK:
                    if result is BattleResult.ATTACK_SUCCESS:
                        entry = f"  HIT : {self.monster.damage}"
                        colors["player_hp"] = RED
                    else:
                        entry = "  MISS"
                    monster_log[m_index] = pad(entry, TEXT_BOX_WIDTH)
                    m_index = (m_index + 1) % HIT_LOG_ROWS
                    if m_index == 0:
                        monster_log[:-1] = [blank] * (HIT_LOG_ROWS - 1)
                else:
                    if result is BattleResult.USE_HEALTH_POTION:
                        entry = "  Use Heal"
                        colors["player_hp"] = GREEN
                    else:
                        entry = "  Use Damage Up"
                        colors["damage"] = GREEN
                    player_log[p_index] = pad(entry, TEXT_BOX_WIDTH)
                    p_index = (p_index + 1) % HIT_LOG_ROWS
        else:
            self.player.heal_access = True
            if self.battle_manager.is_player_winner:
                player_log = list(_WIN_ART)
                monster_log[0] = f" Get : {self.drop_item_name}"
                colors["drop"] = YELLOW
                colors["exp"] = YELLOW
            else:
                player_log = list(_LOSE_ART)
                colors["exp"] = RED
            monster_log[1] = " Press Spacebar"
            monster_log[2] = "             to continue"
            player_log = [pad(line, TEXT_BOX_WIDTH) for line in player_log]
            monster_log[:3] = [pad(line, TEXT_BOX_WIDTH) for line in monster_log[:3]]
        return player_log, monster_log, colors

    def render(self) -> str:
        """Return the whole battle screen as text."""
        player, monster = self.player, self.monster
        player_log, monster_log, colors = self._logs()

        images = [pad(line, MONSTER_BOX_WIDTH) for line in monster.text_img[:SCREEN_ROWS]]
        images += [pad("", MONSTER_BOX_WIDTH)] * (SCREEN_ROWS - len(images))

        player_name = pad(f"  {player.name}", TEXT_BOX_WIDTH)
        monster_name = pad(f"  {monster.name}", TEXT_BOX_WIDTH)
        level = f"  Level : {player.level} ("
        current_exp = str(player.experience)
        max_exp = pad(f" / {player.max_experience})",
                      TEXT_BOX_WIDTH - len(current_exp) - len(level) - 1)
        player_hp = pad(str(player.health), 11)
        monster_hp = pad(str(monster.health), 11)
        player_dmg = pad(str(player.damage), 17)
        monster_dmg = pad(f"  Damage : {monster.damage}", TEXT_BOX_WIDTH)

        empty = " " * TEXT_BOX_WIDTH
        solid = "@" * (2 * TEXT_BOX_WIDTH + 4)

        def box(left: str, right: str) -> str:
            return f"@{left}@@{right}@"

        frames: dict[int, str] = {
            0: solid,
            2: box(player_name, monster_name),
            5: (f"@{level}" + self._paint(colors["exp"], f" {current_exp}")
                + f"{max_exp}@@{empty}@"),
            8: ("@  Health Point : " + self._paint(colors["player_hp"], player_hp)
                + "@@  Health Point : " + self._paint(colors["monster_hp"], monster_hp) + "@"),
            11: ("@  Damage : " + self._paint(colors["damage"], player_dmg)
                 + f"@@{monster_dmg}@"),
            13: box("-" * TEXT_BOX_WIDTH, "-" * TEXT_BOX_WIDTH),
            14: box("=" * TEXT_BOX_WIDTH, "=" * TEXT_BOX_WIDTH),
            15: f"@{player_log[0]}@@" + self._paint(colors["drop"], monster_log[0]) + "@",
            SCREEN_ROWS - 1: solid,
        }
        for offset in range(1, HIT_LOG_ROWS):
            frames[15 + offset] = box(player_log[offset], monster_log[offset])

        rows = [" " * INNER_WIDTH]
        for index, (art, image) in enumerate(zip(_HERO_ART, images)):
            frame = frames.get(index, box(empty, empty))
            rows.append(pad(art, LEFT_ART_WIDTH) + frame + image)

        body = "\n".join(f"□{row}□" for row in rows)
        return f"{CLEAR_SCREEN}{BORDER}\n{body}\n{BORDER}"


class NormalDungeonStage(DungeonStage):
    """An ordinary dungeon: win for experience, gold and loot, lose some experience."""

    def __init__(
        self,
        player: Player,
        monster: Monster,
        battle_manager: BattleManager | None = None,
        *,
        rng: random.Random | None = None,
        on_finish: Callable[[], None] | None = None,
        out: TextIO | None = None,
        color: bool = True,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._on_finish = on_finish
        super().__init__(player, monster, battle_manager, out=out, color=color)

    def tick(self, delta: float, space_tapped: bool) -> NextStage | None:
        """Play a battle step once per second; after the fight, space leaves."""
        manager = self.battle_manager
        if self.tick_timer <= self.cur_timer:
            self.cur_timer = 0.0
            if not manager.is_end_battle:
                manager.battle(self.player, self.monster, self.battle_log)
            elif not self.is_process_once_done:
                self.finish_stage()
                self._show()
            if not self.is_process_once_done and not manager.is_end_battle:
                self._show()
        else:
            self.cur_timer += delta

        if self.is_able_next_step and space_tapped:
            return NextStage.VILLAGE if manager.is_player_winner else NextStage.CHURCH
        return None

    def finish_stage(self) -> None:
        gold = self._rng.randint(*GOLD_REWARD_RANGE)
        player = self.player
        if self.battle_manager.is_player_winner:
            player.exp_up(WIN_EXP)
            dropped = self.monster.drop_item()
            if dropped is not ItemType.NONE:
                player.add_item(dropped)
                player.receive_gold(gold)
                self.drop_item_name = f"{player.item_name(dropped)}, "
            self.drop_item_name += f"{gold}$"
        else:
            player.exp_down()
        player.reset_damage()
        self.is_able_next_step = True
        self.is_process_once_done = True
        if self._on_finish is not None:
            self._on_finish()
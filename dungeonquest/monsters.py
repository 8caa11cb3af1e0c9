"""Monsters the player fights, their loot rolls and the factories that spawn them."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import ClassVar

from dungeonquest.items import ItemType

DROP_ROLL_MAX = 100


def roll_drop(roll: int) -> ItemType:
    """Map a loot roll in 0..100 to the item dropped, or ``ItemType.NONE``.

    Rolls up to 30 drop something, split evenly between the three item kinds.
    """
    if roll <= 10:
        return ItemType.HEALTH_POTION
    if roll <= 20:
        return ItemType.ATTACK_BOOST
    if roll <= 30:
        return ItemType.MONSTER_LEATHER
    return ItemType.NONE


class Monster:
    """A monster whose stats scale with the level it was spawned for."""

    name: ClassVar[str] = ""
    text_img: ClassVar[tuple[str, ...]] = ()
    stat_scale: ClassVar[float] = 1.0

    def __init__(self, level: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.level = level
        self.health = int(self._rng.randint(level * 20, level * 30) * self.stat_scale)
        self.damage = int(self._rng.randint(level * 5, level * 10) * self.stat_scale)

    def hit(self, damage: int) -> None:
        """Take damage; health never drops below zero."""
        self.health = max(self.health - damage, 0)

    def drop_item(self) -> ItemType:
        """Roll for loot after the monster is defeated."""
        return roll_drop(self._rng.randint(0, DROP_ROLL_MAX))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(level={self.level}, "
            f"health={self.health}, damage={self.damage})"
        )


class Goblin(Monster):
    """A weak, common monster."""

    name = "Goblin"
    text_img = (
        "                     @@@@@@@@@@#",
        "                  @@@@@@@@@@@@@@@@@",
        "                @@@@@@@@@@@@@@@@@@@@@",
        "              .@@@@@@@@@@@@@@@@@@@@@@@",
        "              @@@@#####@@@@@@@@@@@@@@@@",
        "             ~##@# ....@@@@@#####@@@@@@",
        "        ....  ..#- ###@@@@##.....###@@@...$@@...",
        "       ,*@@@, @@,* ,,,#@@$ ,@@@$$,,,@@@$$$@@$@@@~,",
        "      ,@@@!$@ $$@,,@$$@@@  $$$$,,@@@@$$,,,@$$$$$$$ .",
        "     ,@$$$$@$ ,,@@@#,,#@@,,,,,,@@@@@@,,@$$$        :",
        "     $!    $ ,@@@@@@@@@$$@@@@@@@@@@@@@@$",
        "            -@@@@@@@@@@  @@@@@@=@@@@@@@",
        "           -@==========,:@@@@==-@@@@@@@",
        "           ==   .------$@@===--@@@@@@@@--",
        "                ~========$: -@@@@==@@@@@@- -----  --",
        "                 ~~~~~~~ !@ @@@@@ ~@@@@@@* @@@@* ~@#~~.",
        "                 *@@@@@@~#*~@@@@*~@@@@@@@ ~@@@* ~@@@@@*~~",
        "                  *@@@@@@@~@***$ @@@@@@@*~@@@@~ =@@@@@@@@~.",
        "                   !@@@!!!*@  :@:!@@@@@! @@@@@@:.!@@@@@@@@!:",
        "                    !!!  :;@  @@@:!@@@! ;@@@@@@! :@@@@@@@@@@:",
        "                         @@@: @@@@:!*! :@@@@@@* :@@=!!@@@@@@@:",
        "                        :@@@@ !@@@@: ::@@@@@@@; !@@*: !$@@@@@@;",
        "                      :;@@@@;  @@@@@;@@@@@@@@@@;;;;@@  ~;@@@@@@;",
        "             :;;;;;;;;@@@@@;   @@@@@@@@@@@@@@@@@@; @;    !@@@@@@",
        "         ;;;;#@@@@@@@@@@@;;    @@@@@@@@@@@@@@@@@@@ @;    .@@@@@@",
        "        ;@@@@@;;@@@@@;;;;      =@@@@@@@@@@@@@@@@@@;@@     @@@@@@;",
        "       !@@@@@@!!@::::          $@@@@@@@@@@@@@@@@@@@@@    !@@@@@@@",
        "      !@@@@@@@@@@!!            @@@@@@@@@@@@@@@@@@@@@@   !@@@@@@@@",
        "     !@@::@@@=:;@@@           :@@@@@@@@@@@@@@@@@@@@::,!!@@@@@@@@@",
        "    !@@:!*@::,  ::@          :#@@@@@@@@@@@@@@@@@@::!!=@@@@@@@@@@@",
        "    @@~ @@@       ~         *#@@@@@@@@@@@@@@@@@@~ *@@@@@@@@@@@@@@~",
        "    @@: @@@               ;*@@@@@@@@@@@@@@@@@@@@ *@@~~~:@@@@@@@@@#",
        "    ~@# ~@@             ,*@@@@@@@@@@@@@@@@@@@@@~ @@~ ** @@$~@@~~@@",
        "     --  :@           *=$@@@@@@@@@@@@@@@@@@@@@@= -- =@@ @@# @@  @@",
        "          -         ==@=----@@@@@@@@@@@@@@@@@@@@====@@@ @@= @@  @@",
        "                    @@@#=== @@@@@@@@@@@@@@@@@@@@@@@@@@-=@@, @@ ,@-",
        "                  ==@@@@@@= @@@@---@@@@---@@@@@@-~@@@, @@- =@-  -",
        "                 .@@@@@@@,. ;-,,   ,@,,   ,,@@,,$*,,@$~,,$$@,",
        "                 .@@@@@@,           ,       ,,  @@$$,,.$-,,,",
        "                  @@@@@,                        ,@@@$$$@#",
        "                 .@@@@@                          @@@@@@@,",
        "                 #@@@@@                          @@@@@@@",
        "                #@@@@@@                          @@@@@@@",
        "      ########, ..@@@@@#                        #@@@@...",
        "   #@@@@@@@@@@@@@@#@@@@@@@                    $@@@@  @@@@@@@@@;",
        "  @@@@@@@@@@@@@@@@@@@@@@@@                    @@@@@@@@@@@@@@@@@@@",
        "  @@@@@@@@@@@@@@@@@@@@@@@@                    @@@@@@@@@@@@@@@@@@@",
    )


class Orc(Monster):
    """A sturdy, common monster."""

    name = "Orc"
    text_img = (
        "",
        "                 @$                  @",
        "                 @@                 @@",
        "                 @@@      @@@      @@@",
        "                 =@@@@@@@@@@@@@@@@@@@#",
        "                  ##@@@@@@@@@@@@@@@##",
        "                    #@@@@@@@@@@@@@#                 .",
        "                     $@@@@#$#@@@@@               ,,;@",
        "                     ,@@@@-,-$@@@*               @@@@,.",
        "                     @@@@@@@@@@@@@               $@@@@!,,,.",
        "                     @@@@$@@@#@@@@               ,@@@@@@@@=",
        "                     @@@@ @@@~#@@@               =@@@@@@@@@",
        "                   .-=@@@-@@@-!@@=-,            --@@@@@@@@=",
        "                ---!@-@=@@@@@@@=@-@$--       --:@@@@@@@@@@",
        "              ,-@@@@@@@-@@@@@@@-@@@@@@--  -- ==@@@@==@@@@@@-",
        "             ~=@@@@@@@@@@@@@@@@@@@@@@@@*~~=@~~~@***  **@@@@@",
        "            ~@@@@@@@@@@@@@@@@@@@@@@@*@#~@@.@@@@@       *@@@@~",
        "            @@@@@@@@@@@@@@@@@@@@@*@@~@@@@@,@@@@@        @@@@@~",
        "           :@@@@@*@@@@@@@@@@@@$*@:@@@@@@!@*@@@@@        @@@@@@:",
        "           @@@@@@ @@@@@@@@@@!@=:@@@@@@!@:@@@@@@@        @@@@@@@",
        "           @@@@@@ !@@@@@@!@@:@@@@@@!!! @@@@@@@@@        @@@@@@@;",
        "           @@@@@@  @@@@!@:@@@@@@!=@:   @@@@@@@@!       :@@@@@@@@:",
        "           @@@@@@  @;@@;@@@@@@;@;=@@   ;;@@@@@;       ;@@@@@@@@@@;",
        "           @@@@@@  @;@@@@@@;@@;@@@@@     ;;;;;        ;@@@@@@@*;;;",
        "           @@@@@@.;@@@@@;@@;@@@@@@@;                   ;;;;;;;,",
        "           :@@@@@*@@@$;@;@@@@@@@@@@",
        "           !@@@@@@::@$!@@@@@@@@@@@@",
        "        :!!@:@@@@@ !@@@@@@@@@@@@@@@!",
        "      !!#@@@!:@@@; @@@@@@@@@@@@@@@@@",
        "   !!!@@@@*:: ::: !@@@@@@@@:@@@@@@@@*",
        " !*@@@@@~~,       @@@@@@@@@ #@@@@@@@@",
        " ~@@@~~~         *@@@@@@@@~ -@@@@@@@@*",
        "  ~~~            @@@@@@@@@   ;@@@@@@@@",
        "                .@@@@@@@@-    @@@@@@@@=",
        "                ;@@*--@@@     @@@--;@@@",
        "               =#@@#==@@-     -@@==$@@@=",
        "              -@----@@@@=     =@@@@----@=",
        "              #@$$$$@@@@@     @@@@@$$$$@@",
        "              @@@@@@@@@@@     !@@@@@@@@@@",
        "              @,,,,@@@@@,     .@@@@@,,,,@,",
        "             ,@$$$$@@@@@       @@@@@$$$$@#",
        "             #@@@@@@@@@@       @@@@@@@@@@@",
        "             @@@@@@@@@@@       @@@@@@@@@@@",
        "             @@@@@@@@@@@       .@@@@@@@@@@",
        "             @@@@@@@@@@         @@@@@@@@@@",
        "              @@@@@@@@           @@@@@@@@",
        "                @@@@@             #@@@@.",
    )


class BossMonster(Monster):
    """The dragon guarding the boss dungeon, half again as strong as others."""

    name = "Dragon"
    stat_scale = 1.5
    text_img = (
        "                                   @@@@@",
        "                                      @@@@@.",
        "                              #         @@@@@@",
        "                    .@       @    .@@  @# @@@@@@@",
        "                ..@#$     ..#        #@@@@..#@@@@@@..",
        "               .@@#   ...$@#          #@@@@@.@@@@@@@@..",
        "            ! .@@@ ...@@@##....        #@@@@@@@@@@@@@@@..",
        "           ,@.@@$@,@@@#$!,,=$$$         @@@@@@@@@@@@@@@@@,",
        "           @@@@$,@@@$$,,:@@@,.          @@@@@@@@@@@@@@@@@@,",
        "           $@@@$@@@$  $$@@@@@!,,,,,     @@@@@@@@@=$@@@@@@@@,,",
        "           -@@$,@@@,,  .@@@@@@@$$$$     @@@@@@@@@@,$@@@@@@@@@,",
        "           @@@-@@#@@@---==#@@@@-,       @@@@@@@@@@@-=@@@@@@@@@-",
        "        :--@@@==@*@=====  ~=@@@@@--    -@@@@@@@@@@@@ =@@@@@@@@@-",
        "        @@@@@= -@@=   ~- -  =@@@#==    @@@@@@@@@@@@@- @@@@@@@@@@",
        "        @@==@ -@@=    =@-@   @@@!     -@@@@@@@@@@@@@@ =@@@@@@@@@-",
        "        *=  * @@#      @#*   @@@,     @@@@@@@@@$@@@@@: #@@@@@@@@@~",
        "              *@:     ~@~~   @@@     ~@@@@@@@@@,@@@@@@ ~@@@@@@@@@@.",
        "               *     ~@@~=  ~@@@    ~@@@@@@@@@@ @@@@@@  @@@@@@@@@@!",
        "                   .:@@@!, :@@@!  ::@@@@@@@@@@@ @@@@@@: *@@@@@@@@@@",
        "                  :;@!!!  :@@@!  :@@@@@@@@@@@@! @@@@@@@  @@@@@@@@@@:",
        "                 :@!! :  :@@@@ ::@@@@@@@@@@@@@ :@@@@@@@  @@@@@@@@@@@",
        "               ::@! ::! :@@@@@:@@@@@@@@!!!!!!! !@@@@@@@  !!@@@@@@@@@",
        "              :@@@;;;; .@@@@@@@@@@@!;;;         ;;@@@@;    ;;;@@@@@@",
        "              @@@@;;   !@@@@@@@@@;;               ;@@@        ;*@@@@",
        "             ,@@=;    ;@@@@@@@@;;                  $@@         .#@@@",
        "             *@@,;;   @@@@@@@;;;;;;-               -@;          ~@@@",
        "       :     @@@!@@   @@@@@@@!!@@@:,;!!!!!!!:       :            :@@",
        "      !#*!!!!@@@@@:   @@@@@@@@@@@@!!@@@@@@::-                     @@",
        "     !@@::*@@@@@@: !  @@@@:@@@@@@@@@@@@@@@                     ;  @:",
        "    !@@@! ,::=:@@!!@  @@@@ =@@@@@@@@@:@@@@!!!!!             !! ~  @",
        "    ~@@~~    , ~~@@@* ~@@@*,@@@@@@@@@*~~@@@@@@@***        ,*@@    ~",
        "     ~~          ~~@@  @@@@ @@@@@@@@@@* ~@@@@@~=@@**      $@@@",
        "                  .~~ .@@$~*@@@@@@@@@@@* ~@@@@ ,~~~~*    *@@@@",
        "            !=======: =@*-=@@@@@@@@@@@@@  !@@@==    -    -@@@@=",
        "           =@@@-----,=@@. --@@@@@@@@@@@@  .@@@@@=         :@@@@=",
        "         :=@@;- ~====@@-    ----@@@@@@@$  =@@@@@@     ===!$@@@@@",
        "         #@@@. =#-@@@@@         -@@@@@@,  @@@@@@@!   =@@@@@@@@@@",
        "         @@@@  ,, @,,,,         =@@@@,,  $@@@@,@@;   @@@@@@@@@@@",
        "         @@@@!    ,    ;$$$$$$$$@@@,,  $$@@@@- :@.   ,,,@@@@@,,,",
        "         ,@@@@~        .-*@@$~,,,,,  $$@@@@@,  !=      $@@@@@$=",
        "          ,@@@#$   $.    .,,.    $$$$@@@@@:,   ..    $$@#,@@@@.",
        "          .@@@@##,. ;###########@@@@@@@..         ##@#.. .@@.",
        "            ..@@@@###@....;@@@@@@@@*....       ####@...   #..",
        "              ..=@@@@@####@$.......     !######@@...      .",
        "                   ,@@@@@@@@@@@@@@@@@@@@@@@@@",
        "                         ,@@@@@@@@@@@@@",
        "",
    )


class MonsterFactory(ABC):
    """Creates monsters of one kind, sharing a random source between them."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng

    @abstractmethod
    def create_monster(self, level: int) -> Monster:
        """Spawn a monster scaled to ``level``."""


class GoblinFactory(MonsterFactory):
    def create_monster(self, level: int) -> Monster:
        return Goblin(level, self._rng)


class OrcFactory(MonsterFactory):
    def create_monster(self, level: int) -> Monster:
        return Orc(level, self._rng)


class BossMonsterFactory(MonsterFactory):
    def create_monster(self, level: int) -> Monster:
        return BossMonster(level, self._rng)
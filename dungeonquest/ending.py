"""The closing screen shown once the dragon has been slain."""

from __future__ import annotations

CLEAR_SCREEN = "\033[2J\033[H"
SCREEN_WIDTH = 200

_BLANK = ""


def _at(column: int, text: str) -> str:
    return " " * column + text


_LONG_LIVE = (
    _at(46, "__        ______  __    __  ______        __       ______ __     __ ________"),
    _at(45, "/  |      /      \\/  \\  /  |/      \\         /  |     /      /  |   /  /        |"),
    _at(44, "$$ |     /$$$$$$  $$  \\  $$ /$$$$$$  |      $$ |     $$$$$$/$$ |   $$ $$$$$$$$/"),
    _at(44, "$$ |     $$ |  $$ $$$  \\ $$ $$ | _$$/       $$ |       $$ | $$ |   $$ $$ |__"),
    _at(44, "$$ |     $$ |  $$ $$$$  $$ $$ |/    |      $$ |       $$ | $$  \\  /$$/$$    |"),
    _at(44, "$$ |     $$ |  $$ $$ $$ $$ $$ |$$$$ |      $$ |       $$ |  $$  /$$/ $$$$$/"),
    _at(44, "$$ |_____$$ \\__ $$ $$ |$$$$ $$ \\__ $$ |      $$ |_____ _$$ |_  $$ $$/  $$ |_____"),
    _at(44, "$$       $$    $$/$$ | $$$ $$    $$/       $$       / $$   |  $$$/   $$       |"),
    _at(44, "$$$$$$$$/ $$$$$$/ $$/   $$/ $$$$$$/        $$$$$$$$/$$$$$$/    $/    $$$$$$$$/"),
)

_MY_HERO = (
    _at(85, "__       __ __      __          __    __ ________ _______   ______"),
    _at(84, "/  \\      /  /  \\     /   |       /  |  /  /        /       \\  /      \\"),
    _at(84, "$$  \\    /$$ $$  \\   /$$/         $$ |  $$ $$$$$$$$/$$$$$$$  /$$$$$$  |"),
    _at(84, "$$$  \\  /$$$ |$$  \\ /$$/          $$ |__$$ $$ |__   $$ |__$$ $$ |  $$ |"),
    _at(84, "$$$$  /$$$$ | $$  $$/           $$    $$ $$    |  $$    $$<$$ |  $$ |"),
    _at(84, "$$ $$ $$/$$ |  $$$$/            $$$$$$$$ $$$$$/   $$$$$$$  $$ |  $$ |"),
    _at(84, "$$ |$$$/ $$ |   $$ |            $$ |  $$ $$ |_____$$ |  $$ $$ \\__ $$ |"),
    _at(84, "$$ | $/  $$ |   $$ |            $$ |  $$ $$       $$ |  $$ $$    $$/"),
    _at(84, "$$/      $$/    $$/             $$/   $$/$$$$$$$$/$$/   $$/ $$$$$$/"),
)

_CREDIT_ROLES = (
    "구조 설계 및 스테이지 제작",
    "상점 화면 구성 및 코드 보조",
    "몬스터 생성 및 배틀",
    "던전 및 캐릭터",
    "아이템 및 상점",
)


def _credits() -> list[str]:
    lines = [_at(97, "CREDIT"), _BLANK, _BLANK]
    for role in _CREDIT_ROLES:
        lines.append(_at(72, role))
        lines.append(_BLANK)
    return lines


def render_ending(player_name: str) -> str:
    """Return the full ending screen celebrating ``player_name``."""
    lines = [
        *([_BLANK] * 5),
        _at(96, f"{player_name} 만세!"),
        *([_BLANK] * 5),
        *_LONG_LIVE,
        *_MY_HERO,
        *([_BLANK] * 4),
        *_credits(),
    ]
    return CLEAR_SCREEN + "\n".join(lines) + "\n"
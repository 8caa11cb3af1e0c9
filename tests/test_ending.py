from dungeonquest.ending import CLEAR_SCREEN, render_ending


def test_screen_is_cleared_first():
    assert render_ending("Hero").startswith("\033[2J\033[H")
    assert CLEAR_SCREEN == "\033[2J\033[H"


def test_player_is_celebrated_by_name():
    screen = render_ending("Aria")
    assert "Aria 만세!" in screen


def test_credits_are_shown():
    screen = render_ending("Aria")
    assert "CREDIT" in screen
    assert screen.index("Aria 만세!") < screen.index("CREDIT")


def test_layout_does_not_depend_on_name():
    short = render_ending("A").splitlines()
    long = render_ending("Bartholomew").splitlines()
    assert len(short) == len(long)
    differing = [i for i, (a, b) in enumerate(zip(short, long)) if a != b]
    assert len(differing) == 1
    assert "만세!" in short[differing[0]]


def test_screen_ends_with_newline():
    assert render_ending("Hero").endswith("\n")
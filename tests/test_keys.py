from dungeonquest.keys import KeyManager, KeyState, KeyType


def test_initial_state_is_none():
    keys = KeyManager()
    assert all(keys.state(key) is KeyState.NONE for key in KeyType)


def test_full_press_cycle():
    keys = KeyManager()
    keys.tick({KeyType.SPACE})
    assert keys.state(KeyType.SPACE) is KeyState.TAP
    keys.tick({KeyType.SPACE})
    assert keys.state(KeyType.SPACE) is KeyState.PRESSED
    keys.tick(set())
    assert keys.state(KeyType.SPACE) is KeyState.RELEASE
    keys.tick(set())
    assert keys.state(KeyType.SPACE) is KeyState.NONE


def test_keys_are_independent():
    keys = KeyManager()
    keys.tick([KeyType.UP])
    keys.tick([KeyType.UP, KeyType.C])
    assert keys.state(KeyType.UP) is KeyState.PRESSED
    assert keys.state(KeyType.C) is KeyState.TAP
    assert keys.state(KeyType.ESC) is KeyState.NONE


def test_retap_after_release():
    keys = KeyManager()
    keys.tick([KeyType.NUM_1])
    keys.tick([])
    keys.tick([KeyType.NUM_1])
    assert keys.state(KeyType.NUM_1) is KeyState.TAP


def test_all_twenty_keys_tracked():
    keys = KeyManager()
    keys.tick(list(KeyType))
    tapped = [key for key in KeyType if keys.state(key) is KeyState.TAP]
    assert len(tapped) == 20
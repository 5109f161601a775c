from blynkcore.button import ResetButton


def _button():
    calls = []
    return ResetButton(lambda: calls.append(True)), calls


def test_long_hold_resets():
    button, calls = _button()
    button.change(True, 1000)
    assert button.pressed
    assert button.press_time == 1000
    held = button.change(False, 11000)
    assert held == 10000
    assert calls == [True]
    assert not button.pressed
    assert button.press_time is None


def test_short_press_does_not_reset():
    button, calls = _button()
    button.change(True, 0)
    assert button.change(False, 500) == 500
    assert calls == []


def test_repeated_press_keeps_first_time():
    button, calls = _button()
    button.change(True, 100)
    assert button.change(True, 5000) is None
    assert button.press_time == 100


def test_release_without_press_is_ignored():
    button, calls = _button()
    assert button.change(False, 20000) is None
    assert calls == []


def test_clock_wraparound():
    button, calls = _button()
    button.change(True, 2**32 - 5000)
    assert button.change(False, 6000) == 11000
    assert calls == [True]


def test_custom_hold_time():
    calls = []
    button = ResetButton(lambda: calls.append(1), hold_time_action=200, press_time_action=10)
    button.change(True, 0)
    button.change(False, 200)
    assert calls == [1]
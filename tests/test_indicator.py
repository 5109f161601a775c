from blynkcore.indicator import (
    Color,
    Indicator,
    Mode,
    dim,
    rgb,
    to_pwm,
)


def make(is_rgb=True, brightness=255):
    seen = []
    return Indicator(seen.append, brightness, is_rgb), seen


def test_rgb_full_white_packs_channels():
    assert rgb(0xFF, 0xFF, 0xFF) == 0xFFFFFF


def test_dim_full_brightness_is_identity():
    assert dim(200, 255) == 200
    assert dim(255, 64) == 64


def test_to_pwm_maps_full_scale():
    assert to_pwm(255, 1023) == 1023
    assert to_pwm(0, 1023) == 0


def test_init_turns_rgb_led_black():
    ind, seen = make()
    ind.init()
    assert seen == [0]
    assert ind.counter == 0


def test_beat_returns_pattern_and_alternates():
    ind, seen = make()
    on = ind.color(Color.BLUE)
    delays = [ind.beat(on, (50, 500)) for _ in range(4)]
    assert delays == [50, 500, 50, 500]
    assert seen == [on, 0, on, 0]


def test_beat_single_led_uses_brightness():
    ind, seen = make(is_rgb=False, brightness=64)
    ind.beat(0, (10, 20))
    ind.beat(0, (10, 20))
    assert seen == [64, 0]


def test_wave_starts_dark_and_peaks_near_full():
    ind, seen = make()
    color = ind.color(Color.BLYNK)
    ind.wave(color, 5000)
    assert seen[0] == 0
    for _ in range(127):
        ind.wave(color, 5000)
    ind.wave(color, 5000)  # counter 128 -> level 127
    assert ind.counter == 129
    assert all(c <= color for c in seen)


def test_wave_counter_wraps_after_256_steps():
    ind, _ = make()
    for _ in range(256):
        ind.wave(0xFFFFFF, 1024)
    assert ind.counter == 0


def test_run_wait_config_blinks_blue():
    ind, seen = make()
    assert ind.run(Mode.WAIT_CONFIG, now=0) == 50
    assert ind.run(Mode.WAIT_CONFIG, now=0) == 500
    assert seen[0] == ind.color(Color.BLUE)


def test_run_mode_change_resets_counter():
    ind, _ = make()
    ind.run(Mode.WAIT_CONFIG, now=0)
    assert ind.counter == 1
    assert ind.run(Mode.CONNECTING_CLOUD, now=0) == 100
    assert ind.counter == 1


def test_run_error_pattern():
    ind, seen = make()
    delays = [ind.run(Mode.ERROR, now=0) for _ in range(4)]
    assert delays == [80, 100, 80, 1000]
    assert seen[0] == ind.color(Color.RED)


def test_run_button_held_long_flashes_white():
    ind, seen = make()
    delay = ind.run(Mode.RUNNING, button_pressed=True, button_press_time=0, now=10001)
    assert delay == 100
    assert seen == [ind.color(Color.WHITE)]


def test_run_button_short_hold_keeps_mode_pattern():
    ind, seen = make()
    delay = ind.run(Mode.OTA_UPGRADE, button_pressed=True, button_press_time=0, now=100)
    assert delay == 50
    assert seen == [ind.color(Color.MAGENTA)]


def test_run_running_mode_breathes():
    ind, seen = make()
    ind.run(Mode.RUNNING, now=0)
    assert seen == [0]
    assert ind.counter == 1
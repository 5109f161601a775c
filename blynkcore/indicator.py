"""LED status indication: blink and breathing patterns for each device mode."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

BOARD_PWM_MAX = 1023
BUTTON_HOLD_TIME_INDICATION = 3000
BUTTON_HOLD_TIME_ACTION = 10000
BUTTON_PRESS_TIME_ACTION = 50

_START = time.monotonic()


def _now_ms() -> int:
    return int((time.monotonic() - _START) * 1000)


def dim(value: int, brightness: int = 255) -> int:
    """Scale a 0..255 value by a 0..255 brightness."""
    return value * brightness // 255


def rgb(red: int, green: int, blue: int, brightness: int = 255) -> int:
    """Pack dimmed components into a 0xRRGGBB integer."""
    return dim(red, brightness) << 16 | dim(green, brightness) << 8 | dim(blue, brightness)


def to_pwm(value: int, pwm_max: int = BOARD_PWM_MAX) -> int:
    """Scale a 0..255 value to the PWM range."""
    return value * pwm_max // 255


class Mode(Enum):
    """Device provisioning and connection states."""

    WAIT_CONFIG = "wait_config"
    CONFIGURING = "configuring"
    CONNECTING_NET = "connecting_net"
    CONNECTING_CLOUD = "connecting_cloud"
    RUNNING = "running"
    OTA_UPGRADE = "ota_upgrade"
    SWITCH_TO_STA = "switch_to_sta"
    RESET_CONFIG = "reset_config"
    ERROR = "error"


class Color(Enum):
    """Undimmed indicator colours as (red, green, blue)."""

    BLACK = (0x00, 0x00, 0x00)
    WHITE = (0xFF, 0xFF, 0xE7)
    BLUE = (0x0D, 0x36, 0xFF)
    BLYNK = (0x2E, 0xFF, 0xB9)
    RED = (0xFF, 0x10, 0x08)
    MAGENTA = (0xA7, 0x00, 0xFF)


class Indicator:
    """Drives an LED through ``set_color`` and returns the delay until the next step.

    For an RGB LED ``set_color`` receives a 0xRRGGBB colour; for a single-colour
    LED it receives a 0..255 level.
    """

    def __init__(
        self,
        set_color: Callable[[int], object],
        brightness: int = 255,
        is_rgb: bool = True,
    ) -> None:
        if not 0 <= brightness <= 255:
            raise ValueError("brightness must be between 0 and 255")
        self._set_color = set_color
        self._brightness = brightness
        self._is_rgb = is_rgb
        self._counter = 0
        self._prev_mode: Optional[Mode] = None

    @property
    def counter(self) -> int:
        return self._counter

    def color(self, color: Color) -> int:
        """The colour as 0xRRGGBB at this indicator's brightness."""
        return rgb(*color.value, self._brightness)

    def init(self) -> None:
        self._counter = 0
        self._prev_mode = None
        if self._is_rgb:
            self._set_color(self.color(Color.BLACK))

    def run(
        self,
        mode: Mode,
        button_pressed: bool = False,
        button_press_time: int = 0,
        now: Optional[int] = None,
    ) -> int:
        """Advance the pattern for ``mode`` and return milliseconds until the next call."""
        if mode != self._prev_mode:
            self._prev_mode = mode
            self._counter = 0

        if button_pressed:
            t = _now_ms() if now is None else now
            held = t - button_press_time
            if held > BUTTON_HOLD_TIME_ACTION:
                return self.beat(self.color(Color.WHITE), (100, 100))
            if held > BUTTON_HOLD_TIME_INDICATION:
                return self.wave(self.color(Color.WHITE), 1000)

        if mode in (Mode.RESET_CONFIG, Mode.WAIT_CONFIG):
            return self.beat(self.color(Color.BLUE), (50, 500))
        if mode == Mode.CONFIGURING:
            return self.beat(self.color(Color.BLUE), (200, 200))
        if mode == Mode.CONNECTING_NET:
            return self.beat(self.color(Color.BLYNK), (50, 500))
        if mode == Mode.CONNECTING_CLOUD:
            return self.beat(self.color(Color.BLYNK), (100, 100))
        if mode == Mode.RUNNING:
            return self.wave(self.color(Color.BLYNK), 5000)
        if mode == Mode.OTA_UPGRADE:
            return self.beat(self.color(Color.MAGENTA), (50, 50))
        return self.beat(self.color(Color.RED), (80, 100, 80, 1000))

    def beat(self, on_color: int, beat: Sequence[int]) -> int:
        """Alternate on and off, returning each step's duration from ``beat``."""
        if not beat:
            raise ValueError("beat pattern must not be empty")
        count = len(beat)
        lit = self._counter % 2 == 0
        if self._is_rgb:
            self._set_color(on_color if lit else self.color(Color.BLACK))
        else:
            self._set_color(self._brightness if lit else 0)
        delay = beat[self._counter % count]
        self._counter = (self._counter + 1) % count
        return delay

    def wave(self, color_max: int, period: int) -> int:
        """One step of a breathing animation spanning 256 steps per ``period``."""
        level = self._counter if self._counter < 128 else 255 - self._counter
        if self._is_rgb:
            channels: Tuple[int, int, int] = (
                (color_max >> 16) & 0xFF,
                (color_max >> 8) & 0xFF,
                color_max & 0xFF,
            )
            scale = level / 128.0
            red, green, blue = (int(channel * scale) & 0xFF for channel in channels)
            self._set_color(red << 16 | green << 8 | blue)
        else:
            self._set_color(dim(level * 2, self._brightness))
        self._counter = (self._counter + 1) % 256
        return period // 256
"""User button that resets the configuration when held long enough."""

from __future__ import annotations

from typing import Callable, Optional

from .indicator import BUTTON_HOLD_TIME_ACTION, BUTTON_PRESS_TIME_ACTION


class ResetButton:
    """Tracks press and release edges and calls ``on_reset`` after a long hold.

    Times are milliseconds from a 32-bit wrapping clock.
    """

    def __init__(
        self,
        on_reset: Callable[[], object],
        hold_time_action: int = BUTTON_HOLD_TIME_ACTION,
        press_time_action: int = BUTTON_PRESS_TIME_ACTION,
    ) -> None:
        self._on_reset = on_reset
        self._hold_time_action = hold_time_action
        self._press_time_action = press_time_action
        self._pressed = False
        self._press_time: Optional[int] = None

    @property
    def pressed(self) -> bool:
        return self._pressed

    @property
    def press_time(self) -> Optional[int]:
        """When the current press began, or None while released."""
        return self._press_time

    def change(self, pressed: bool, now: int) -> Optional[int]:
        """Report the button level; on release return how long it was held."""
        if pressed and not self._pressed:
            self._press_time = now
            self._pressed = True
            return None
        if not pressed and self._pressed:
            self._pressed = False
            held = (now - self._press_time) & 0xFFFFFFFF
            self._press_time = None
            if held >= self._hold_time_action:
                self._on_reset()
            return held
        return None
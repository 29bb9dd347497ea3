"""Health and ammo counters with synchronous change notifications."""

from __future__ import annotations

from typing import Any, Callable

DamagedCallback = Callable[[float, Any], None]
DiedCallback = Callable[["Health"], None]


class Health:
    """Clamped hit points that broadcast damage and death to subscribers.

    Subscribers are plain callables kept in registration order and invoked
    immediately, inside the call that changed the health value.
    """

    def __init__(self, max_health: float = 100.0) -> None:
        self.max_health = float(max_health)
        self.current = self.max_health
        self._damaged_subscribers: list[DamagedCallback] = []
        self._died_subscribers: list[DiedCallback] = []

    @property
    def is_dead(self) -> bool:
        return self.current <= 0.0

    @property
    def health01(self) -> float:
        if self.max_health <= 0:
            return 0.0
        return self.current / self.max_health

    def subscribe_damaged(self, callback: DamagedCallback) -> None:
        self._damaged_subscribers.append(callback)

    def subscribe_died(self, callback: DiedCallback) -> None:
        self._died_subscribers.append(callback)

    def reset(self) -> None:
        self.current = self.max_health

    def heal(self, amount: float) -> None:
        if self.is_dead:
            return
        self.current = max(0.0, min(self.max_health, self.current + float(amount)))

    def take_damage(self, amount: float, source: Any = None) -> None:
        if self.is_dead:
            return

        self.current -= max(0.0, float(amount))
        for callback in list(self._damaged_subscribers):
            callback(amount, source)

        if self.current <= 0.0:
            self.current = 0.0
            for callback in list(self._died_subscribers):
                callback(self)


class Ammo:
    """Integer ammunition counter."""

    def __init__(self, max_ammo: int = 30) -> None:
        self.max_ammo = int(max_ammo)
        self.current = self.max_ammo

    @property
    def has_ammo(self) -> bool:
        return self.current > 0

    @property
    def ammo01(self) -> float:
        if self.max_ammo <= 0:
            return 0.0
        return self.current / self.max_ammo

    def reset(self) -> None:
        self.current = self.max_ammo

    def consume(self, amount: int) -> bool:
        if self.current < amount:
            return False
        self.current -= int(amount)
        return True

    def add(self, amount: int) -> None:
        self.current = max(0, min(self.max_ammo, self.current + int(amount)))

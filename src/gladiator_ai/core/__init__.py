"""Core gameplay modules."""

from .actor import Actor, AgentIdentity
from .clock import SimulationClock
from .pickups import Pickup, PickupCategory, PickupRegistry
from .resources import Ammo, Health

__all__ = [
    "Actor",
    "AgentIdentity",
    "Ammo",
    "Health",
    "Pickup",
    "PickupCategory",
    "PickupRegistry",
    "SimulationClock",
]

"""Decision-making brains for arena agents.

Package structure:
    perception  - PerceptionSensor: nearest visible enemy under occlusion.
    guard       - ReactiveGuard: patrol/chase/search state machine.
    strategist  - UtilityStrategist: survival override, utility scoring,
                  action lock and anti-repeat selection.
"""

from .guard import GuardState, ReactiveGuard
from .perception import PerceptionResult, PerceptionSensor
from .strategist import ActionLock, PlannerAction, UtilityScores, UtilityStrategist, select_action

__all__ = [
    "ActionLock",
    "GuardState",
    "PerceptionResult",
    "PerceptionSensor",
    "PlannerAction",
    "ReactiveGuard",
    "UtilityScores",
    "UtilityStrategist",
    "select_action",
]

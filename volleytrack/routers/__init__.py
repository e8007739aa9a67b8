"""HTTP routers - main.py includes each of these."""

from . import categories
from . import workout_plans
from . import password
from . import events

__all__ = ["categories", "workout_plans", "password", "events"]

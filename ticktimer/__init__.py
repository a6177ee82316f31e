"""Fixed-timestep loop timer."""

from ticktimer.api.timer import Timer, create_system_timer, create_timer

__version__ = "0.1.0"

__all__ = ["Timer", "create_system_timer", "create_timer"]

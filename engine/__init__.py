"""
engine/
-------
Playback & state layer.

    from engine import Stepper, Visualizer
"""

from engine.stepper    import Stepper, StepperState, DEFAULT_STEP_DELAY
from engine.visualizer import Visualizer, THEMES, DEFAULT_THEME

__all__ = [
    "Stepper",
    "StepperState",
    "DEFAULT_STEP_DELAY",
    "Visualizer",
    "THEMES",
    "DEFAULT_THEME",
]

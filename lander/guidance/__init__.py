"""Burn guidance for the descent stage.

Provides policies that turn the current state into a burn command.
"""

from lander.guidance.quick_hint import (
    QuickHintGuidance,
)

__all__ = [
    "QuickHintGuidance",
]

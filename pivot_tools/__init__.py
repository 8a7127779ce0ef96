"""
Pivot Tools
Scripted pivot actions for drawing nodes: interpolated embedded pivots on in-between cels.
"""

import logging

logger = logging.getLogger("pivot_tools")

ACTION_CLASS_MAPPINGS = {}
ACTION_DISPLAY_NAME_MAPPINGS = {}

from .interpolated_pivots import ACTION_CLASS_MAPPINGS as interpolated_actions
from .interpolated_pivots import ACTION_DISPLAY_NAME_MAPPINGS as interpolated_names
ACTION_CLASS_MAPPINGS.update(interpolated_actions)
ACTION_DISPLAY_NAME_MAPPINGS.update(interpolated_names)


def run_action(name: str, session, **options):
    """Run a registered action against a host session, as a host menu entry does."""
    if name not in ACTION_CLASS_MAPPINGS:
        raise KeyError(f"Unknown action: {name}")
    action = ACTION_CLASS_MAPPINGS[name]()
    logger.debug("[Pivots] running %s with %s", name, options)
    return getattr(action, action.FUNCTION)(session, **options)


__all__ = ["ACTION_CLASS_MAPPINGS", "ACTION_DISPLAY_NAME_MAPPINGS", "run_action"]

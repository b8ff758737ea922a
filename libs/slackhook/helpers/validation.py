"""Action validation utilities."""

import logging

from slackhook.models.action import ActionStyle, ActionType, AttachmentAction

logger = logging.getLogger(__name__)


def validate_action(action: AttachmentAction) -> list[str]:
    """Check an action against what the receiving chat API expects.

    The model accepts any strings; this reports the problems the API would
    reject. Returns a list of error strings. Empty list means valid.
    """
    errors: list[str] = []

    # name and text are required by the API
    if not action.name or not action.name.strip():
        errors.append("'name' field must not be empty")
    if not action.text or not action.text.strip():
        errors.append("'text' field must not be empty")

    if action.style is not None and action.style not in list(ActionStyle):
        errors.append(f"Unknown action style: {action.style}")

    if action.type not in list(ActionType):
        errors.append(f"Unknown action type: {action.type}")

    if action.confirm is not None and not (action.confirm.text or "").strip():
        errors.append("'confirm.text' field must not be empty")

    for error in errors:
        logger.debug("Action %r: %s", action.name, error)
    return errors

from slackhook.models.action import (
    ActionStyle,
    ActionType,
    AttachmentAction,
    coerce_confirmation,
)
from slackhook.models.confirmation import ActionConfirmation

__all__ = [
    "ActionConfirmation",
    "ActionStyle",
    "ActionType",
    "AttachmentAction",
    "coerce_confirmation",
]

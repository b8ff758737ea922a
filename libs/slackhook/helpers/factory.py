"""Factory functions for creating, encoding and parsing actions."""

import json
import logging
from collections.abc import Mapping
from typing import Any

from slackhook.errors import InvalidArgumentError
from slackhook.models.action import AttachmentAction
from slackhook.models.confirmation import ActionConfirmation

logger = logging.getLogger(__name__)


def create_action(
    *,
    text: str,
    name: str | None = None,
    value: str | None = None,
    style: str | None = None,
    confirm: ActionConfirmation | Mapping[str, Any] | None = None,
) -> AttachmentAction:
    """Create a button action.

    Args:
        text: The button label.
        name: Identifier echoed back to the action URL.
        value: Opaque value echoed back to the action URL.
        style: One of `default`, `primary`, `danger`.
        confirm: A confirmation model or a keyed mapping.

    Returns:
        A fully constructed AttachmentAction.

    Raises:
        InvalidArgumentError: If `confirm` is not a model or mapping.
    """
    return (
        AttachmentAction(name=name, style=style, value=value)
        .button(text)
        .set_confirm(confirm)
    )


def encode_action(action: AttachmentAction) -> str:
    """Encode an action as JSON text for the webhook body."""
    data = json.dumps(action.to_dict())
    logger.debug("Encoded action %r (%d bytes)", action.name, len(data))
    return data


def parse_action(data: str | bytes | Mapping[str, Any]) -> AttachmentAction:
    """Parse raw data into an AttachmentAction.

    Args:
        data: JSON string, bytes, or a keyed mapping.

    Returns:
        The constructed action.

    Raises:
        ValueError: If the data is not valid JSON.
        InvalidArgumentError: If the data is not an object or `confirm` is malformed.
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise InvalidArgumentError(
            f"An action must be parsed from a keyed mapping, got {type(data).__name__}"
        )
    action = AttachmentAction.from_mapping(data)
    logger.debug("Parsed action %r of type %s", action.name, action.type)
    return action

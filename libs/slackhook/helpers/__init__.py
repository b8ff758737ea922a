from slackhook.helpers.factory import create_action, encode_action, parse_action
from slackhook.helpers.validation import validate_action

__all__ = [
    "create_action",
    "encode_action",
    "parse_action",
    "validate_action",
]

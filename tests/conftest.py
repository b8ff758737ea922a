"""Shared test fixtures."""

import pytest
from slackhook import ActionConfirmation, AttachmentAction


@pytest.fixture
def confirmation() -> ActionConfirmation:
    return ActionConfirmation(
        title="Are you sure?",
        text="This will deploy to production.",
        ok_text="Yes",
        dismiss_text="No",
    )


@pytest.fixture
def deploy_action(confirmation: ActionConfirmation) -> AttachmentAction:
    """A fully populated button action."""
    return AttachmentAction(
        name="deploy",
        text="Deploy",
        style="danger",
        value="prod",
        confirm=confirmation,
    )

"""
Describe Transfer Action use case.

Builds the action descriptor that action-aware clients fetch before
offering the "Send SOL" button.
"""

from virement.domain.entities.action import (
    ActionDescriptor,
    ActionParameter,
    LinkedAction,
)


class DescribeTransferAction:
    """
    Describe the SOL transfer action.

    Business rules:
    - Pure function of the inbound origin and path
    - Link template keeps {to} and {amount} placeholders for the client
    - No ledger access, no validation
    """

    def __init__(self, icon_path: str = "/solana-logo.png"):
        """
        Initialize use case.

        Args:
            icon_path: Icon path resolved against the request origin
        """
        self.icon_path = icon_path

    def execute(self, origin: str, path: str) -> ActionDescriptor:
        """
        Build the action descriptor.

        Args:
            origin: Request origin (scheme://host[:port])
            path: Request path of the action endpoint

        Returns:
            ActionDescriptor for the transfer action
        """
        return ActionDescriptor(
            icon=f"{origin}{self.icon_path}",
            title="Transfer SOL",
            description="Send SOL to another wallet address",
            label="Transfer",
            actions=[
                LinkedAction(
                    label="Send SOL",
                    href=f"{path}?to={{to}}&amount={{amount}}",
                    type="transaction",
                    parameters=[
                        ActionParameter(
                            name="to",
                            label="Recipient Address",
                            required=True,
                        ),
                        ActionParameter(
                            name="amount",
                            label="Amount (SOL)",
                            required=True,
                        ),
                    ],
                )
            ],
        )

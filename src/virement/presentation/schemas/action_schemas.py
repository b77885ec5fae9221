"""
Action API request/response schemas.

Follows the Solana Actions wire format consumed by action-aware wallets.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from virement.application.use_cases.prepare_transfer_transaction import (
    PrepareTransferResult,
)
from virement.domain.entities.action import ActionDescriptor


class ActionParameterSchema(BaseModel):
    """Parameter collected by the client before posting."""

    name: str = Field(..., description="Query parameter name")
    label: str = Field(..., description="Input placeholder text")
    required: bool = Field(default=True, description="Whether input is required")


class LinkedActionSchema(BaseModel):
    """Single linked action with href template."""

    label: str = Field(..., description="Button label")
    href: str = Field(..., description="POST target with {param} placeholders")
    type: Literal["transaction"] = Field(default="transaction")
    parameters: List[ActionParameterSchema] = Field(default_factory=list)


class ActionLinksSchema(BaseModel):
    """Container for linked actions."""

    actions: List[LinkedActionSchema] = Field(default_factory=list)


class ActionGetResponse(BaseModel):
    """
    Response from GET on an action endpoint.

    Describes the action for discovery by action-aware clients.
    """

    icon: str = Field(..., description="Absolute icon URL")
    title: str = Field(..., description="Action title")
    description: str = Field(..., description="Action description")
    label: str = Field(..., description="Default button label")
    links: ActionLinksSchema = Field(default_factory=ActionLinksSchema)

    @classmethod
    def from_descriptor(cls, descriptor: ActionDescriptor) -> "ActionGetResponse":
        """Build response from domain descriptor."""
        return cls(
            icon=descriptor.icon,
            title=descriptor.title,
            description=descriptor.description,
            label=descriptor.label,
            links=ActionLinksSchema(
                actions=[
                    LinkedActionSchema(
                        label=action.label,
                        href=action.href,
                        type=action.type,
                        parameters=[
                            ActionParameterSchema(
                                name=param.name,
                                label=param.label,
                                required=param.required,
                            )
                            for param in action.parameters
                        ],
                    )
                    for action in descriptor.actions
                ]
            ),
        )


class ActionPostResponse(BaseModel):
    """
    Response from POST on an action endpoint.

    Carries the unsigned transaction for the wallet to sign.
    """

    transaction: str = Field(..., description="Base64 unsigned transaction")
    message: str = Field(..., description="Human-readable summary")

    @classmethod
    def from_result(cls, result: PrepareTransferResult) -> "ActionPostResponse":
        """Build response from use case result."""
        return cls(transaction=result.transaction, message=result.message)


class ActionErrorResponse(BaseModel):
    """Error body returned for every failed action request."""

    message: str = Field(..., description="Error message")

"""
Action descriptor entities.

Describe an action to action-aware wallet clients. Built per request from
the request's own URL; nothing is persisted.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class ActionParameter:
    """Input the client must collect before calling the action."""

    name: str
    label: str
    required: bool = True


@dataclass(frozen=True)
class LinkedAction:
    """One button offered by an action, with its href template."""

    label: str
    href: str
    type: str = "transaction"
    parameters: List[ActionParameter] = field(default_factory=list)


@dataclass(frozen=True)
class ActionDescriptor:
    """
    Static metadata for an action.

    Attributes:
        icon: Absolute URL of the action icon
        title: Action title
        description: Short human-readable description
        label: Default button label
        actions: Linked actions offered to the client
    """

    icon: str
    title: str
    description: str
    label: str
    actions: List[LinkedAction] = field(default_factory=list)

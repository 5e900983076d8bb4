"""Identity contract shared by every provisionable resource kind."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol, Self


class ResourceKind(StrEnum):
    """Closed set of provisionable resource kinds."""

    TEMPLATE = "template"


class Provisionable(Protocol):
    """What the provisioning service needs from a resource.

    ``validate`` is a pure transform: it returns the normalized resource or
    raises a ``ProvisioningError``; the receiver is never modified.
    """

    def resource_type(self) -> str: ...

    def resource_id(self) -> str: ...

    def validate(self) -> Self: ...

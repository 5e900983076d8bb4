"""Provisioning service — drives any provisionable resource through validation."""

from __future__ import annotations

import logging
from typing import TypeVar

from app.errors import ProvisioningError
from app.schemas.resource import Provisionable

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Provisionable)


def prepare(resource: R) -> R:
    """Validate a resource and return its normalized form, ready to persist."""
    try:
        normalized = resource.validate()
    except ProvisioningError as exc:
        logger.warning(
            "Rejected %s %r: %s", resource.resource_type(), resource.resource_id(), exc.message
        )
        raise
    logger.info("Validated %s %r", normalized.resource_type(), normalized.resource_id())
    return normalized

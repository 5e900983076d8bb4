"""Template service — persistence for message templates + file provisioning."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.errors import NotFound, ProvisioningError
from app.models.template import MessageTemplateRow
from app.schemas.template import MessageTemplate
from app.services import provisioning_service

logger = logging.getLogger(__name__)


def _to_resource(row: MessageTemplateRow) -> MessageTemplate:
    return MessageTemplate(name=row.name, template=row.template)


async def list_templates(db: AsyncSession) -> list[MessageTemplate]:
    result = await db.execute(select(MessageTemplateRow).order_by(MessageTemplateRow.name))
    return [_to_resource(row) for row in result.scalars().all()]


async def get_template(db: AsyncSession, name: str) -> MessageTemplate:
    row = await db.get(MessageTemplateRow, name)
    if not row:
        raise NotFound(f"template {name!r} not found")
    return _to_resource(row)


async def save_template(db: AsyncSession, template: MessageTemplate) -> MessageTemplate:
    """Validate and upsert a template. Returns the normalized resource."""
    normalized = provisioning_service.prepare(template)
    await _upsert(db, normalized)
    return normalized


async def _upsert(db: AsyncSession, normalized: MessageTemplate) -> None:
    row = await db.get(MessageTemplateRow, normalized.name)
    if row:
        row.template = normalized.template
    else:
        db.add(MessageTemplateRow(name=normalized.name, template=normalized.template))

    await db.commit()


async def delete_template(db: AsyncSession, name: str) -> None:
    row = await db.get(MessageTemplateRow, name)
    if not row:
        raise NotFound(f"template {name!r} not found")

    await db.delete(row)
    await db.commit()
    logger.info("Deleted template %r", name)


# ── File provisioning ──────────────────────────────────────────────


def _read_provisioning_file(path: Path) -> list[dict[str, Any]]:
    """Return the ``templates:`` entries of a provisioning file.

    Format:
        templates:
          - name: welcome
            template: Hello {{ .Alert }}
    """
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Skipping unreadable provisioning file %s: %s", path, exc)
        return []

    if not isinstance(doc, dict):
        logger.warning("Skipping provisioning file %s: top level is not a mapping", path)
        return []
    entries = doc.get("templates") or []
    if not isinstance(entries, list):
        logger.warning("Skipping provisioning file %s: templates is not a list", path)
        return []
    return [e for e in entries if isinstance(e, dict)]


async def sync_templates_from_disk(db: AsyncSession) -> dict[str, list[str]]:
    """Scan the provisioning directory for YAML files and upsert their templates.

    Returns dict with 'created', 'updated' and 'failed' lists of template names.
    Entries whose normalized body matches the stored one are left untouched.
    """
    provisioning_dir = settings.provisioning_dir
    created: list[str] = []
    updated: list[str] = []
    failed: list[str] = []

    if not provisioning_dir.exists():
        return {"created": created, "updated": updated, "failed": failed}

    files = sorted([*provisioning_dir.rglob("*.yaml"), *provisioning_dir.rglob("*.yml")])
    for path in files:
        for entry in _read_provisioning_file(path):
            template = MessageTemplate(
                name=str(entry.get("name") or ""),
                template=str(entry.get("template") or ""),
            )
            existing = await db.get(MessageTemplateRow, template.name)
            try:
                normalized = provisioning_service.prepare(template)
            except ProvisioningError as exc:
                logger.warning("Template from %s failed to provision: %s", path, exc.message)
                failed.append(template.name or str(path))
                continue
            if existing and existing.template == normalized.template:
                continue
            await _upsert(db, normalized)
            (updated if existing else created).append(normalized.name)

    if created:
        logger.info("Provisioned %d new templates from disk: %s", len(created), created)
    if updated:
        logger.info("Updated %d templates from disk: %s", len(updated), updated)

    return {"created": created, "updated": updated, "failed": failed}

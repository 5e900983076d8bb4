"""Message template provisioning endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.schemas.template import (
    MessageTemplate,
    MessageTemplatePayload,
    MessageTemplateResponse,
    SyncResponse,
)
from app.services import template_service

router = APIRouter()


@router.get("", response_model=list[MessageTemplateResponse])
async def list_templates(db: AsyncSession = Depends(get_db)):
    """Get all message templates."""
    return await template_service.list_templates(db)


@router.post("/sync", response_model=SyncResponse)
async def sync_templates(db: AsyncSession = Depends(get_db)):
    """Re-scan the provisioning directory and upsert the templates it declares."""
    result = await template_service.sync_templates_from_disk(db)
    return SyncResponse(
        **result,
        message=(
            f"{len(result['created'])} created, {len(result['updated'])} updated, "
            f"{len(result['failed'])} failed"
        ),
    )


@router.get("/{name}", response_model=MessageTemplateResponse)
async def get_template(name: str, db: AsyncSession = Depends(get_db)):
    """Get a message template."""
    return await template_service.get_template(db, name)


@router.put("/{name}", response_model=MessageTemplateResponse, status_code=202)
async def put_template(
    name: str, content: MessageTemplatePayload, db: AsyncSession = Depends(get_db)
):
    """Create or update a template. Bare content is wrapped in a define block."""
    return await template_service.save_template(
        db, MessageTemplate(name=name, template=content.template)
    )


@router.delete("/{name}", status_code=204)
async def delete_template(name: str, db: AsyncSession = Depends(get_db)):
    """Delete a template."""
    await template_service.delete_template(db, name)

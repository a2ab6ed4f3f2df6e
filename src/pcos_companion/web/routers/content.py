"""Educational content routes."""

from fastapi import APIRouter, Depends

from ...store import Storage
from ..dependencies import found, get_storage

router = APIRouter(prefix="/api/content", tags=["content"])


@router.get("")
async def list_content(storage: Storage = Depends(get_storage)):
    """List all educational content."""
    return [c.to_dict() for c in await storage.educational_content.list_all()]


@router.get("/category/{category}")
async def list_content_by_category(category: str, storage: Storage = Depends(get_storage)):
    """List content in a category (case-insensitive)."""
    items = await storage.educational_content.list_by_category(category)
    return [c.to_dict() for c in items]


@router.get("/{content_id}")
async def get_content(content_id: int, storage: Storage = Depends(get_storage)):
    """Get one content item."""
    item = found(await storage.educational_content.get(content_id), "Content")
    return item.to_dict()

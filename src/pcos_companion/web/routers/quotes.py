"""Motivational quote routes."""

from fastapi import APIRouter, Depends

from ...store import Storage
from ..dependencies import found, get_storage

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


@router.get("")
async def list_quotes(storage: Storage = Depends(get_storage)):
    """List all motivational quotes."""
    return [q.to_dict() for q in await storage.motivational_quotes.list_all()]


@router.get("/random")
async def random_quote(storage: Storage = Depends(get_storage)):
    """Get a random quote."""
    quote = found(await storage.motivational_quotes.get_random(), "Quote")
    return quote.to_dict()

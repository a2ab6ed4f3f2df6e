"""User account routes."""

from fastapi import APIRouter, Depends, HTTPException

from ...store import Storage
from ..dependencies import found, get_storage
from ..schemas import UserCreate, UserUpdate

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=201)
async def create_user(body: UserCreate, storage: Storage = Depends(get_storage)):
    """Register a new user."""
    if await storage.users.get_by_username(body.username):
        raise HTTPException(status_code=400, detail="Username already taken")
    if await storage.users.get_by_email(body.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    user = await storage.users.create(body.model_dump(mode="json"))
    return user.to_public_dict()


@router.get("/by-username/{username}")
async def get_user_by_username(username: str, storage: Storage = Depends(get_storage)):
    """Look up a user by username."""
    user = found(await storage.users.get_by_username(username), "User")
    return user.to_public_dict()


@router.get("/{user_id}")
async def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    """Get a user by ID."""
    user = found(await storage.users.get(user_id), "User")
    return user.to_public_dict()


@router.patch("/{user_id}")
async def update_user(
    user_id: int, body: UserUpdate, storage: Storage = Depends(get_storage)
):
    """Update profile fields and preferences."""
    changes = body.changes()
    if "email" in changes:
        owner = await storage.users.get_by_email(changes["email"])
        if owner is not None and owner.id != user_id:
            raise HTTPException(status_code=400, detail="Email already registered")

    user = found(await storage.users.update(user_id, changes), "User")
    return user.to_public_dict()

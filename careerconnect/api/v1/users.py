# careerconnect/api/v1/users.py
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from careerconnect.api.v1.deps import get_store
from careerconnect.api.v1.schemas import DeleteResp, DescriptionUpdate, InsertResp, UpdateResp, UserCreate
from careerconnect.db.mongo import Store
from careerconnect.repositories.users import create_user, delete_user, list_users, make_admin, set_description

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[Dict[str, Any]])
async def get_users(store: Store = Depends(get_store)):
    try:
        return await list_users(store.users)
    except Exception as exc:
        logger.exception("Listing users failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("", response_model=InsertResp)
async def post_user(payload: UserCreate, store: Store = Depends(get_store)):
    try:
        return await create_user(store.users, payload.model_dump(exclude_unset=True))
    except Exception as exc:
        logger.exception("Creating user failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.patch("/admin/{user_id}", response_model=UpdateResp)
async def patch_admin(user_id: str, store: Store = Depends(get_store)):
    try:
        return await make_admin(store.users, user_id)
    except Exception as exc:
        logger.exception("Promoting user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.patch("/description/{user_id}", response_model=UpdateResp)
async def patch_description(user_id: str, payload: DescriptionUpdate, store: Store = Depends(get_store)):
    try:
        return await set_description(store.users, user_id, payload.description)
    except Exception as exc:
        logger.exception("Updating description for user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.delete("/{user_id}", response_model=DeleteResp)
async def remove_user(user_id: str, store: Store = Depends(get_store)):
    try:
        return await delete_user(store.users, user_id)
    except Exception as exc:
        logger.exception("Deleting user %s failed", user_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

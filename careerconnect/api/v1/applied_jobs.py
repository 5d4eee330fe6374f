# careerconnect/api/v1/applied_jobs.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from careerconnect.api.v1.deps import get_store
from careerconnect.api.v1.schemas import AppliedJobCreate, DeleteResp, InsertResp
from careerconnect.db.mongo import Store
from careerconnect.repositories.applied_jobs import create_applied_job, delete_applied_job, list_applied_jobs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applied-jobs", tags=["applied-jobs"])


@router.get("", response_model=List[Dict[str, Any]])
async def get_applied_jobs(userId: Optional[str] = Query(None), store: Store = Depends(get_store)):
    try:
        return await list_applied_jobs(store.applied_jobs, userId)
    except Exception as exc:
        logger.exception("Listing applied jobs failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.post("", response_model=InsertResp)
async def post_applied_job(payload: AppliedJobCreate, store: Store = Depends(get_store)):
    try:
        return await create_applied_job(store.applied_jobs, payload.model_dump())
    except Exception as exc:
        logger.exception("Creating applied job failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.delete("/{applied_job_id}", response_model=DeleteResp)
async def remove_applied_job(applied_job_id: str, store: Store = Depends(get_store)):
    try:
        return await delete_applied_job(store.applied_jobs, applied_job_id)
    except Exception as exc:
        logger.exception("Deleting applied job %s failed", applied_job_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

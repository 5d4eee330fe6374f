# careerconnect/api/v1/jobs.py
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from careerconnect.api.v1.deps import get_store
from careerconnect.api.v1.schemas import DeleteResp, InsertResp, JobCreate
from careerconnect.db.mongo import Store
from careerconnect.repositories.jobs import create_job, delete_job, list_jobs

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=InsertResp)
async def post_job(payload: JobCreate, store: Store = Depends(get_store)):
    try:
        return await create_job(store.jobs, payload.model_dump(exclude_unset=True))
    except Exception as exc:
        logger.exception("Creating job failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("", response_model=List[Dict[str, Any]])
async def get_jobs(store: Store = Depends(get_store)):
    try:
        return await list_jobs(store.jobs)
    except Exception as exc:
        logger.exception("Listing jobs failed")
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.delete("/{job_id}", response_model=DeleteResp)
async def remove_job(job_id: str, store: Store = Depends(get_store)):
    try:
        return await delete_job(store.jobs, job_id)
    except Exception as exc:
        logger.exception("Deleting job %s failed", job_id)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

# careerconnect/api/v1/resumes.py
"""
Resume upload and lookup.

- Accepts a multipart upload (file field `resume`, form field `userId`)
- Writes the file under UPLOAD_DIR via services.storage.store_file
- Records filename/path/uploadedAt in the resumes collection
- Removes the written file again if the record cannot be inserted
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile

from careerconnect.api.v1.deps import get_app_settings, get_store
from careerconnect.api.v1.schemas import UploadResumeResp
from careerconnect.core.config import Settings
from careerconnect.db.mongo import Store
from careerconnect.repositories.resumes import create_resume, list_resumes
from careerconnect.services.storage import discard_file, store_file

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resumes"])


@router.post("/upload-resume", response_model=UploadResumeResp)
async def upload_resume(
    resume: Optional[UploadFile] = File(None),
    userId: Optional[str] = Form(None),
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    if resume is None or not resume.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    try:
        stored = await store_file(resume, settings.UPLOAD_DIR)
    except Exception as exc:
        logger.exception("Writing upload %s failed", resume.filename)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    try:
        record = await create_resume(store.resumes, userId, stored.filename, stored.path)
    except Exception as exc:
        logger.exception("Saving resume record for %s failed", stored.path)
        await discard_file(stored.path)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return {"message": "Resume uploaded successfully", "file": record}


@router.get("/resumes", response_model=List[Dict[str, Any]])
async def get_resumes(userId: Optional[str] = Query(None), store: Store = Depends(get_store)):
    if not userId:
        raise HTTPException(status_code=400, detail="userId is required")
    try:
        return await list_resumes(store.resumes, userId)
    except Exception as exc:
        logger.exception("Listing resumes for %s failed", userId)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

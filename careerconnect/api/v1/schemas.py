# careerconnect/api/v1/schemas.py
"""
Request bodies and driver acknowledgements.

The collections are schema-less, so the input models only pin down the
fields each route relies on and pass everything else through.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str = "user"
    description: Optional[str] = None


class DescriptionUpdate(BaseModel):
    description: str


class JobCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    title: Optional[str] = None
    company: Optional[str] = None


class AppliedJobCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    userId: str


class InsertResp(BaseModel):
    acknowledged: bool
    insertedId: str


class UpdateResp(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int = 0
    upsertedId: Optional[str] = None


class DeleteResp(BaseModel):
    acknowledged: bool
    deletedCount: int


class UploadResumeResp(BaseModel):
    message: str
    file: Dict[str, Any]

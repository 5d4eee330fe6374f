# careerconnect/repositories/resumes.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from careerconnect.repositories.base import list_documents, to_doc


def _now():
    # Mongo keeps millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


async def create_resume(collection, user_id: Optional[str], filename: str, path: str) -> Dict[str, Any]:
    """
    Insert the metadata record for a stored resume file and return it,
    `_id` included.
    """
    record = {
        "userId": user_id,
        "filename": filename,
        "path": path,
        "uploadedAt": _now(),
    }
    res = await collection.insert_one(dict(record))
    record["_id"] = res.inserted_id
    return to_doc(record)


async def list_resumes(collection, user_id: str) -> List[Dict[str, Any]]:
    return await list_documents(collection, {"userId": user_id})

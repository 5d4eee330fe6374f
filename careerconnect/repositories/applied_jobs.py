# careerconnect/repositories/applied_jobs.py
from typing import Any, Dict, List, Optional

from careerconnect.repositories.base import delete_result, insert_result, list_documents, to_object_id


async def list_applied_jobs(collection, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
    query = {}
    if user_id:
        query["userId"] = user_id
    return await list_documents(collection, query)


async def create_applied_job(collection, payload: Dict[str, Any]) -> Dict[str, Any]:
    res = await collection.insert_one(dict(payload))
    return insert_result(res)


async def delete_applied_job(collection, applied_job_id: str) -> Dict[str, Any]:
    res = await collection.delete_one({"_id": to_object_id(applied_job_id)})
    return delete_result(res)

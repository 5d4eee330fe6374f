# careerconnect/repositories/jobs.py
from typing import Any, Dict, List

from careerconnect.repositories.base import delete_result, insert_result, list_documents, to_object_id


async def create_job(collection, payload: Dict[str, Any]) -> Dict[str, Any]:
    res = await collection.insert_one(dict(payload))
    return insert_result(res)


async def list_jobs(collection) -> List[Dict[str, Any]]:
    return await list_documents(collection)


async def delete_job(collection, job_id: str) -> Dict[str, Any]:
    res = await collection.delete_one({"_id": to_object_id(job_id)})
    return delete_result(res)

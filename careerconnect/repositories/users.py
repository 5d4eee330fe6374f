# careerconnect/repositories/users.py
from typing import Any, Dict, List

from careerconnect.repositories.base import (
    delete_result,
    insert_result,
    list_documents,
    to_object_id,
    update_result,
)

ADMIN_ROLE = "admin"
DEFAULT_ROLE = "user"


async def list_users(collection) -> List[Dict[str, Any]]:
    return await list_documents(collection)


async def create_user(collection, payload: Dict[str, Any]) -> Dict[str, Any]:
    doc = dict(payload)
    doc.setdefault("role", DEFAULT_ROLE)
    res = await collection.insert_one(doc)
    return insert_result(res)


async def make_admin(collection, user_id: str) -> Dict[str, Any]:
    res = await collection.update_one({"_id": to_object_id(user_id)}, {"$set": {"role": ADMIN_ROLE}})
    return update_result(res)


async def set_description(collection, user_id: str, description: str) -> Dict[str, Any]:
    res = await collection.update_one({"_id": to_object_id(user_id)}, {"$set": {"description": description}})
    return update_result(res)


async def delete_user(collection, user_id: str) -> Dict[str, Any]:
    res = await collection.delete_one({"_id": to_object_id(user_id)})
    return delete_result(res)

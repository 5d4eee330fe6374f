# careerconnect/repositories/base.py
from typing import Any, Dict, List, Optional

from bson import ObjectId


def to_object_id(value: str) -> ObjectId:
    # raises bson.errors.InvalidId for anything but a 24-char hex / 12-byte id
    return ObjectId(value)


def _stringify(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: _stringify(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify(v) for v in value]
    return value


def to_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert a raw Mongo document into something JSON can carry (ObjectIds become hex strings)."""
    if doc is None:
        return None
    return _stringify(dict(doc))


async def list_documents(collection, query: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    out = []
    async for d in collection.find(query or {}):
        out.append(to_doc(d))
    return out


def insert_result(res) -> Dict[str, Any]:
    return {"acknowledged": res.acknowledged, "insertedId": str(res.inserted_id)}


def update_result(res) -> Dict[str, Any]:
    upserted_id = res.upserted_id
    return {
        "acknowledged": res.acknowledged,
        "matchedCount": res.matched_count,
        "modifiedCount": res.modified_count,
        "upsertedCount": 0 if upserted_id is None else 1,
        "upsertedId": None if upserted_id is None else str(upserted_id),
    }


def delete_result(res) -> Dict[str, Any]:
    return {"acknowledged": res.acknowledged, "deletedCount": res.deleted_count}

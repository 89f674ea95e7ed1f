from datetime import datetime
from typing import Optional, List, Any, Dict
from bson import ObjectId
from pymongo.collection import Collection


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """Convert a MongoDB document into a JSON-friendly dictionary"""
    if doc is None:
        return None
    serialized = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            serialized[key] = str(value)
        elif isinstance(value, datetime):
            serialized[key] = value.isoformat()
        else:
            serialized[key] = value
    return serialized


class BaseRepository:
    """Base repository with common document operations"""

    def __init__(self, collection: Collection):
        self.collection = collection

    def get(self, id: Any) -> Optional[Dict[str, Any]]:
        """Get by _id"""
        return self.find_one({"_id": id})

    def find(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Find all documents matching filters"""
        cursor = self.collection.find(filters) if filters is not None else self.collection.find()
        return [serialize_document(doc) for doc in cursor]

    def find_one(self, filters: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return serialize_document(self.collection.find_one(filters))

    def create(self, obj_in: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a document and return it with its _id"""
        doc = dict(obj_in)
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_document(doc)

    def create_many(self, objs_in: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        docs = [dict(obj) for obj in objs_in]
        result = self.collection.insert_many(docs)
        for doc, inserted_id in zip(docs, result.inserted_ids):
            doc["_id"] = inserted_id
        return [serialize_document(doc) for doc in docs]

    def exists(self, filters: Dict[str, Any]) -> bool:
        """Check if a document exists"""
        return self.collection.find_one(filters) is not None

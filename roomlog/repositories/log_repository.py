from datetime import datetime
from typing import List, Optional

from bson import ObjectId

from roomlog.database.mongo import MongoODM
from roomlog.models.documents import LogDocument, as_utc, utc_now


class LogRepository:
    """Log store backed by the ``logs`` collection."""

    def __init__(self, odm: MongoODM) -> None:
        self._odm = odm

    async def append(self, user_id: str, room: str, timestamp: Optional[datetime] = None) -> LogDocument:
        await self._odm.initialize()
        doc = LogDocument(user_id=user_id, room=room, timestamp=as_utc(timestamp) if timestamp else utc_now())
        return await doc.insert()

    async def list(self) -> List[LogDocument]:
        await self._odm.initialize()
        return await LogDocument.find_all().to_list()

    async def list_by_user_id(self, user_id: str) -> List[LogDocument]:
        await self._odm.initialize()
        return await LogDocument.find(LogDocument.user_id == user_id).sort(+LogDocument.timestamp).to_list()

    async def get_by_id(self, record_id: str) -> Optional[LogDocument]:
        if not ObjectId.is_valid(record_id):
            return None
        await self._odm.initialize()
        return await LogDocument.get(ObjectId(record_id))

    async def delete_by_id(self, record_id: str) -> bool:
        """Delete by record id. Returns False when nothing matched."""
        doc = await self.get_by_id(record_id)
        if doc is None:
            return False
        await doc.delete()
        return True

from typing import List, Optional

from bson import ObjectId
from pymongo.errors import DuplicateKeyError

from roomlog.core.exceptions import DuplicateIdentity
from roomlog.database.mongo import MongoODM
from roomlog.models.documents import UserDocument
from roomlog.models.enums import UserRole

# Mongo field name -> API field name
_IDENTITY_FIELDS = {"user_id": "userId", "secret_key": "secretKey"}


def _conflicting_field(error: DuplicateKeyError) -> str:
    details = error.details or {}
    key_pattern = details.get("keyPattern") or details.get("keyValue") or {}
    for field in key_pattern:
        if field in _IDENTITY_FIELDS:
            return _IDENTITY_FIELDS[field]
    for field, api_name in _IDENTITY_FIELDS.items():
        if field in str(error):
            return api_name
    return "userId"


class UserRepository:
    """Credential store backed by the ``users`` collection."""

    def __init__(self, odm: MongoODM) -> None:
        self._odm = odm

    async def create_user(
        self,
        user_id: str,
        secret_key: str,
        password_hash: str,
        role: UserRole,
        allowed_room: Optional[List[str]] = None,
    ) -> UserDocument:
        await self._odm.initialize()
        doc = UserDocument(
            user_id=user_id,
            secret_key=secret_key,
            password=password_hash,
            role=role,
            allowed_room=list(allowed_room or []),
        )
        try:
            return await doc.insert()
        except DuplicateKeyError as e:
            field = _conflicting_field(e)
            if field == "userId":
                raise DuplicateIdentity(field, f"userId '{user_id}' already exists") from e
            raise DuplicateIdentity(field) from e

    async def get_by_user_id(self, user_id: str) -> Optional[UserDocument]:
        await self._odm.initialize()
        return await UserDocument.find_one(UserDocument.user_id == user_id)

    async def get_by_id(self, record_id: str) -> Optional[UserDocument]:
        if not ObjectId.is_valid(record_id):
            return None
        await self._odm.initialize()
        return await UserDocument.get(ObjectId(record_id))

    async def list(self) -> List[UserDocument]:
        await self._odm.initialize()
        return await UserDocument.find_all().to_list()

    async def delete_by_id(self, record_id: str) -> bool:
        """Delete by record id. Returns False when nothing matched."""
        doc = await self.get_by_id(record_id)
        if doc is None:
            return False
        await doc.delete()
        return True

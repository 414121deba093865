"""MongoDB handle for RoomLog.

``MongoODM`` owns the Motor client and the Beanie registration of every RoomLog
document model. One instance is created at application startup, handed to the
repositories, and closed at shutdown.
"""

from typing import List, Optional, Type

from beanie import Document, init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from roomlog.core.logger import get_logger
from roomlog.models.documents import DOCUMENT_MODELS

logger = get_logger(__name__)


class MongoODM:
    """Async MongoDB connection with Beanie document models.

    Args:
        db_uri: MongoDB connection URI string.
        db_name: Name of the MongoDB database to use.
        document_models: Beanie document classes to register.

    Example:
        .. code-block:: python

            odm = MongoODM("mongodb://localhost:27017", "roomlog")
            await odm.initialize()
            ...
            odm.close()
    """

    def __init__(self, db_uri: str, db_name: str, document_models: Optional[List[Type[Document]]] = None):
        self.db_uri = db_uri
        self.db_name = db_name
        self.document_models = list(document_models or DOCUMENT_MODELS)
        self._client: Optional[AsyncIOMotorClient] = None
        self._is_initialized = False

    @property
    def client(self) -> AsyncIOMotorClient:
        if self._client is None:
            # tz_aware so timestamps read back as UTC-aware datetimes
            self._client = AsyncIOMotorClient(self.db_uri, tz_aware=True)
        return self._client

    @property
    def database(self) -> AsyncIOMotorDatabase:
        return self.client[self.db_name]

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def initialize(self) -> None:
        """Connect and register document models, creating their indexes.

        Safe to call repeatedly; only the first call does any work.
        """
        if self._is_initialized:
            return
        await init_beanie(database=self.database, document_models=self.document_models)
        self._is_initialized = True
        collections = [m.Settings.name for m in self.document_models]
        logger.info("Database initialized", db_name=self.db_name, collections=collections)

    def close(self) -> None:
        """Close the underlying client. The handle can be initialized again afterwards."""
        if self._client is not None:
            self._client.close()
            self._client = None
        self._is_initialized = False
        logger.info("Database connection closed", db_name=self.db_name)

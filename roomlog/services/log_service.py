from typing import Any, List

from roomlog.core.exceptions import NotFound, ValidationError
from roomlog.core.logger import get_logger
from roomlog.models.log import LogCreatePayload

logger = get_logger(__name__)


class LogService:
    """Room access events. ``userId`` is stored as given and not checked against users."""

    def __init__(self, log_repo):
        self.log_repo = log_repo

    async def add_log(self, payload: LogCreatePayload) -> Any:
        if not payload.user_id or not payload.room:
            raise ValidationError("userId and room are required")

        log = await self.log_repo.append(payload.user_id, payload.room, payload.timestamp)
        logger.info("Access logged", user_id=log.user_id, room=log.room)
        return log

    async def list_logs(self) -> List[Any]:
        return await self.log_repo.list()

    async def list_logs_for_user(self, user_id: str) -> List[Any]:
        logs = await self.log_repo.list_by_user_id(user_id)
        if not logs:
            raise NotFound("No logs found for this user")
        return logs

    async def delete_log(self, record_id: str) -> None:
        if not await self.log_repo.delete_by_id(record_id):
            raise NotFound("Log not found")
        logger.info("Log deleted", record_id=record_id)

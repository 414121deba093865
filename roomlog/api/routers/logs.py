from typing import List

from fastapi import APIRouter, Depends

from roomlog.api.dependencies import get_log_service, request_payload
from roomlog.models import ApiResponse, LogCreatePayload, LogResponse
from roomlog.services.log_service import LogService

router = APIRouter(prefix="/log", tags=["Logs"])


@router.post("", response_model=ApiResponse[LogResponse], response_model_exclude_none=True)
async def add_log(
    payload: LogCreatePayload = Depends(request_payload(LogCreatePayload)),
    service: LogService = Depends(get_log_service),
):
    log = await service.add_log(payload)
    return ApiResponse(message="Successfully added log", data=LogResponse.from_log(log))


@router.get("", response_model=ApiResponse[List[LogResponse]], response_model_exclude_none=True)
async def list_logs(service: LogService = Depends(get_log_service)):
    logs = await service.list_logs()
    return ApiResponse(message="Found all logs", data=[LogResponse.from_log(log) for log in logs])


@router.get("/{user_id}", response_model=ApiResponse[List[LogResponse]], response_model_exclude_none=True)
async def list_logs_for_user(user_id: str, service: LogService = Depends(get_log_service)):
    logs = await service.list_logs_for_user(user_id)
    return ApiResponse(message="Found logs for user", data=[LogResponse.from_log(log) for log in logs])


@router.delete("/{log_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_log(log_id: str, service: LogService = Depends(get_log_service)):
    await service.delete_log(log_id)
    return ApiResponse(message="Successfully deleted log")

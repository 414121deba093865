from typing import List

from fastapi import APIRouter, Depends

from roomlog.api.dependencies import get_auth_service, request_payload
from roomlog.models import ApiResponse, LoginPayload, RegisterPayload, UserResponse
from roomlog.services.auth_service import AuthService

router = APIRouter(prefix="/user", tags=["Users"])


@router.get("", response_model=ApiResponse[List[UserResponse]], response_model_exclude_none=True)
async def list_users(service: AuthService = Depends(get_auth_service)):
    users = await service.list_users()
    return ApiResponse(message="Found all users", data=[UserResponse.from_user(u) for u in users])


@router.post("/login", response_model=ApiResponse[UserResponse], response_model_exclude_none=True)
async def login(
    payload: LoginPayload = Depends(request_payload(LoginPayload)),
    service: AuthService = Depends(get_auth_service),
):
    user = await service.login(payload)
    return ApiResponse(message="Login successful", data=UserResponse.from_user(user))


@router.post("/register", response_model=ApiResponse[UserResponse], response_model_exclude_none=True)
async def register(
    payload: RegisterPayload = Depends(request_payload(RegisterPayload)),
    service: AuthService = Depends(get_auth_service),
):
    user = await service.register(payload)
    return ApiResponse(message="Successfully Registered User", data=UserResponse.from_user(user))


@router.delete("/{user_id}", response_model=ApiResponse[None], response_model_exclude_none=True)
async def delete_user(user_id: str, service: AuthService = Depends(get_auth_service)):
    """Delete by record id; the path segment is the store's ``_id``, not ``userId``."""
    await service.delete_user(user_id)
    return ApiResponse(message="Successfully deleted user")

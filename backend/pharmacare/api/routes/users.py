"""Staff users. Passwords are accepted on write and never returned."""
from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.user import UserCreate, UserResponse, UserUpdate
from pharmacare.services import user_service

router = APIRouter()


@router.get("", response_model=List[UserResponse])
def list_users(store: EntityStore = Depends(get_store)):
    return user_service.list_users(store)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, store: EntityStore = Depends(get_store)):
    user = user_service.get_user(store, user_id)
    if not user:
        raise BusinessError.not_found("User")
    return user


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(data: UserCreate, request: Request, store: EntityStore = Depends(get_store)):
    try:
        user = user_service.create_user(store, data)
    except ValueError as e:
        raise BusinessError.bad_request(str(e))
    AuditLog.log_action(
        "create", "user", user.id, {"username": user.username, "role": user.role}, client_ip(request)
    )
    return user


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, updates: UserUpdate, request: Request, store: EntityStore = Depends(get_store)):
    try:
        user = user_service.update_user(store, user_id, updates)
    except ValueError as e:
        raise BusinessError.bad_request(str(e))
    if not user:
        raise BusinessError.not_found("User")
    AuditLog.log_action("update", "user", user_id, updates.model_dump(exclude_unset=True), client_ip(request))
    return user


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, request: Request, store: EntityStore = Depends(get_store)):
    if not user_service.delete_user(store, user_id):
        raise BusinessError.not_found("User")
    AuditLog.log_action("delete", "user", user_id, ip_address=client_ip(request))
    return Response(status_code=status.HTTP_204_NO_CONTENT)

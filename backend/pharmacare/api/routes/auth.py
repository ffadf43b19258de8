"""Auth: username/password login for back-office staff.

WARNING: passwords are compared in plaintext and no session or token is
issued. Suitable for the demo back-office only.
"""
from fastapi import APIRouter, Depends, Request

from pharmacare.api.deps import client_ip, get_store
from pharmacare.core.audit import AuditLog
from pharmacare.core.exceptions import BusinessError
from pharmacare.db.store import EntityStore
from pharmacare.schemas.user import LoginResponse, UserLogin, UserResponse
from pharmacare.services import user_service

router = APIRouter()


@router.post("/login", response_model=LoginResponse)
def login(data: UserLogin, request: Request, store: EntityStore = Depends(get_store)):
    """
    Returns the user record without its password.

    Generic error message for unknown username and wrong password alike.
    """
    user = user_service.authenticate(store, data.username, data.password)
    if not user:
        AuditLog.log_authentication(
            "failed_login", data.username, client_ip(request), False, reason="Invalid credentials"
        )
        raise BusinessError.unauthorized(f"login as {data.username}")

    AuditLog.log_authentication("login", user.username, client_ip(request), True)
    return LoginResponse(user=UserResponse.model_validate(user, from_attributes=True))

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.auth import jwt_handler
from backend.auth.jwt_handler import TokenPayload
from backend.core.errors import SweetShopError
from backend.models.user import Role

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenPayload:
    if credentials is None or not credentials.credentials:
        raise HTTPException(status_code=401, detail="No authorization token provided")

    try:
        return jwt_handler.decode_access_token(credentials.credentials)
    except SweetShopError as exc:
        raise HTTPException(status_code=401, detail=exc.message) from exc


def require_admin(current_user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
    if current_user.role is not Role.ADMIN:
        raise HTTPException(status_code=403, detail="Admin access required")
    return current_user

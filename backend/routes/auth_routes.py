from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_user
from backend.auth.jwt_handler import TokenPayload
from backend.database import get_db
from backend.models.user import Role
from backend.repositories.user_repository import UserRepository
from backend.routes.dependencies import get_auth_service
from backend.services.auth_service import AuthService

router = APIRouter(tags=['auth'])


class CredentialsRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: str
    email: str
    role: Role

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str
    token_type: str = 'bearer'
    user: UserResponse


@router.post('/register', response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(data: CredentialsRequest, auth_service: AuthService = Depends(get_auth_service)):
    user = auth_service.register(data.email, data.password)
    return RegisterResponse(
        message='User registered successfully',
        user=UserResponse.model_validate(user),
    )


@router.post('/login', response_model=LoginResponse)
def login(data: CredentialsRequest, auth_service: AuthService = Depends(get_auth_service)):
    result = auth_service.login(data.email, data.password)
    return LoginResponse(
        message='Login successful',
        token=result.token,
        user=UserResponse.model_validate(result.user),
    )


@router.get('/me', response_model=UserResponse)
def me(current_user: TokenPayload = Depends(get_current_user), db: Session = Depends(get_db)):
    user = UserRepository(db).find_by_id(current_user.user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail='User not found')
    return user

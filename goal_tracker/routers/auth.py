# goal_tracker/routers/auth.py
from fastapi import APIRouter, HTTPException, Response, status

from goal_tracker.config import settings
from goal_tracker.core.auth import AUTH_COOKIE, check_password, create_access_token
from goal_tracker.schemas.auth import LoginRequest, Token


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("", response_model=Token)
async def login(login_in: LoginRequest, response: Response):
    if not check_password(login_in.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token()
    response.set_cookie(
        AUTH_COOKIE,
        access_token,
        httponly=True,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )
    return Token(access_token=access_token)


@router.delete("")
async def logout(response: Response):
    response.delete_cookie(AUTH_COOKIE)
    return {"success": True}

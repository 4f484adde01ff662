# goal_tracker/core/auth.py
import hmac
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from goal_tracker.config import settings

AUTH_COOKIE = "auth-token"

reusable_oauth2 = HTTPBearer(auto_error=False)

def check_password(candidate: str) -> bool:
    if not settings.APP_PASSWORD:
        return False
    return hmac.compare_digest(candidate.encode(), settings.APP_PASSWORD.encode())

def create_access_token(subject: str = "owner") -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode({"sub": subject, "exp": expire}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

async def require_auth(
    request: Request,
    token: Optional[HTTPAuthorizationCredentials] = Depends(reusable_oauth2),
):
    if not settings.auth_enabled:
        return None

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    raw = token.credentials if token else request.cookies.get(AUTH_COOKIE)
    if not raw:
        raise credentials_exception
    try:
        payload = jwt.decode(raw, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception
    if payload.get("sub") is None:
        raise credentials_exception
    return payload["sub"]

async def require_cron_secret(
    token: Optional[HTTPAuthorizationCredentials] = Depends(reusable_oauth2),
):
    secret = settings.CRON_SECRET
    if not secret or token is None or not hmac.compare_digest(token.credentials.encode(), secret.encode()):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Unauthorized")

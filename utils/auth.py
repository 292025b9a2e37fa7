import logging
from datetime import datetime, UTC, timedelta

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config import settings
from utils.errors import unauthorized

logger = logging.getLogger(__name__)

# Bearer 토큰 인증 스키마 (토큰이 없어도 여기서는 에러를 내지 않음)
security = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """token decoding"""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return payload
    except jwt.ExpiredSignatureError:
        raise unauthorized("token is expired") from None
    except jwt.InvalidTokenError:
        raise unauthorized("invalid token") from None


def get_token_payload(
        credentials: HTTPAuthorizationCredentials | None = Depends(security)
) -> dict:
    """Authorization 헤더의 토큰 payload 반환"""
    if credentials is None:
        raise unauthorized("authentication required")
    payload = decode_access_token(credentials.credentials)
    if not payload.get("sub"):
        raise unauthorized("invalid token")
    return payload


def require_admin(payload: dict = Depends(get_token_payload)) -> dict:
    """관리자 전용 (is_admin 클레임이 true 가 아니면 401)"""
    if payload.get("is_admin") is not True:
        logger.warning("Non-admin access attempt: sub=%s", payload.get("sub"))
        raise unauthorized("admin required")
    return payload

# core/security.py

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated, Optional

import bcrypt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt

from core.config import settings
from core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

ADMIN_SUBJECT = "admin"

# auto_error=False: con AUTH_REQUIRED desactivado el header es opcional
outh2_scheme = OAuth2PasswordBearer(tokenUrl="api/auth/login", auto_error=False)

# ----------------------------------------------------------------------
# FUNCIONES DE CONTRASEÑA
# ----------------------------------------------------------------------

def hash_password(password: str) -> str:
    """Hashea una contraseña utilizando bcrypt."""
    hashed_password = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed_password.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verifica una contraseña plana contra su versión hasheada."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


@lru_cache(maxsize=4)
def _hash_for(plain_password: str) -> str:
    return hash_password(plain_password)


def admin_password_hash() -> str:
    """Hash configurado o, en su defecto, el hash de ADMIN_PASSWORD (calculado una vez)."""
    if settings.ADMIN_PASSWORD_HASH:
        return settings.ADMIN_PASSWORD_HASH
    return _hash_for(settings.ADMIN_PASSWORD)


def verify_admin_password(plain_password: str) -> bool:
    return verify_password(plain_password, admin_password_hash())

# ----------------------------------------------------------------------
# FUNCIONES DE TOKEN (JWT)
# ----------------------------------------------------------------------

def encode_token(data: dict):
    """Crea y codifica un token JWT. Devuelve el token y su expiración."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire.timestamp()})

    token = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token, expire


def decode_token(token: str) -> dict:
    """Decodifica el token y valida que pertenezca al administrador."""
    try:
        data = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired token.")

    if data.get("sub") != ADMIN_SUBJECT:
        raise AuthenticationError("The token data is incomplete (missing subject)")
    return data

# ----------------------------------------------------------------------
# DEPENDENCIA DE AUTORIZACIÓN
# ----------------------------------------------------------------------

def require_admin(token: Annotated[Optional[str], Depends(outh2_scheme)]) -> Optional[str]:
    """
    Identidad del llamador para las operaciones de administración.

    Con AUTH_REQUIRED desactivado el API queda abierto y se devuelve None.
    Con AUTH_REQUIRED activo se exige un bearer token emitido por /api/auth/login.
    """
    if not settings.AUTH_REQUIRED:
        return None

    if not token:
        raise AuthenticationError("Not authenticated")

    data = decode_token(token)
    return data["sub"]


AdminDep = Annotated[Optional[str], Depends(require_admin)]

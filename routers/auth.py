import logging
from fastapi import APIRouter, status

from core.exceptions import AuthenticationError
from core.security import ADMIN_SUBJECT, encode_token, verify_admin_password
from schemas.tokens_schema import AccessTokenResponse, LoginRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["AUTH"])


@router.post("/login", response_model=AccessTokenResponse, status_code=status.HTTP_200_OK)
def login_admin(login_data: LoginRequest):
    """Valida la contraseña de administración y emite un token JWT."""
    if not verify_admin_password(login_data.password):
        logger.warning("Failed admin login attempt")
        raise AuthenticationError("Invalid password")

    encoded_jwt, expires_at = encode_token({"sub": ADMIN_SUBJECT})
    logger.info("Admin token issued, expires at %s", expires_at.isoformat())

    return AccessTokenResponse(access_token=encoded_jwt, token_type="bearer", expires_at=expires_at)

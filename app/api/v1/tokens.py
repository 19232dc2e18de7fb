from fastapi import APIRouter

from app.core.config import settings
from app.schemas.token import TokenCatalog

router = APIRouter()


@router.get("/tokens", response_model=TokenCatalog)
async def list_supported_tokens():
    return TokenCatalog(
        tokens=settings.SUPPORTED_TOKENS,
        count=len(settings.SUPPORTED_TOKENS),
        network=settings.TOKEN_NETWORK,
    )

"""
Access API endpoint.

Lets the client ask where the current session stands before rendering
protected content.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_access_service
from api.middleware.auth import get_bearer_token

from .models import AccessDecision
from .service import AccessService

router = APIRouter()


@router.get("", response_model=AccessDecision)
async def get_access(
    token: Optional[str] = Depends(get_bearer_token),
    service: AccessService = Depends(get_access_service),
) -> AccessDecision:
    """
    Evaluate the Session Gate for the bearer token, if any.

    Never fails on a bad token: the answer is simply unauthenticated.
    """
    return await service.resolve(token)

import hmac

from fastapi import Header, HTTPException

from app.config import settings


async def verify_api_key(x_api_key: str = Header(..., alias="X-API-Key")) -> str:
    """Reject requests whose X-API-Key header does not match settings.API_KEY.

    A missing header fails request validation (422) before this runs.
    """
    if not hmac.compare_digest(x_api_key.encode(), settings.API_KEY.encode()):
        raise HTTPException(status_code=401, detail="Invalid API key")
    return x_api_key

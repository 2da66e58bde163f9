from typing import Any, Optional

from pydantic import BaseModel


class ArrowsRequest(BaseModel):
    dino: Optional[str] = None  # e.g. "Rex"
    level: Any = None  # Creature level; must be a JSON number


class ArrowsResponse(BaseModel):
    arrows: int  # Tranquilizer arrows needed to knock the creature out

"""Session token model."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from pyplaces.models._base import utcnow


def _new_token_id() -> str:
    return str(uuid.uuid4())


class SessionToken(BaseModel):
    """Opaque correlation id grouping suggestion queries and one selection.

    Parameters
    ----------
    id : str
        Token value sent as ``sessiontoken``. A UUID4 string, as the
        directory's usage contract recommends.
    created_at : datetime
        UTC timestamp when the token was issued.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_token_id)
    created_at: datetime = Field(default_factory=utcnow)

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class GenerateItineraryRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    prompt: Optional[StrictStr] = None

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TranslatedFieldModel(BaseModel):
    field: str = Field(..., description="Name of the translated attribute")
    content: Any = Field(
        None, description="Translated value in its storage representation"
    )

    model_config = ConfigDict(from_attributes=True, frozen=True, extra="forbid")

"""Application request contracts."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from travel_companion.domain.enums import RecipeKind


class GenerationRequest(BaseModel):
    """One fully built model call: the prompt plus the JSON schema it must satisfy."""

    kind: RecipeKind
    prompt: str = Field(min_length=1)
    json_schema: dict[str, Any]
    parameters: dict[str, Any] = Field(default_factory=dict)

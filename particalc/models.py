from typing import Optional

from pydantic import BaseModel, field_validator

from core.display import INITIAL_DISPLAY


class CalculatorState(BaseModel):
    display: str = INITIAL_DISPLAY
    last_token: Optional[str] = None
    scientific: bool = False
    dark_mode: bool = False

    @field_validator("display")
    @classmethod
    def _never_empty(cls, v: str) -> str:
        return v or INITIAL_DISPLAY

"""
Pydantic schemas for data validation.
"""

from pydantic import BaseModel, Field, field_validator, model_validator

from config import GameSettings, WORD_LIST


# ============ Game Settings Schemas ============

class GameSettingsSchema(BaseModel):
    """Schema for user overrides read from settings.json."""
    total_seconds: int = Field(default=10, ge=1, le=3600)
    tick_seconds: int = Field(default=1, ge=1)
    panic_threshold_seconds: int = Field(default=3, ge=0)
    words: list[str] = Field(default_factory=lambda: list(WORD_LIST), min_length=1)

    @field_validator("words")
    @classmethod
    def words_not_blank(cls, v: list[str]) -> list[str]:
        words = [w.strip() for w in v]
        if any(not w for w in words):
            raise ValueError("Words cannot be blank")
        return words

    @model_validator(mode="after")
    def tick_divides_total(self) -> "GameSettingsSchema":
        if self.total_seconds % self.tick_seconds != 0:
            raise ValueError(
                f"tick_seconds ({self.tick_seconds}) must divide "
                f"total_seconds ({self.total_seconds})"
            )
        return self

    def to_settings(self) -> GameSettings:
        """Convert to the frozen settings dataclass."""
        return GameSettings(
            total_seconds=self.total_seconds,
            tick_seconds=self.tick_seconds,
            panic_threshold_seconds=self.panic_threshold_seconds,
        )

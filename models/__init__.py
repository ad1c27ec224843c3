"""
Guess The Word Models

Pydantic schemas for validating user-supplied settings.
"""

from models.schemas import GameSettingsSchema

__all__ = ["GameSettingsSchema"]

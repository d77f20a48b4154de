from pydantic import BaseModel, field_validator
from .defs import *

class RemovalSettings(BaseModel):
    detect_cycles: bool = False
    max_steps: int | None = None

    @field_validator("max_steps")
    @classmethod
    def validate_max_steps(cls, v):
        if v is not None and v < 1:
            raise ValueError("max_steps must be positive if not None")
        return v

DEFAULT_SETTINGS = RemovalSettings()

def load_settings(settings=None):
    if settings is None:
        return DEFAULT_SETTINGS

    if isinstance(settings, RemovalSettings):
        return settings

    return RemovalSettings(**settings)

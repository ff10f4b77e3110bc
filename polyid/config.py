import os
from functools import lru_cache
from pathlib import Path as _Path
from typing import Literal

from dotenv import load_dotenv as _load_dotenv
from pydantic import BaseModel, ConfigDict, Field

_load_dotenv(dotenv_path=_Path(__file__).resolve().parent.parent / ".env", override=False)


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Unsigned input above 2**63 - 1: reject it, or reinterpret as two's complement
    unsigned_overflow: Literal["reject", "wrap"] = Field(
        default_factory=lambda: os.getenv("POLYID_UNSIGNED_OVERFLOW", "reject").lower()
    )
    # Query scalar integers are 32-bit: reject wider values, or saturate to the bounds
    scalar_int_overflow: Literal["reject", "clamp"] = Field(
        default_factory=lambda: os.getenv("POLYID_SCALAR_INT_OVERFLOW", "reject").lower()
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()

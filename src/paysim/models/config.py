"""Application configuration model."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field


class PaysimConfig(BaseModel):
    """User settings, stored as TOML."""

    # Simulated processing time between a valid submit and the receipt
    processing_delay: float = Field(default=1.5, ge=0, le=60)

    # Durable mirror settings
    mirror_backend: Literal["file", "keyring", "memory"] = "file"
    session: str = Field(default="default", pattern=r"^[A-Za-z0-9_.-]{1,64}$")
    mirror_key: str = Field(default="transactionResult", min_length=1)

    # Base directory for file mirrors; platform state dir when unset
    state_dir: Optional[Path] = None

from __future__ import annotations

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class Settings(BaseModel):
    # Ciphertext presentation
    block_size: int = Field(default=5, ge=1, le=26, description="Letters per output group")

    # Persistence
    state_dir: str = Field(default="state", description="Default directory for saved machine states")

    # Logging
    log_level: str = Field(default="WARNING")
    log_file: Optional[str] = Field(default=None)

    # Reproducibility / evaluation
    global_seed: int = Field(default=1337)
    roundtrip_vectors: int = Field(default=200, ge=1, le=100_000)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    # Load .env if present
    load_dotenv()

    return Settings(
        block_size=int(os.getenv("ROTORLAB_BLOCK_SIZE", "5")),
        state_dir=os.getenv("ROTORLAB_STATE_DIR", "state"),
        log_level=os.getenv("ROTORLAB_LOG_LEVEL", "WARNING").strip().upper(),
        log_file=os.getenv("ROTORLAB_LOG_FILE") or None,
        global_seed=int(os.getenv("GLOBAL_SEED", "1337")),
        roundtrip_vectors=int(os.getenv("ROTORLAB_ROUNDTRIP_VECTORS", "200")),
    )

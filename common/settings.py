import os
from typing import Dict
from pydantic import BaseModel, Field, field_validator, ValidationError

from ingestion.models import DEFAULT_STABLECOINS

RPC_ENV_VAR = "SOLANA_RPC_ENDPOINT"

class RPC(BaseModel):
    url: str = ""
    timeout: float = Field(default=30, gt=0)

    @field_validator("url")
    @classmethod
    def strip_placeholder(cls, v: str) -> str:
        # an unresolved ${VAR} means no endpoint was supplied
        v = (v or "").strip()
        if "${" in v:
            return ""
        return v

class Retry(BaseModel):
    max_attempts: int = Field(default=5, ge=1)
    initial_delay_ms: float = Field(default=1000, ge=0)

class Settings(BaseModel):
    rpc: RPC = RPC()
    retry: Retry = Retry()
    stablecoins: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_STABLECOINS))

def load_settings(path: str = "config.yaml", env_file: str = ".env") -> Settings:
    import yaml
    from dotenv import load_dotenv

    # variables already exported in the shell win over the file
    load_dotenv(env_file, override=False)

    cfg = {}
    if os.path.exists(path):
        with open(path, "r") as f:
            cfg = yaml.safe_load(f) or {}

    env_rpc = os.environ.get(RPC_ENV_VAR)
    if env_rpc:
        cfg["rpc"] = dict(cfg.get("rpc") or {}, url=env_rpc)

    try:
        return Settings.model_validate(cfg)
    except ValidationError as e:
        raise RuntimeError(f"Configuration error in {path}: {e}") from e

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import Literal, Optional
import os, yaml
from dotenv import load_dotenv

class SenderCfg(BaseModel):
    kind: Literal["memory", "noop"] = "memory"
    initial_permits: Optional[int] = Field(default=None, ge=0)   # None => unbounded
    encoder: Literal["span", "otel"] = "span"

class AppConfig(BaseModel):
    sender: SenderCfg = SenderCfg()

def load_config(path: str) -> AppConfig:
    load_dotenv(override=False)
    import pathlib
    p = pathlib.Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    raw.setdefault("sender", {})
    sender_cfg = raw["sender"] or {}

    def coalesce(yaml_val, env_val):
        return env_val if (yaml_val in (None, "") and env_val not in (None, "")) else yaml_val

    env_kind    = os.getenv("TRACEKIT_SENDER_KIND")
    env_permits = os.getenv("TRACEKIT_INITIAL_PERMITS")

    sender_cfg["kind"]            = coalesce(sender_cfg.get("kind"), env_kind)
    sender_cfg["initial_permits"] = coalesce(sender_cfg.get("initial_permits"), env_permits)
    sender_cfg = {k: v for k, v in sender_cfg.items() if v is not None or k == "initial_permits"}

    raw["sender"] = sender_cfg
    return AppConfig.model_validate(raw)

from __future__ import annotations
import os
from functools import lru_cache
from dotenv import load_dotenv, dotenv_values

from .runtime_paths import resolve_runtime_path

CANDIDATES = [".env", "resources/.env"]  # search order

@lru_cache(maxsize=1)
def _load_env() -> dict:
    """Load .env from the first existing location (via resolve_runtime_path)."""
    for rel in CANDIDATES:
        p = resolve_runtime_path(rel)
        if p:
            load_dotenv(p, override=False)
            return {"path": p, "values": dotenv_values(p)}
    # No .env anywhere: only the process environment is used
    return {"path": None, "values": {}}

def get_env_variable_value(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Process environment first, then the .env file, then the default."""
    data = _load_env()
    val = os.getenv(key)
    if val is None:
        val = data["values"].get(key)
    if val is None:
        val = default
    if required and (val is None or str(val).strip() == ""):
        src = data["path"] or "<env>"
        raise RuntimeError(f"Missing required env '{key}' (looked in {src})")
    return val

def get_view_id(view_id: str | None = None) -> str:
    """Explicit view id wins over GA_VIEW_ID."""
    if view_id:
        return view_id
    return get_env_variable_value("GA_VIEW_ID", required=True)

def env_source_path() -> str | None:
    """Path the .env was loaded from (or None if not found)."""
    return _load_env()["path"]

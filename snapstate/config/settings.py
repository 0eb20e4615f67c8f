from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel

# Keep settings boring and predictable.
# Path construction lives in snapstate.config.paths; this only names the knobs.

DEFAULT_STATE_ROOT_VAR = "SNAP_DATA"
DEFAULT_COMMON_ROOT_VAR = "SNAP_COMMON"


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    return (environ.get(name) or "").strip() or default


class Settings(BaseModel):
    # Names of the variables the packaging system exports for the two roots.
    state_root_var: str = DEFAULT_STATE_ROOT_VAR
    common_root_var: str = DEFAULT_COMMON_ROOT_VAR

    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build a fresh Settings from `environ` (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    return Settings(
        state_root_var=_env_str(env, "SNAPSTATE_STATE_ROOT_VAR", DEFAULT_STATE_ROOT_VAR),
        common_root_var=_env_str(env, "SNAPSTATE_COMMON_ROOT_VAR", DEFAULT_COMMON_ROOT_VAR),
        log_level=_env_str(env, "SNAPSTATE_LOG_LEVEL", "INFO").upper(),
    )

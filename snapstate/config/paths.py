"""
Canonical on-disk layout for a snap-packaged service.

Two roots come from the packaging system:
  - state root  (SNAP_DATA):   conf/ and run/
  - common root (SNAP_COMMON): data/ and logs/

This module only computes paths and their creation modes. Creating the
directories, and deciding what to do when a root is unset, is up to callers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Dict, Iterator, Mapping, Optional, Tuple

from loguru import logger

from snapstate.config.settings import Settings, load_settings

PathModeMap = Dict[str, int]

# (PathSet field, root attribute, sub-segment, mode)
# PathSet and the mode map are both built from this table; add rows here only.
PATH_LAYOUT: Tuple[Tuple[str, str, str, int], ...] = (
    ("conf_path", "state_root", "conf", 0o750),
    ("run_path", "state_root", "run", 0o700),
    ("data_path", "common_root", "data", 0o700),
    ("log_path", "common_root", "logs", 0o700),
)


@dataclass(frozen=True)
class RootEnvironment:
    state_root: str = ""
    common_root: str = ""

    @classmethod
    def from_environ(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        settings: Optional[Settings] = None,
    ) -> "RootEnvironment":
        """
        Read both roots from the environment at call time.
        Unset variables read as "" (no validation).
        """
        env = os.environ if environ is None else environ
        cfg = settings or load_settings(env)
        roots = cls(
            state_root=env.get(cfg.state_root_var, ""),
            common_root=env.get(cfg.common_root_var, ""),
        )
        logger.bind(
            state_root_var=cfg.state_root_var,
            state_root=roots.state_root,
            common_root_var=cfg.common_root_var,
            common_root=roots.common_root,
        ).debug("root_environment")
        return roots


@dataclass(frozen=True)
class PathSet:
    conf_path: str
    run_path: str
    data_path: str
    log_path: str

    def as_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_dict().values())


def _layout_paths(roots: RootEnvironment) -> Iterator[Tuple[str, str, int]]:
    for field_name, root_attr, segment, mode in PATH_LAYOUT:
        yield field_name, os.path.join(getattr(roots, root_attr), segment), mode


def resolve_path_set(roots: Optional[RootEnvironment] = None) -> PathSet:
    """Resolve the four service paths. Reads the environment when `roots` is None."""
    if roots is None:
        roots = RootEnvironment.from_environ()
    return PathSet(**{name: path for name, path, _ in _layout_paths(roots)})


def resolve_path_mode_map(roots: Optional[RootEnvironment] = None) -> PathModeMap:
    """Map each path from resolve_path_set() to the mode it must be created with."""
    if roots is None:
        roots = RootEnvironment.from_environ()
    return {path: mode for _, path, mode in _layout_paths(roots)}


def mode_for(field_name: str) -> int:
    for name, _, _, mode in PATH_LAYOUT:
        if name == field_name:
            return mode
    raise KeyError(field_name)

"""CounterConfig: where listcounter keeps its databases.

Layout:

    $XDG_DATA_HOME/           # falls back to ~/.local/share
        go-listcounter/
            <name>.json       # one file per named database

The fallback is the literal path "~/.local/share"; pathlib does not expand
"~", so without XDG_DATA_HOME the directory is created relative to the
working directory. Existing databases written by earlier releases live there.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

_DATA_HOME_VAR = "XDG_DATA_HOME"
_DEFAULT_DATA_HOME = "~/.local/share"
_APP_DIR = "go-listcounter"


@dataclass
class CounterConfig:
    """Resolved configuration for one invocation."""

    data_home: Path = field(default_factory=lambda: Path(_DEFAULT_DATA_HOME))

    @property
    def data_dir(self) -> Path:
        return self.data_home / _APP_DIR


def load_config(environ: Mapping[str, str] | None = None) -> CounterConfig:
    """Build a CounterConfig from environ (os.environ by default)."""
    env = os.environ if environ is None else environ
    data_home = env.get(_DATA_HOME_VAR, "") or _DEFAULT_DATA_HOME
    return CounterConfig(data_home=Path(data_home))

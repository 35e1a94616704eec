"""Configuration loading for licensegen (.licensegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .synth.compiler import DEFAULT_BABEL_COMMAND

CONFIG_FILENAME = ".licensegen.yml"
COMPILER_MODES = ("commonjs", "babel")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CompilerConfig:
    """How the compatibility form of the module is produced."""

    mode: str = "commonjs"
    command: List[str] = field(default_factory=lambda: list(DEFAULT_BABEL_COMMAND))


@dataclass
class GitConfig:
    executable: str = "git"


@dataclass
class LicenseGenConfig:
    """Represents the settings defined in .licensegen.yml."""

    root: Path
    compiler: CompilerConfig = field(default_factory=CompilerConfig)
    git: GitConfig = field(default_factory=GitConfig)
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> LicenseGenConfig:
    """Load configuration from ``config_path`` (a file or the directory holding it)."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return LicenseGenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    compiler = CompilerConfig()
    compiler_data = _as_dict(data.get("compiler"))
    if compiler_data:
        mode = _as_str(compiler_data.get("mode"))
        if mode is not None:
            if mode not in COMPILER_MODES:
                raise ConfigError(
                    f"Unknown compiler mode {mode!r}; expected one of {', '.join(COMPILER_MODES)}"
                )
            compiler.mode = mode
        command = _as_str_list(compiler_data.get("command"))
        if command:
            compiler.command = command

    git = GitConfig()
    git_data = _as_dict(data.get("git"))
    executable = _as_str(git_data.get("executable")) if git_data else None
    if executable:
        git.executable = executable

    log_file_str = _as_str(data.get("log_file"))
    log_file = root / log_file_str if log_file_str else None

    return LicenseGenConfig(root=root, compiler=compiler, git=git, log_file=log_file)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CompilerConfig",
    "ConfigError",
    "GitConfig",
    "LicenseGenConfig",
    "load_config",
]

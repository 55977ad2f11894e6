"""Application configuration: defaults, an optional YAML file and environment overrides."""

import dataclasses
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import yaml

ENV_PREFIX = "WHC"
CONFIG_NAMES = ("config.yaml", "config.yml")
DEFAULT_SEARCH_DIRS = (".", "config")


@dataclass
class BaseConfig:
    title: str = "WhoCares.io"
    description: str = "Professional Silence Tracker"
    base_url: str = "https://whocares.io"


@dataclass
class ServerConfig:
    port: int = 8080
    host: str = "localhost"


@dataclass
class AppConfig:
    seed: int = 8000000
    refresh_interval: int = 60
    cache_duration: int = 3600


@dataclass
class StaticConfig:
    messages_dir: str = "assets/messages"
    fonts_dir: str = "assets/fonts"
    public_dir: str = "public"


@dataclass
class Config:
    base: BaseConfig = field(default_factory=BaseConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    app: AppConfig = field(default_factory=AppConfig)
    static: StaticConfig = field(default_factory=StaticConfig)


_SECTIONS = {
    "base": BaseConfig,
    "server": ServerConfig,
    "app": AppConfig,
    "static": StaticConfig,
}


def _read_config_file(search_dirs: Iterable) -> dict:
    for directory in search_dirs:
        for name in CONFIG_NAMES:
            path = Path(directory) / name
            if path.is_file():
                document = yaml.safe_load(path.read_text(encoding="utf-8"))
                if document is None:
                    return {}
                if not isinstance(document, dict):
                    raise ValueError(f"{path}: configuration must be a mapping")
                return {str(key).lower(): value for key, value in document.items()}
    return {}


def _coerce(value, kind: type, key: str):
    if kind is str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError:
            raise ValueError(f"{key}: cannot convert {value!r} to an integer") from None
    raise ValueError(f"{key}: cannot convert {value!r} to an integer")


def _env_value(environ: Mapping, key: str):
    dotted = f"{ENV_PREFIX}_{key.upper()}"
    if dotted in environ:
        return environ[dotted]
    underscored = dotted.replace(".", "_")
    return environ.get(underscored)


def load(search_dirs=None, environ=None) -> Config:
    """Build the configuration; environment beats the config file, which beats defaults."""
    if search_dirs is None:
        search_dirs = DEFAULT_SEARCH_DIRS
    if environ is None:
        environ = os.environ

    document = _read_config_file(search_dirs)
    sections = {}
    for section_name, section_cls in _SECTIONS.items():
        raw_section = document.get(section_name) or {}
        if not isinstance(raw_section, dict):
            raise ValueError(f"{section_name}: expected a mapping")
        raw_section = {str(key).lower(): value for key, value in raw_section.items()}
        values = {}
        for item in dataclasses.fields(section_cls):
            key = f"{section_name}.{item.name}"
            value = _env_value(environ, key)
            if value is None and item.name in raw_section:
                value = raw_section[item.name]
            if value is None:
                continue
            values[item.name] = _coerce(value, item.type, key)
        sections[section_name] = section_cls(**values)
    return Config(**sections)
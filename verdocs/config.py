import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class HandlerConfig:
    default_version_name: str = "default"
    docs_dir: str = "storage/docs"
    prefix_uri: str = "docs"
    dark_theme: bool = False

    def storage_path(self, name: str) -> Path:
        return Path(self.docs_dir) / name


def _getenv(name: str, default: str = "") -> str:
    return (os.environ.get(name) or default).strip()


def _getenv_bool(name: str, default: bool = False) -> bool:
    value = _getenv(name).lower()
    if not value:
        return default
    return value in ("1", "true", "yes", "on")


def load_config() -> HandlerConfig:
    return HandlerConfig(
        default_version_name=_getenv("VERDOCS_DEFAULT_VERSION", "default"),
        docs_dir=_getenv("VERDOCS_DOCS_DIR", "storage/docs"),
        prefix_uri=_getenv("VERDOCS_PREFIX_URI", "docs"),
        dark_theme=_getenv_bool("VERDOCS_DARK_THEME"),
    )

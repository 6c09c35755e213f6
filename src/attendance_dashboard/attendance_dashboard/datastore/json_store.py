from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


@dataclass
class DataDirConfig:
    path: Path


class JsonDataStore:
    """Reads saved backend responses, one `<resource>.json` file per resource.

    Each file holds the JSON array the matching GET endpoint returned.
    Files are re-read on every call so a refreshed export is picked up without
    restarting.
    """

    _instance: Optional["JsonDataStore"] = None

    def __init__(self, config: DataDirConfig):
        self._config = config

    @classmethod
    def get_instance(cls, config: DataDirConfig) -> "JsonDataStore":
        if cls._instance is None or cls._instance._config != config:
            cls._instance = JsonDataStore(config)
        return cls._instance

    @property
    def root(self) -> Path:
        return self._config.path

    def path_for(self, resource: str) -> Path:
        return self._config.path / f"{resource}.json"

    def load(self, resource: str) -> List[Dict[str, Any]]:
        path = self.path_for(resource)
        if not path.exists():
            logger.warning("No export for %s at %s; treating it as empty", resource, path)
            return []

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise InvalidInputError(f"{path.name} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc

        if not isinstance(data, list):
            raise InvalidInputError(f"{path.name} must hold a JSON array, got {type(data).__name__}")

        logger.debug("Loaded %d %s from %s", len(data), resource, path)
        return data

    def save(self, resource: str, items: List[Dict[str, Any]]) -> Path:
        """Write a resource export (used by the sample data script)."""

        self._config.path.mkdir(parents=True, exist_ok=True)
        path = self.path_for(resource)
        with path.open("w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False, indent=2)
        return path


def data_dir_config(path: Union[str, Path]) -> DataDirConfig:
    return DataDirConfig(path=Path(path).expanduser().resolve())

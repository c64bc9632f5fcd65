"""Named-document stores for settings persistence.

A store maps a document name (e.g. ``texture_config``) to a parsed JSON
value. ``read`` returns None when nothing is stored under the name and
raises when something is stored but cannot be read or parsed; ``write``
replaces the stored document.
"""

import copy
import json
from pathlib import Path
from typing import Any

from loguru import logger
from platformdirs import user_data_dir


class DataStore:
    """Base class for named-document stores."""

    def read(self, name: str) -> Any | None:
        raise NotImplementedError

    def write(self, name: str, document: Any):
        raise NotImplementedError


class JsonFileStore(DataStore):
    """Stores each document as ``<name>.json`` under a data directory."""

    def __init__(self, data_dir: str | Path | None = None):
        if data_dir is None:
            self._data_dir = Path(user_data_dir("TextureOptimizer", "TextureOptimizer"))
        else:
            self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def path_for(self, name: str) -> Path:
        return self._data_dir / f"{name}.json"

    def read(self, name: str) -> Any | None:
        """Read and parse a document.

        Raises:
            OSError: If the file exists but cannot be read.
            json.JSONDecodeError: If the file is not valid JSON.
        """
        path = self.path_for(name)
        if not path.exists():
            return None

        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    def write(self, name: str, document: Any):
        """Write a document as pretty-printed JSON, creating the directory."""
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)

        logger.debug(f"Document written: {path}")


class MemoryStore(DataStore):
    """In-process store; documents are deep-copied on the way in and out.

    ``write_count`` counts successful writes so callers can check how often
    a resolution touched the store.
    """

    def __init__(self, documents: dict[str, Any] | None = None):
        self._documents: dict[str, Any] = copy.deepcopy(documents) if documents else {}
        self.write_count = 0

    def read(self, name: str) -> Any | None:
        return copy.deepcopy(self._documents.get(name))

    def write(self, name: str, document: Any):
        # Match the file store: only JSON-serializable documents are accepted
        json.dumps(document)
        self._documents[name] = copy.deepcopy(document)
        self.write_count += 1

"""Resolution of the texture_config document into Settings.

Resolving loads the document from a store. When nothing is stored, or what
is stored cannot be read or decoded, a default Settings value is built and
written back on a best-effort basis. Resolution never raises for store or
format problems: the caller always gets a usable Settings value.
"""

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from texopt.config.defaults import DOCUMENT_NAME
from texopt.config.schema import (
    Settings,
    decode_settings,
    encode_settings,
)
from texopt.config.store import DataStore


class ResolutionPolicy(Enum):
    """How a successful load is announced.

    Neither policy writes to the store when the stored document is valid.
    """

    TRUST_LOADED_ALWAYS = "trust_loaded_always"
    SKIP_REWRITE_ON_VALID_LOAD = "skip_rewrite_on_valid_load"


class ResolutionSource(Enum):
    """Where the resolved Settings came from."""

    LOADED = "loaded"
    CREATED = "created"  # nothing stored
    RECOVERED = "recovered"  # stored document unusable


@dataclass(frozen=True)
class Resolution:
    """Resolved settings plus how they were obtained."""

    settings: Settings
    source: ResolutionSource
    persisted: bool = False
    error: str | None = None


class ConfigMaterializer:
    """Loads settings from a store, falling back to persisted defaults.

    Not safe for concurrent invocation against the same store and document
    name: ``resolve`` performs an unguarded read-check-write sequence.
    """

    def __init__(
        self,
        policy: ResolutionPolicy = ResolutionPolicy.SKIP_REWRITE_ON_VALID_LOAD,
        tag: str = "TextureOptimizer",
        document_name: str = DOCUMENT_NAME,
    ):
        self._policy = policy
        self._tag = tag
        self._document_name = document_name

    @property
    def policy(self) -> ResolutionPolicy:
        return self._policy

    @property
    def document_label(self) -> str:
        return f"{self._document_name}.json"

    def resolve(self, store: DataStore) -> Settings:
        """Return the settings held in the store, or persisted defaults."""
        return self.materialize(store).settings

    def materialize(self, store: DataStore) -> Resolution:
        """Resolve settings and report how they were obtained.

        Writes to the store at most once.
        """
        try:
            document = store.read(self._document_name)
            if document is not None:
                settings = decode_settings(document)
        # ValueError covers JSON, encoding and schema errors; deep nesting
        # makes the JSON decoder raise RecursionError
        except (OSError, ValueError, RecursionError) as e:
            self._log(
                f"Error reading {self.document_label}, "
                f"generating default configuration: {e}",
                level="WARNING",
            )
            settings = Settings()
            persisted = self._persist(store, settings)
            return Resolution(settings, ResolutionSource.RECOVERED, persisted, str(e))

        if document is None:
            self._log(f"No {self.document_label} found, creating default configuration...")
            settings = Settings()
            persisted = self._persist(store, settings)
            return Resolution(settings, ResolutionSource.CREATED, persisted)

        if self._policy is ResolutionPolicy.SKIP_REWRITE_ON_VALID_LOAD:
            self._log(f"{self.document_label} already exists, no changes made.")
            return Resolution(settings, ResolutionSource.LOADED)

        self._log(f"{self.document_label} loaded successfully.")
        return Resolution(settings, ResolutionSource.LOADED)

    def _persist(self, store: DataStore, settings: Settings) -> bool:
        try:
            store.write(self._document_name, encode_settings(settings))
        except (OSError, TypeError, ValueError) as e:
            self._log(f"Error writing {self.document_label}: {e}", level="ERROR")
            return False
        return True

    def _log(self, message: str, level: str = "INFO"):
        logger.log(level, f"[{self._tag}] {message}")

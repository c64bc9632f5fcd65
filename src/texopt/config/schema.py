"""Settings data model for the texture_config document.

The document is a JSON object with a single ``textureSettings`` member that
holds the streaming fields and four nested groups (``asyncLoading``,
``cache``, ``fallback``, ``logging``). Field names in the document are
camelCase; the Python attributes are snake_case. The mapping lives in each
dataclass field's metadata, so encode and decode walk the same table.

Decoding is all-or-nothing: a document that is missing a field or carries a
wrong-typed value is rejected as a whole with SettingsFormatError. Key
matching is case-insensitive so documents written with PascalCase labels
(``TextureSettings``, ``StreamingEnabled``, ...) read the same.
"""

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any

from texopt.config import defaults


ROOT_KEY = "textureSettings"


class SettingsFormatError(ValueError):
    """Raised when a stored document does not match the settings schema."""


def _field(key: str, kind, **kwargs):
    return field(metadata={"key": key, "kind": kind}, **kwargs)


@dataclass(frozen=True)
class AsyncLoadingSettings:
    enabled: bool = _field("enabled", bool, default=defaults.ASYNC_LOADING_ENABLED)
    batch_size: int = _field("batchSize", int, default=defaults.ASYNC_BATCH_SIZE)
    delay_between_batches_ms: int = _field(
        "delayBetweenBatchesMs", int, default=defaults.ASYNC_DELAY_BETWEEN_BATCHES_MS
    )


@dataclass(frozen=True)
class CacheSettings:
    enable_disk_cache: bool = _field("enableDiskCache", bool, default=defaults.DISK_CACHE_ENABLED)
    cache_folder: str = _field("cacheFolder", str, default=defaults.CACHE_FOLDER)
    max_cache_size_mb: int = _field("maxCacheSizeMB", int, default=defaults.MAX_CACHE_SIZE_MB)


@dataclass(frozen=True)
class FallbackSettings:
    low_res_placeholder: bool = _field(
        "lowResPlaceholder", bool, default=defaults.LOW_RES_PLACEHOLDER
    )
    placeholder_color: str = _field("placeholderColor", str, default=defaults.PLACEHOLDER_COLOR)


@dataclass(frozen=True)
class LoggingSettings:
    enable_debug_logs: bool = _field("enableDebugLogs", bool, default=defaults.DEBUG_LOGS_ENABLED)
    log_file: str = _field("logFile", str, default=defaults.LOG_FILE)


@dataclass(frozen=True)
class Settings:
    """Complete texture-streaming settings.

    Every field has a default, so ``Settings()`` is always a valid value.
    Instances are immutable; nested groups belong to exactly one Settings.
    """

    streaming_enabled: bool = _field("streamingEnabled", bool, default=defaults.STREAMING_ENABLED)
    streaming_priority: str = _field(
        "streamingPriority", str, default=defaults.STREAMING_PRIORITY
    )
    max_texture_size: int = _field("maxTextureSize", int, default=defaults.MAX_TEXTURE_SIZE)
    mip_bias: int = _field("mipBias", int, default=defaults.MIP_BIAS)
    preload_critical_textures: bool = _field(
        "preloadCriticalTextures", bool, default=defaults.PRELOAD_CRITICAL_TEXTURES
    )
    critical_textures: tuple[str, ...] = _field(
        "criticalTexturesList", tuple, default=defaults.CRITICAL_TEXTURES
    )
    async_loading: AsyncLoadingSettings = _field(
        "asyncLoading", AsyncLoadingSettings, default_factory=AsyncLoadingSettings
    )
    cache: CacheSettings = _field("cache", CacheSettings, default_factory=CacheSettings)
    fallback: FallbackSettings = _field(
        "fallback", FallbackSettings, default_factory=FallbackSettings
    )
    logging: LoggingSettings = _field("logging", LoggingSettings, default_factory=LoggingSettings)


def encode_settings(settings: Settings) -> dict[str, Any]:
    """Convert Settings to the JSON-serializable document shape."""
    return {ROOT_KEY: _encode_group(settings)}


def decode_settings(document: Any) -> Settings:
    """Build Settings from a parsed document.

    Raises:
        SettingsFormatError: If the document is not a complete, well-typed
            settings document.
    """
    if not isinstance(document, dict):
        raise SettingsFormatError(
            f"document: expected an object, got {type(document).__name__}"
        )
    members = _casefold_keys(document)
    if ROOT_KEY.lower() not in members:
        raise SettingsFormatError(f"document: missing '{ROOT_KEY}'")
    return _decode_group(Settings, members[ROOT_KEY.lower()], ROOT_KEY)


def _encode_group(group) -> dict[str, Any]:
    data = {}
    for f in fields(group):
        value = getattr(group, f.name)
        if is_dataclass(value):
            value = _encode_group(value)
        elif isinstance(value, tuple):
            value = list(value)
        data[f.metadata["key"]] = value
    return data


def _decode_group(cls, data: Any, path: str):
    if not isinstance(data, dict):
        raise SettingsFormatError(f"{path}: expected an object, got {type(data).__name__}")

    members = _casefold_keys(data)
    values = {}
    for f in fields(cls):
        key = f.metadata["key"]
        where = f"{path}.{key}"
        if key.lower() not in members:
            raise SettingsFormatError(f"{where}: missing")
        values[f.name] = _decode_value(f.metadata["kind"], members[key.lower()], where)
    return cls(**values)


def _decode_value(kind, value: Any, where: str):
    if is_dataclass(kind):
        return _decode_group(kind, value, where)

    if kind is tuple:
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise SettingsFormatError(f"{where}: expected a list of strings")
        return tuple(value)

    # bool is a subclass of int; keep the two apart
    if kind is int and isinstance(value, bool):
        raise SettingsFormatError(f"{where}: expected int, got bool")
    if not isinstance(value, kind):
        raise SettingsFormatError(
            f"{where}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _casefold_keys(data: dict) -> dict[str, Any]:
    return {str(k).lower(): v for k, v in data.items()}

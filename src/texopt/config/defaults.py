"""Default values for the texture_config document.

Every field of the settings document has a default here, so a freshly
constructed Settings value is always complete.
"""

# Name of the document in the data store (written as texture_config.json)
DOCUMENT_NAME = "texture_config"

# --- Streaming ---
STREAMING_ENABLED = True
STREAMING_PRIORITY = "balanced"  # free-form, not validated
MAX_TEXTURE_SIZE = 1024  # pixels
MIP_BIAS = -1

# --- Critical textures ---
PRELOAD_CRITICAL_TEXTURES = True
CRITICAL_TEXTURES = (
    "ui/icons/player.png",
    "ui/icons/weapon.png",
    "environment/terrain/grass_diffuse.png",
)

# --- Async loading ---
ASYNC_LOADING_ENABLED = True
ASYNC_BATCH_SIZE = 4
ASYNC_DELAY_BETWEEN_BATCHES_MS = 50

# --- Cache ---
DISK_CACHE_ENABLED = True
CACHE_FOLDER = "oxide/data/texture_cache"
MAX_CACHE_SIZE_MB = 512

# --- Fallback ---
LOW_RES_PLACEHOLDER = True
PLACEHOLDER_COLOR = "#333333"

# --- Logging ---
DEBUG_LOGS_ENABLED = False
LOG_FILE = "oxide/logs/texture_loader.log"

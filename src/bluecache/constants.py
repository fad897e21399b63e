# --- Log and Debug ---
# Short aliases for module names to keep env vars concise
LOG_ALIAS_MAP = {
    "cache": "bluecache.cache",
    "store": "bluecache.cache.store",
    "proxy": "bluecache.cache.proxy",
    "pxy": "bluecache.cache.proxy",
    "abs": "bluecache.abstractions",
    "query": "bluecache.abstractions",
    "conf": "bluecache.config",
    "utils": "bluecache.utils",
}

# Top-level modules within bluecache for auto-prefixing
KNOWN_TOP_MODULES = {
    "cache",
    "utils",
    "config",
    "abstractions",
    "protocols",
    "exceptions",
}

LOG_LEVELS_ENV = "BLUECACHE_LOG_LEVELS"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# --- Filenames ---
DEFAULT_CONFIG_FILENAME = "bluecache.yml"

"""Module-level public functions over one default cache, directory and resolver."""

from arkstatus import config
from arkstatus.cache import SingleFlightCache
from arkstatus.directory import ServerDirectory
from arkstatus.fetch import fetch_uri
from arkstatus.resolver import ServerResolver

# === Default instances ===
CACHE = SingleFlightCache()
DIRECTORY = ServerDirectory()
RESOLVER = ServerResolver(DIRECTORY)

METADATA_URIS = (config.VERSION_URI, config.STATUS_URI, config.NEWS_URI)


# === Metadata ===
def get_version() -> str:
    """Latest server version, fetched now (e.g. '281.110')."""
    return fetch_uri(config.BASE_URI, config.VERSION_URI)


def get_cached_version():
    """Latest server version, or None if the cache is not ready yet."""
    return CACHE.get(config.BASE_URI, config.VERSION_URI)


def get_status() -> str:
    """Network status banner, fetched now. May contain ArkML <RichColor> markup."""
    return fetch_uri(config.BASE_URI, config.STATUS_URI)


def get_cached_status():
    return CACHE.get(config.BASE_URI, config.STATUS_URI)


def get_news() -> str:
    """Network news, fetched now. May contain ArkML markup."""
    return fetch_uri(config.BASE_URI, config.NEWS_URI)


def get_cached_news():
    return CACHE.get(config.BASE_URI, config.NEWS_URI)


def prime_caches():
    """Start warming every metadata endpoint without waiting for it."""
    for api_uri in METADATA_URIS:
        CACHE.get(config.BASE_URI, api_uri)


# === Live servers ===
def get_server_list(ips=None, ports=None):
    """Every server that answered, in completion order."""
    return DIRECTORY.get_server_list(ips, ports)


def get_server_info(name, host=None, port=None, fallback=True):
    """The live record for `name`, or None when no stage found it."""
    return RESOLVER.get_server_info(name, host=host, port=port, fallback=fallback)

"""Live status for the ARK: Survival Evolved official server network."""

from arkstatus.api import (
    get_cached_news,
    get_cached_status,
    get_cached_version,
    get_news,
    get_server_info,
    get_server_list,
    get_status,
    get_version,
    prime_caches,
)
from arkstatus.cache import SingleFlightCache
from arkstatus.config import VERSION as __version__
from arkstatus.directory import ServerDirectory
from arkstatus.query import QueryError, query_server
from arkstatus.resolver import ResolutionRequest, ServerResolver
from arkstatus.serverinfo import ArkPlayer, ArkServerInfo, QueryTarget

__all__ = [
    "ArkPlayer",
    "ArkServerInfo",
    "QueryError",
    "QueryTarget",
    "ResolutionRequest",
    "ServerDirectory",
    "ServerResolver",
    "SingleFlightCache",
    "get_cached_news",
    "get_cached_status",
    "get_cached_version",
    "get_news",
    "get_server_info",
    "get_server_list",
    "get_status",
    "get_version",
    "prime_caches",
    "query_server",
]

"""Settings for the official network endpoints and live queries."""

import os

# === USER CONFIG (edit me, or set the matching ARKSTATUS_* env var) ===

# Where the official server network publishes its metadata files.
BASE_URI = os.getenv("ARKSTATUS_BASE_URI", "http://arkdedicated.com").strip().rstrip("/")

# Metadata endpoints (beginning with '/', relative to BASE_URI)
VERSION_URI = "/version"
STATUS_URI = "/officialserverstatus.ini"
NEWS_URI = "/news.ini"
SERVER_LIST_URI = "/officialservers.ini"


def _parse_ports(raw: str):
    return tuple(int(p) for p in raw.split(",") if p.strip())


# Query ports on each server host
PORT_LIST = _parse_ports(os.getenv("ARKSTATUS_PORTS", "27015,27017,27019,27021"))

# Live query knobs
MAX_SERVER_ATTEMPTS = int(os.getenv("ARKSTATUS_MAX_ATTEMPTS", "3"))
QUERY_SOCKET_TIMEOUT = float(os.getenv("ARKSTATUS_QUERY_TIMEOUT", "1.5"))   # seconds per A2S request
QUERY_WORKERS = int(os.getenv("ARKSTATUS_QUERY_WORKERS", "64"))             # fan-out pool size

# Metadata fetch knobs
HTTP_TIMEOUT = float(os.getenv("ARKSTATUS_HTTP_TIMEOUT", "15"))
CACHE_WORKERS = 4

# Console output is always on at INFO; set True to also write DEBUG logs to debug.log (rotating).
DEBUG_LOG_ENABLED = os.getenv("ARKSTATUS_DEBUG_LOG", "").strip().lower() in ("1", "true", "yes")

VERSION = "1.0.0"
USER_AGENT = f"arkstatus/{VERSION}"

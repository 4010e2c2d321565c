"""Single-GET text fetch for the published metadata files."""

import requests
from requests.adapters import HTTPAdapter

from arkstatus import config

# === HTTP Session ===
SESSION = requests.Session()
SESSION.mount("https://", HTTPAdapter(pool_connections=4, pool_maxsize=8))
SESSION.mount("http://", HTTPAdapter(pool_connections=4, pool_maxsize=8))
SESSION.headers.update({"User-Agent": config.USER_AGENT})


def fetch_uri(base_uri: str, api_uri: str, *, timeout: float = config.HTTP_TIMEOUT) -> str:
    """GET base_uri + api_uri once and return the body text.

    Raises requests.RequestException on transport errors and requests.HTTPError
    on a non-2xx status. No retries here: callers decide whether to try again.
    """
    resp = SESSION.get(base_uri + api_uri, timeout=timeout)
    resp.raise_for_status()
    # requests falls back to ISO-8859-1 for text/* without a charset; the feed is UTF-8.
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    return resp.text

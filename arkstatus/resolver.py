"""Locate a named server from possibly stale host/port hints."""

from dataclasses import dataclass
from typing import Optional

from arkstatus.log import logger


@dataclass(frozen=True)
class ResolutionRequest:
    name: str
    host: Optional[str] = None
    port: Optional[int] = None
    fallback: bool = True

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("server name must be a non-empty string")
        if self.host is not None and not isinstance(self.host, str):
            raise TypeError(f"host hint must be a string, not {type(self.host).__name__}")
        # bool is an int subclass; a True/False port is always a mistake
        if self.port is not None and (isinstance(self.port, bool) or not isinstance(self.port, int)):
            raise TypeError(f"port hint must be an int, not {type(self.port).__name__}")


class ServerResolver:
    """Find one named server, trying the caller's location hints before a full scan.

    Stages, each run only while nothing has matched yet:

    1. hinted     -- whatever hints were given (no hints: this is the full scan)
    2. host-only  -- hinted host on every default port (fallback, both hints given)
    3. port-only  -- hinted port on every fleet host (fallback, both hints given)
    4. full scan  -- every fleet host and port (fallback, some hint given)
    """

    def __init__(self, directory):
        self.directory = directory

    def stages(self, request: ResolutionRequest):
        """(label, ips, ports) per stage in order; None means the directory's default."""
        host_ips = [request.host] if request.host is not None else None
        port_list = [request.port] if request.port is not None else None
        yield "hinted", host_ips, port_list
        if host_ips is None and port_list is None:
            return
        if not request.fallback:
            return
        if host_ips is not None and port_list is not None:
            yield "host-only", host_ips, None
            yield "port-only", None, port_list
        yield "full-scan", None, None

    def resolve(self, request: ResolutionRequest):
        for label, ips, ports in self.stages(request):
            records = self.directory.get_server_list(ips, ports)
            match = next((r for r in records if r.name == request.name), None)
            if match is not None:
                logger.info("[RESOLVE] %s found at %s:%s (%s stage)", request.name, match.host, match.port, label)
                return match
            logger.debug("[RESOLVE] %s not in %s stage (%s records)", request.name, label, len(records))
        logger.info("[RESOLVE] %s not found", request.name)
        return None

    def get_server_info(self, name: str, host: Optional[str] = None, port: Optional[int] = None,
                        fallback: bool = True):
        return self.resolve(ResolutionRequest(name, host, port, fallback))

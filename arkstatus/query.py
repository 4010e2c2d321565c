"""One A2S query against one host:port, with a bounded attempt budget."""

import a2s

from arkstatus import config
from arkstatus.log import logger
from arkstatus.serverinfo import ArkServerInfo, QueryTarget


class QueryError(Exception):
    """A target gave no usable answer within its attempt budget."""

    def __init__(self, target: QueryTarget, attempts: int):
        super().__init__(f"no answer from {target} after {attempts} attempt(s)")
        self.target = target
        self.attempts = attempts


def query_server(target: QueryTarget, *, max_attempts: int = config.MAX_SERVER_ATTEMPTS,
                 socket_timeout: float = config.QUERY_SOCKET_TIMEOUT) -> ArkServerInfo:
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    addr = (target.host, target.port)
    last_error = None
    for attempt in range(1, max_attempts + 1):
        try:
            info = a2s.info(addr, timeout=socket_timeout)
            players = a2s.players(addr, timeout=socket_timeout)
        except Exception as e:
            last_error = e
            logger.debug("[QUERY] %s attempt %s/%s failed: %s", target, attempt, max_attempts, e)
            continue

        # Rules only feed day/mode; a server that won't answer them is still up.
        try:
            rules = a2s.rules(addr, timeout=socket_timeout)
        except Exception as e:
            logger.debug("[QUERY] %s rules unavailable: %s", target, e)
            rules = None
        return ArkServerInfo.from_a2s(target, info, players, rules)

    raise QueryError(target, max_attempts) from last_error

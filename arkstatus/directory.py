"""Concurrent live queries across every official host and port."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from itertools import product

from arkstatus import config
from arkstatus.fetch import fetch_uri
from arkstatus.log import logger
from arkstatus.query import query_server
from arkstatus.serverinfo import QueryTarget


class ServerDirectory:
    """Fan-out of live queries over the official fleet.

    A target that fails or times out simply contributes nothing; the only
    error that escapes is the server-list fetch when no IPs were given.
    """

    def __init__(self, fetch=fetch_uri, query=query_server, *, base_uri: str = config.BASE_URI,
                 ports=config.PORT_LIST, max_workers: int = config.QUERY_WORKERS):
        self.fetch = fetch
        self.query = query
        self.base_uri = base_uri
        self.ports = tuple(ports)
        self.max_workers = max_workers

    def list_candidate_ips(self):
        server_list = self.fetch(self.base_uri, config.SERVER_LIST_URI)
        ips = []
        for line in server_list.splitlines():
            tokens = line.split()
            if tokens:
                ips.append(tokens[0])
        return ips

    def build_targets(self, ips=None, ports=None):
        if ips is None:
            ips = self.list_candidate_ips()
        if ports is None:
            ports = self.ports
        return [QueryTarget(ip, port) for ip, port in product(ips, ports)]

    def query_all(self, targets):
        targets = list(targets)
        if not targets:
            return []
        records = []
        workers = max(1, min(self.max_workers, len(targets)))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="arkstatus-query") as pool:
            futures = {pool.submit(self.query, target): target for target in targets}
            for future in as_completed(futures):
                try:
                    records.append(future.result())
                except Exception as e:
                    logger.debug("[QUERY] %s dropped: %s", futures[future], e)
        logger.info("[SCAN] %s/%s targets answered", len(records), len(targets))
        return records

    def get_server_list(self, ips=None, ports=None):
        return self.query_all(self.build_targets(ips, ports))

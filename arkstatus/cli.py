"""The `arkstatus` command: players, find and news."""

from typing import List, Optional

from jsonargparse import CLI

from arkstatus import api, config
from arkstatus.log import configure_logging

DEFAULT_SERVERS = ["NA-PVE-Official-Aberration409"]


def duration_as_string(seconds) -> str:
    minutes = int(seconds // 60)
    return f"{minutes // 60}h{minutes % 60}m"


def format_server(info) -> List[str]:
    lines = [
        f"Server {info.name}, running {info.version}",
        f"  Address: {info.host}:{info.port}",
        f"  Map: {info.map} ({info.mode}) - day {info.day_number}",
        f"  Max players: {info.max_players}",
        f"  Currently online players ({len(info.players)}):",
    ]
    for player in info.players:
        lines.append(f"    {player.steam_name}: on {duration_as_string(player.elapsed_time)}")
    return lines


def players(servers: Optional[List[str]] = None):
    """Scan the whole fleet and show who is online on the named servers.

    Args:
        servers: Server names to report on.
    """
    wanted = servers or DEFAULT_SERVERS
    infos = api.get_server_list()
    print(f"Total {len(infos)} servers found.")
    found = 0
    for info in infos:
        if info.name in wanted:
            found += 1
            print("\n".join(format_server(info)))
    if found == 0:
        print("No matching server(s) found.")


def find(name: str, host: Optional[str] = None, port: Optional[int] = None, fallback: bool = True):
    """Locate one server, trying the given location first.

    Args:
        name: Server name as shown in the in-game browser.
        host: Last known host IP.
        port: Last known query port.
        fallback: Widen the search when the hints are stale.
    """
    info = api.get_server_info(name, host=host, port=port, fallback=fallback)
    if info is None:
        print(f"Server {name} not found.")
        return
    print("\n".join(format_server(info)))


def news():
    """Show the published version, network status and news."""
    api.prime_caches()
    api.CACHE.wait(timeout=config.HTTP_TIMEOUT)
    for label, value in (("Version", api.get_cached_version()),
                         ("Status", api.get_cached_status()),
                         ("News", api.get_cached_news())):
        print(f"{label}: {value.strip() if value is not None else '(unavailable)'}")


def main(args=None):
    configure_logging()
    CLI([players, find, news], args=args)


if __name__ == "__main__":
    main()

"""Tests for the bounded-attempt A2S query."""

import socket
from types import SimpleNamespace

import a2s
import pytest

from arkstatus.query import QueryError, query_server
from arkstatus.serverinfo import QueryTarget

TARGET = QueryTarget("1.2.3.4", 27015)
INFO = SimpleNamespace(server_name="Srv-A - (v281.110)", map_name="TheIsland", max_players=70,
                       password_protected=False)


class FakeA2S:
    """Scripted a2s.info/players/rules; an Exception in a script is raised instead of returned."""

    def __init__(self, info=(), players=(), rules=()):
        self.scripts = {"info": list(info), "players": list(players), "rules": list(rules)}
        self.calls = []

    def install(self, monkeypatch) -> None:
        for kind in self.scripts:
            monkeypatch.setattr(a2s, kind, self._responder(kind))

    def _responder(self, kind):
        def respond(address, timeout=None, **kwargs):
            self.calls.append((kind, address, timeout))
            result = self.scripts[kind].pop(0)
            if isinstance(result, Exception):
                raise result
            return result
        return respond


class TestQueryServer:
    def test_first_attempt_succeeds(self, monkeypatch) -> None:
        fake = FakeA2S(info=[INFO], players=[[]], rules=[{"SESSIONISPVE_i": "1"}])
        fake.install(monkeypatch)
        info = query_server(TARGET, socket_timeout=0.5)
        assert info.name == "Srv-A"
        assert info.mode == "PVE"
        assert fake.calls[0] == ("info", ("1.2.3.4", 27015), 0.5)

    def test_retries_until_success(self, monkeypatch) -> None:
        fake = FakeA2S(info=[socket.timeout("t"), socket.timeout("t"), INFO], players=[[]], rules=[{}])
        fake.install(monkeypatch)
        assert query_server(TARGET, max_attempts=3).name == "Srv-A"
        assert [c[0] for c in fake.calls].count("info") == 3

    def test_player_failure_counts_as_attempt(self, monkeypatch) -> None:
        fake = FakeA2S(info=[INFO, INFO], players=[OSError("reset"), []], rules=[{}])
        fake.install(monkeypatch)
        assert query_server(TARGET, max_attempts=2).name == "Srv-A"

    def test_gives_up_after_max_attempts(self, monkeypatch) -> None:
        fake = FakeA2S(info=[socket.timeout("t1"), socket.timeout("t2")])
        fake.install(monkeypatch)
        with pytest.raises(QueryError) as excinfo:
            query_server(TARGET, max_attempts=2)
        assert excinfo.value.target == TARGET
        assert excinfo.value.attempts == 2
        assert isinstance(excinfo.value.__cause__, socket.timeout)

    def test_rules_failure_is_not_fatal(self, monkeypatch) -> None:
        fake = FakeA2S(info=[INFO], players=[[]], rules=[socket.timeout("t")])
        fake.install(monkeypatch)
        info = query_server(TARGET)
        assert info.name == "Srv-A"
        assert info.mode is None
        assert info.day_number is None

    def test_rejects_zero_attempts(self) -> None:
        with pytest.raises(ValueError):
            query_server(TARGET, max_attempts=0)

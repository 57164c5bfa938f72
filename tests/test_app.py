"""Tests for DevServer — construction, ASGI surface, and lifecycle."""

import pytest

from livedev.app import DevServer
from livedev.client import ReloadClient
from livedev.config import ServerConfig
from livedev.errors import ConfigurationError
from livedev.middleware.access_log import AccessLog
from livedev.middleware.static import StaticFiles


@pytest.fixture
def site(tmp_path):
    (tmp_path / "public").mkdir()
    (tmp_path / "public" / "index.html").write_text("<h1>Hi</h1>")
    return tmp_path


class TestConstruction:
    def test_defaults(self, site, monkeypatch) -> None:
        monkeypatch.chdir(site)
        server = DevServer()

        assert server.config == ServerConfig(base_dir=server.config.base_dir)
        assert server.resolver.root == server.config.content_root
        assert server.channel.port == 6800
        assert server.channel.host == "127.0.0.1"

    def test_missing_client_script_fails_fast(self, site) -> None:
        config = ServerConfig(base_dir=site, client_script=site / "missing.js")
        with pytest.raises(ConfigurationError):
            DevServer(config)

    def test_injected_client_shared_with_resolver(self, site) -> None:
        client = ReloadClient("x()")
        server = DevServer(ServerConfig(base_dir=site), client=client)

        assert server.client is client
        assert server.resolver.client is client

    def test_resolver_uses_config(self, site) -> None:
        config = ServerConfig(base_dir=site, index="home.html", max_index_depth=1)
        server = DevServer(config, client=ReloadClient(""))

        assert server.resolver.index == "home.html"
        assert server.resolver.max_depth == 1

    def test_middleware_order(self, site) -> None:
        server = DevServer(ServerConfig(base_dir=site), client=ReloadClient(""))

        assert isinstance(server.middleware[0], AccessLog)
        assert isinstance(server.middleware[1], StaticFiles)

    def test_servers_do_not_share_state(self, site) -> None:
        a = DevServer(ServerConfig(base_dir=site), client=ReloadClient("a()"))
        b = DevServer(ServerConfig(base_dir=site), client=ReloadClient("b()"))

        assert a.channel is not b.channel
        assert a.client.code != b.client.code

    def test_bundled_script_follows_push_port(self, site) -> None:
        server = DevServer(ServerConfig(base_dir=site, push_port=7001))

        assert server.channel.port == 7001
        assert ":7001" in server.client.code
        assert ":6800" not in server.client.code


class TestBroadcast:
    def test_delegates_to_channel(self, site, monkeypatch) -> None:
        server = DevServer(ServerConfig(base_dir=site), client=ReloadClient(""))
        calls: list[str] = []

        def fake_broadcast(message: str = "reload") -> int:
            calls.append(message)
            return 3

        monkeypatch.setattr(server.channel, "broadcast_reload", fake_broadcast)
        assert server.broadcast_reload() == 3
        assert calls == ["reload"]


class TestASGI:
    async def test_lifespan(self, site) -> None:
        server = DevServer(ServerConfig(base_dir=site), client=ReloadClient(""))
        incoming = iter([{"type": "lifespan.startup"}, {"type": "lifespan.shutdown"}])
        sent: list[dict] = []

        async def receive() -> dict:
            return next(incoming)

        async def send(message: dict) -> None:
            sent.append(message)

        await server({"type": "lifespan"}, receive, send)
        assert sent == [
            {"type": "lifespan.startup.complete"},
            {"type": "lifespan.shutdown.complete"},
        ]

    async def test_websocket_scope_is_closed(self, site) -> None:
        server = DevServer(ServerConfig(base_dir=site), client=ReloadClient(""))
        sent: list[dict] = []

        async def receive() -> dict:
            return {"type": "websocket.connect"}

        async def send(message: dict) -> None:
            sent.append(message)

        await server({"type": "websocket", "path": "/"}, receive, send)
        assert sent == [{"type": "websocket.close", "code": 1000}]


class TestServe:
    async def test_channel_open_while_http_serves(self, site, monkeypatch) -> None:
        config = ServerConfig(base_dir=site, push_port=0, http_port=6701)
        server = DevServer(config, client=ReloadClient(""))
        seen: dict[str, object] = {}

        async def fake_serve_http(app, host, port, *, log_level="info") -> None:
            seen.update(app=app, host=host, port=port, log_level=log_level)
            seen["serving"] = server.channel.is_serving

        monkeypatch.setattr("livedev.server.dev.serve_http", fake_serve_http)
        monkeypatch.setattr("livedev.server.dev.configure_logging", lambda level: seen.update(level=level))
        await server.serve()

        assert seen == {
            "app": server,
            "host": "127.0.0.1",
            "port": 6701,
            "log_level": "info",
            "level": "info",
            "serving": True,
        }
        assert not server.channel.is_serving

    def test_run_uses_anyio(self, site, monkeypatch) -> None:
        server = DevServer(ServerConfig(base_dir=site), client=ReloadClient(""))
        ran: list[object] = []

        monkeypatch.setattr("livedev.app.anyio.run", lambda func: ran.append(func))
        server.run()
        assert ran == [server.serve]

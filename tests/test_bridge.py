"""
End-to-end tests for the stdio bridge.

Lines go in through a StringIO, responses come out of another; the HTTP
client is a double so no knowledge base is needed.
"""

import io
import json
import threading

import pytest

from conftest import respond, sent_request
from nexmemory.bridge import BridgeServer, build_server
from nexmemory.bridge.transport import LineWriter, decode_line, encode_response, iter_lines
from nexmemory.exceptions import EnvelopeDecodeError
from nexmemory.models import JsonRpcResponse
from nexmemory.utils.http_client import HttpResponse


def run_bridge(server: BridgeServer, *lines: str) -> list[str]:
    """Feed lines to the bridge and return the raw output lines."""
    output = io.StringIO()
    server.serve(io.StringIO("".join(line + "\n" for line in lines)), output)
    return output.getvalue().splitlines()


@pytest.fixture
def server(config, http_client) -> BridgeServer:
    return build_server(config, http_client)


# =============================================================================
# Transport Codec
# =============================================================================


class TestTransport:
    """Tests for line decoding and encoding."""

    def test_decode_request(self):
        request = decode_line('{"jsonrpc":"2.0","method":"tools/call","params":{"name":"get_entity"},"id":"x"}')
        assert request.method == "tools/call"
        assert request.params == {"name": "get_entity"}
        assert request.id == "x"
        assert request.is_notification is False

    def test_absent_id_is_notification(self):
        assert decode_line('{"jsonrpc":"2.0","method":"notifications/initialized"}').is_notification is True

    def test_null_id_is_not_notification(self):
        request = decode_line('{"jsonrpc":"2.0","method":"ping","id":null}')
        assert request.is_notification is False
        assert request.id is None

    @pytest.mark.parametrize("line", ["{not json", "[1, 2]", "42", "[" * 100000, '{"method": "ping", "id": [1]}'])
    def test_decode_failures(self, line):
        with pytest.raises(EnvelopeDecodeError):
            decode_line(line)

    def test_wrongly_typed_fields_still_decode(self):
        """method and params types are left for the router to judge."""
        request = decode_line('{"jsonrpc":"2.0","method":5,"params":[],"id":1}')
        assert request.method == 5
        assert request.params == []
        assert request.id == 1

    def test_encode_is_compact(self):
        assert encode_response(JsonRpcResponse.success(1, {})) == '{"jsonrpc":"2.0","id":1,"result":{}}'

    def test_encode_error(self):
        line = encode_response(JsonRpcResponse.failure(None, -32700, "Parse error: x"))
        assert line == '{"jsonrpc":"2.0","id":null,"error":{"code":-32700,"message":"Parse error: x"}}'

    def test_iter_lines_skips_blanks(self):
        stream = io.StringIO('\n  \n{"a":1}\n\n{"b":2}\n')
        assert list(iter_lines(stream)) == ['{"a":1}', '{"b":2}']

    def test_line_writer_one_line_per_envelope(self):
        output = io.StringIO()
        writer = LineWriter(output)
        writer.write(JsonRpcResponse.success(1, {}))
        writer.write(JsonRpcResponse.success(2, {}))
        assert output.getvalue().count("\n") == 2


# =============================================================================
# Bridge Server
# =============================================================================


class TestBridgeServer:
    """Tests for the full read-dispatch-write loop."""

    def test_ping(self, server):
        assert run_bridge(server, '{"jsonrpc":"2.0","method":"ping","id":1}') == [
            '{"jsonrpc":"2.0","id":1,"result":{}}'
        ]

    def test_delete_entity(self, server, http_client):
        respond(http_client, 204)
        lines = run_bridge(
            server,
            '{"jsonrpc":"2.0","method":"tools/call","params":{"name":"delete_entity","arguments":{"id":"abc"}},"id":2}',
        )

        response = json.loads(lines[0])
        assert response["id"] == 2
        assert response["result"]["content"][0]["text"] == "Entity abc deleted successfully"
        assert response["result"]["isError"] is False
        assert sent_request(http_client).method == "DELETE"
        assert sent_request(http_client).path == "/api/entities/abc"

    def test_parse_error_then_continues(self, server):
        lines = run_bridge(server, "{oops", '{"jsonrpc":"2.0","method":"ping","id":5}')

        assert len(lines) == 2
        error = json.loads(lines[0])
        assert error["id"] is None
        assert error["error"]["code"] == -32700
        assert error["error"]["message"].startswith("Parse error:")
        assert json.loads(lines[1]) == {"jsonrpc": "2.0", "id": 5, "result": {}}

    def test_notifications_never_answered(self, server):
        lines = run_bridge(
            server,
            '{"jsonrpc":"2.0","method":"notifications/initialized"}',
            '{"jsonrpc":"2.0","method":"ping"}',
            '{"jsonrpc":"1.0","method":"unknown"}',
        )
        assert lines == []

    def test_blank_lines_ignored(self, server):
        lines = run_bridge(server, "", "   ", '{"jsonrpc":"2.0","method":"ping","id":1}')
        assert len(lines) == 1

    def test_null_id_answered(self, server):
        lines = run_bridge(server, '{"jsonrpc":"2.0","method":"ping","id":null}')
        assert json.loads(lines[0]) == {"jsonrpc": "2.0", "id": None, "result": {}}

    def test_wrong_version_echoes_id(self, server):
        lines = run_bridge(server, '{"jsonrpc":"1.0","method":"ping","id":"req-1"}')
        response = json.loads(lines[0])
        assert response["id"] == "req-1"
        assert response["error"]["code"] == -32600

    def test_deeply_nested_line_then_continues(self, server):
        """JSON too deep to decode is a parse error, not a crash."""
        lines = run_bridge(server, "[" * 100000, '{"jsonrpc":"2.0","method":"ping","id":6}')

        assert len(lines) == 2
        error = json.loads(lines[0])
        assert error["id"] is None
        assert error["error"]["code"] == -32700
        assert json.loads(lines[1]) == {"jsonrpc": "2.0", "id": 6, "result": {}}

    def test_wrongly_typed_notification_not_answered(self, server):
        lines = run_bridge(
            server,
            '{"jsonrpc":"2.0","method":5}',
            '{"jsonrpc":"2.0","method":"tools/call","params":[]}',
        )
        assert lines == []

    def test_wrong_version_with_typed_fields_echoes_id(self, server):
        lines = run_bridge(server, '{"jsonrpc":"1.0","method":5,"id":3}')
        assert json.loads(lines[0]) == {
            "jsonrpc": "2.0",
            "id": 3,
            "error": {"code": -32600, "message": "Invalid JSON-RPC version"},
        }

    def test_non_string_method_is_method_not_found(self, server):
        lines = run_bridge(server, '{"jsonrpc":"2.0","method":["ping"],"id":"m"}')
        response = json.loads(lines[0])
        assert response["id"] == "m"
        assert response["error"]["code"] == -32601

    def test_non_object_params_is_invalid_params(self, server):
        lines = run_bridge(server, '{"jsonrpc":"2.0","method":"tools/call","params":[1],"id":4}')
        response = json.loads(lines[0])
        assert response["id"] == 4
        assert response["error"]["code"] == -32602

    def test_session(self, server, http_client):
        """initialize, list, call and ping in one stream are all answered."""
        respond(http_client, 404)
        lines = run_bridge(
            server,
            '{"jsonrpc":"2.0","method":"initialize","params":{},"id":1}',
            '{"jsonrpc":"2.0","method":"notifications/initialized"}',
            '{"jsonrpc":"2.0","method":"tools/list","id":2}',
            '{"jsonrpc":"2.0","method":"tools/call","params":{"name":"get_entity","arguments":{"id":"zzz"}},"id":3}',
            '{"jsonrpc":"2.0","method":"ping","id":4}',
        )

        responses = {r["id"]: r for r in map(json.loads, lines)}
        assert set(responses) == {1, 2, 3, 4}
        assert responses[1]["result"]["serverInfo"]["name"] == "nexmemory-mcp"
        assert len(responses[2]["result"]["tools"]) == 11
        assert responses[3]["result"]["isError"] is True
        assert responses[3]["result"]["content"][0]["text"] == "Entity not found: zzz"

    def test_slow_call_does_not_block_next_request(self, config, http_client):
        """A pending HTTP call lets later requests be answered first."""
        second_written = threading.Event()

        class WatchingOutput(io.StringIO):
            def write(self, text):
                written = super().write(text)
                if '"id":2' in text:
                    second_written.set()
                return written

        def slow_send(request):
            if request.path.endswith("/slow"):
                second_written.wait(timeout=5)
            return HttpResponse(status=200, body='{"id": "x"}')

        http_client.send.side_effect = slow_send
        server = BridgeServer(build_server(config, http_client).router, max_workers=2)
        output = WatchingOutput()
        server.serve(
            io.StringIO(
                '{"jsonrpc":"2.0","method":"tools/call","params":{"name":"get_entity","arguments":{"id":"slow"}},"id":1}\n'
                '{"jsonrpc":"2.0","method":"ping","id":2}\n'
            ),
            output,
        )

        ids = [json.loads(line)["id"] for line in output.getvalue().splitlines()]
        assert ids == [2, 1]


class TestMain:
    """Tests for the bridge entry point."""

    def test_main_serves_stdin(self, monkeypatch, capsys):
        from nexmemory.bridge import server as server_module

        monkeypatch.setenv("NEXMEMORY_API_URL", "http://kb.test:3000/api")
        monkeypatch.setattr(server_module, "_install_signal_handlers", lambda: None)
        monkeypatch.setattr("sys.stdin", io.StringIO('{"jsonrpc":"2.0","method":"ping","id":1}\n'))

        server_module.main()

        assert capsys.readouterr().out == '{"jsonrpc":"2.0","id":1,"result":{}}\n'

    def test_main_rejects_bad_url(self, monkeypatch, capsys):
        from nexmemory.bridge import server as server_module

        monkeypatch.setenv("NEXMEMORY_API_URL", "ftp://kb.test")

        with pytest.raises(SystemExit) as exc_info:
            server_module.main()

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuration error" in captured.err

import json
import logging
import socket
import tempfile
import threading
import unittest
import urllib.error
import urllib.request
from pathlib import Path

from websockets.sync.client import connect

from server import UIServer, UIServerConfig

_QUIET = logging.getLogger("test.ui_server")
_QUIET.addHandler(logging.NullHandler())
_QUIET.propagate = False


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


class UIServerRoundTripTests(unittest.TestCase):
    def setUp(self) -> None:
        self._temp_dir = tempfile.TemporaryDirectory()
        root = Path(self._temp_dir.name)
        (root / "index.html").write_text("<html>timer</html>", encoding="utf-8")
        (root / "style.css").write_text("body {}", encoding="utf-8")

        self.commands: list[str] = []
        self.received = threading.Event()
        self.port = _free_port()
        self.server = UIServer(
            UIServerConfig(port=self.port, index_file=str(root / "index.html")),
            logger=_QUIET,
            on_command=self._on_command,
        )

    def tearDown(self) -> None:
        self.server.stop()
        self._temp_dir.cleanup()

    def _on_command(self, raw: str) -> None:
        self.commands.append(raw)
        self.received.set()

    def _get(self, path: str) -> tuple[int, bytes]:
        url = f"http://127.0.0.1:{self.port}{path}"
        try:
            with urllib.request.urlopen(url, timeout=5) as response:
                return response.status, response.read()
        except urllib.error.HTTPError as error:
            return error.code, error.read()

    def test_serves_index_health_and_static_files(self) -> None:
        self.server.start()

        self.assertEqual((200, b"<html>timer</html>"), self._get("/"))
        self.assertEqual((200, b"ok\n"), self._get("/healthz"))
        self.assertEqual((200, b"body {}"), self._get("/style.css"))
        self.assertEqual(404, self._get("/missing.js")[0])

    def test_new_client_gets_hello_then_sticky_state(self) -> None:
        self.server.publish("pomodoro", run_state="idle", remaining_seconds=1500)
        self.server.publish("settings", work_minutes=25)
        self.server.publish("error", message="Settings applied but not saved")
        self.server.publish("notification", title="not replayed")
        self.server.forget("error")
        self.server.start()

        with connect(f"ws://127.0.0.1:{self.port}/ws", open_timeout=5) as websocket:
            types = [json.loads(websocket.recv(timeout=5))["type"] for _ in range(3)]
            self.assertEqual(["hello", "settings", "pomodoro"], types)

            self.server.publish("notification", title="It's Break Time")
            self.assertEqual("notification", json.loads(websocket.recv(timeout=5))["type"])

            websocket.send(json.dumps({"command": "start"}))
            self.assertTrue(self.received.wait(timeout=5))

        self.assertEqual([json.dumps({"command": "start"})], self.commands)


if __name__ == "__main__":
    unittest.main()

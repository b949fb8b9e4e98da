from __future__ import annotations

"""
Simple TCP REPL server for ListScript.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "def x 10"}
- Response: {"ok": true, "results": [<display strings>], "output": <write output>}
            or {"ok": false, "error": <message>}

The server keeps a single Interpreter alive so that definitions persist
across requests and connections.
"""

import io
import json
import logging
import socket
import threading
from typing import Tuple

from listscript.interpreter import Interpreter
from listscript.printer import to_display
from listscript.types.errors import ListScriptSyntaxError


HOST = "127.0.0.1"
PORT = 8765

logger = logging.getLogger(__name__)


class ReplServer:
    def __init__(self, host: str = HOST, port: int = PORT, interp: Interpreter | None = None):
        self.host = host
        self.port = port
        # Keep a single interpreter to maintain session state
        self.interp = interp if interp is not None else Interpreter()
        self._lock = threading.Lock()

    def handle_request(self, req: dict) -> dict:
        if req.get("cmd") != "eval":
            return {"ok": False, "error": f"Unknown cmd: {req.get('cmd')}"}
        code = req.get("code", "")
        if not isinstance(code, str):
            return {"ok": False, "error": "code must be a string"}

        output = io.StringIO()
        # One interpreter, many client threads: evaluate one request at a time
        with self._lock:
            self.interp.context.out = output
            try:
                results = []
                for line in code.splitlines():
                    results.extend(self.interp.eval_line(line))
            except ListScriptSyntaxError as ex:
                return {"ok": False, "error": f"Parse error: {ex}", "output": output.getvalue()}
            finally:
                self.interp.context.out = None
        return {"ok": True, "results": [to_display(v) for v in results], "output": output.getvalue()}

    def handle_line(self, line: bytes) -> dict:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        return self.handle_request(req)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            buf = b""
            while True:
                data = conn.recv(4096)
                if not data:
                    break
                buf += data
                while b"\n" in buf:
                    line, buf = buf.split(b"\n", 1)
                    line = line.strip()
                    if not line:
                        continue
                    resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()

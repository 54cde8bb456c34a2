import os
import threading
from typing import Iterator

import pytest
from flask import Flask, Response, jsonify
from werkzeug.serving import make_server

# Ensure predictable environment before importing the package
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_TO_FILE", "0")
os.environ.setdefault("HTTP_TIMEOUT_SECONDS", "5")


def create_stub_app() -> Flask:
    """Fixture endpoints for the HTTP data source."""
    app = Flask(__name__)

    @app.route("/lines")
    def lines():
        return jsonify(["x", "y"])

    @app.route("/empty")
    def empty():
        return jsonify([])

    @app.route("/object")
    def obj():
        return jsonify({"bad": 1})

    @app.route("/numbers")
    def numbers():
        return jsonify([1, 2])

    @app.route("/garbage")
    def garbage():
        return Response("not json", mimetype="text/plain")

    @app.route("/boom")
    def boom():
        return Response("oops", status=500)

    return app


@pytest.fixture(scope="session")
def stub_server_url() -> Iterator[str]:
    """Serve the stub app on an ephemeral port in a background thread."""
    server = make_server("127.0.0.1", 0, create_stub_app())
    th = threading.Thread(target=server.serve_forever, name="stub-http-server", daemon=True)
    th.start()
    try:
        yield f"http://127.0.0.1:{server.server_port}"
    finally:
        server.shutdown()
        th.join(timeout=5)


@pytest.fixture
def lines_file(tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("a\nb\nc", encoding="utf-8")
    return path

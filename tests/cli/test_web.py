"""Tests for 'taskpilot web'."""

import importlib
from argparse import Namespace

# taskpilot.cli re-exports the handler under the same name as its module
web_module = importlib.import_module("taskpilot.cli.web")


class RecordingServer:
    instances = []

    def __init__(self, command, host, port, title):
        self.command = command
        self.host = host
        self.port = port
        self.title = title
        self.served = False
        RecordingServer.instances.append(self)

    def serve(self):
        self.served = True


def test_web_not_on_path(monkeypatch, capsys):
    monkeypatch.setattr(web_module.shutil, "which", lambda name: None)
    args = Namespace(config=None, json=False, host="localhost", port=8617)
    assert web_module.web(args) == 1
    assert "not found on PATH" in capsys.readouterr().err


def test_web_serves_tui_command(monkeypatch, capsys):
    monkeypatch.setattr(web_module.shutil, "which", lambda name: "/usr/bin/taskpilot")
    monkeypatch.setattr(web_module, "Server", RecordingServer)
    RecordingServer.instances.clear()

    args = Namespace(config="/tmp/my config.yaml", json=False, host="0.0.0.0", port=9000)
    assert web_module.web(args) == 0

    server = RecordingServer.instances[0]
    assert server.command == "/usr/bin/taskpilot --config '/tmp/my config.yaml'"
    assert (server.host, server.port, server.title) == ("0.0.0.0", 9000, "taskpilot")
    assert server.served
    assert "http://0.0.0.0:9000" in capsys.readouterr().out

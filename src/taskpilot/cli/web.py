"""Handler for 'taskpilot web' command."""

import shlex
import shutil
import sys

from textual_serve.server import Server


def web(args) -> int:
    taskpilot = shutil.which("taskpilot")
    if taskpilot is None:
        print("error: taskpilot not found on PATH", file=sys.stderr)
        return 1

    command = shlex.join([taskpilot, "--config", args.config]) if args.config else shlex.quote(taskpilot)
    server = Server(
        command,
        host=args.host,
        port=args.port,
        title="taskpilot",
    )

    print(f"serving taskpilot at http://{args.host}:{args.port}")
    server.serve()
    return 0

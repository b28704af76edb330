"""Entry point for taskpilot CLI."""

import sys

from taskpilot.cli import build_parser


def main():
    parser = build_parser()
    args = parser.parse_args()

    if getattr(args, "func", None) is None:
        if args.noun is not None:
            parser.parse_args([args.noun, "--help"])
            sys.exit(1)

        # No subcommand = TUI mode
        from taskpilot.cli._common import load_store_or_die
        from taskpilot.ui import TaskPilotApp

        store = load_store_or_die(args.config, args.json, log=False)
        TaskPilotApp(store).run()
        return

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()

"""Entry point for the finput demo app."""

import logging
import sys

from textual.logging import TextualHandler

from finput.app import FinputApp
from finput.config import parse_args, resolve_options
from finput.errors import OptionsError


def main() -> None:
    """Run the finput demo application."""
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), handlers=[TextualHandler()])
    try:
        options = resolve_options(args)
    except OptionsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    app = FinputApp(options=options, value=args.value)
    app.run()


if __name__ == "__main__":
    main()

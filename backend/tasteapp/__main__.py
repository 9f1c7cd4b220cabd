from __future__ import annotations

import argparse
import logging

from . import create_app
from .errors import ConfigurationError
from .services.auth_service import build_authorize_url


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Spotify taste workshop server")
    parser.add_argument("--config", default=None, help="development, production or testing")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument(
        "--print-auth-url",
        action="store_true",
        help="print the Spotify consent URL and exit",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app(args.config)

    if args.print_auth_url:
        try:
            print(build_authorize_url(app.config))
        except ConfigurationError as err:
            parser.exit(1, f"{err.message}\n")
        return

    for rule in app.url_map.iter_rules():
        app.logger.info("route %s -> endpoint=%s methods=%s", rule, rule.endpoint, sorted(rule.methods))

    app.run(
        host=args.host or app.config["HOST"],
        port=args.port or app.config["PORT"],
        debug=app.config["DEBUG"],
    )


if __name__ == "__main__":
    main()

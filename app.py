"""Entry point for the WS-Dottie proxy server.

Builds the Flask application that serves every WSDOT / WSF endpoint as
JSON (with CORS headers the upstream servers do not send) and starts it
under waitress, or the Flask development server with --dev.
"""

import logging

from flask import Flask
from flask_cors import CORS  # Browser clients call the proxy cross-origin
from waitress import serve  # Production WSGI server

import apis
from apis import api
from wsdottie.config.settings import FETCH_STRATEGIES, LOG_MODES, configure, get_config
from wsdottie.core.cache import QueryCache


def create_app(config_module=None, log_level="INFO", client=None):
    """Build the proxy application.

    Args:
        config_module: Flask configuration module (defaults to "config")
        log_level: Root logging level name (defaults to "INFO")
        client: WsdotClient the proxy fetches through; the process default
            client is used when omitted

    Returns:
        Flask: Configured Flask application instance
    """
    module = config_module or "config"
    print(f"[APP] Building WS-Dottie proxy - config: {module}, log level: {log_level}")

    app = Flask(__name__)
    logging.basicConfig(level=getattr(logging, log_level.upper()))
    app.config.from_object(module)

    if client is not None:
        # Fresh cache so results fetched through another client are not reused
        apis.query_cache = QueryCache(client)
        print(f"[APP] Proxy client: {client!r}")

    api_key = client.config.api_key if client is not None else get_config().api_key
    if not api_key:
        print("[APP] Warning: WSDOT_ACCESS_TOKEN is not set; proxied calls will fail with API_ERROR")

    # /echo, /up, /endpoints and one namespace per API family
    api.init_app(app)
    print("[APP] Routes registered - Swagger UI at /docs")

    CORS(
        app,
        resources={r"/*": {"origins": "*", "methods": ["GET", "OPTIONS"]}},
        send_wildcard=True,
        allow_headers=["Content-Type", "Authorization"],
    )
    print("[APP] Proxy ready")
    return app


def main(argv=None):
    """Parse server options, apply library settings, and serve."""
    from argparse import ArgumentParser

    parser = ArgumentParser(description="Serve the WSDOT / WSF APIs through a JSON proxy")
    parser.add_argument("-P", "--port", default=5000, type=int, help="Port to listen on")
    parser.add_argument("-H", "--host", default="0.0.0.0", type=str, help="Host to bind to")
    parser.add_argument(
        "-L",
        "--loglevel",
        default="INFO",
        type=str,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--access-token",
        help="WSDOT access code (overrides WSDOT_ACCESS_TOKEN)",
    )
    parser.add_argument(
        "--fetch-strategy",
        choices=FETCH_STRATEGIES,
        help="How upstream responses are fetched (overrides WSDOT_FETCH_STRATEGY)",
    )
    parser.add_argument(
        "--log-mode",
        choices=LOG_MODES,
        help="Per-request library logging (overrides WSDOT_LOG_MODE)",
    )
    parser.add_argument("--dev", action="store_true", help="Flask development server with hot reload")
    args = parser.parse_args(argv)

    overrides = {
        "api_key": args.access_token,
        "fetch_strategy": args.fetch_strategy,
        "log_mode": args.log_mode,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        configure(**overrides)
        print(f"[APP] Library settings overridden: {', '.join(sorted(overrides))}")

    flask_app = create_app(log_level=args.loglevel)
    print(f"[APP] Listening on http://{args.host}:{args.port} (docs at /docs)")

    if args.dev:
        flask_app.run(host=args.host, port=args.port, debug=True, use_reloader=True)
    else:
        logging.info("Serving with waitress on %s:%s", args.host, args.port)
        serve(flask_app, port=args.port, host=args.host)


if __name__ == "__main__":
    main()

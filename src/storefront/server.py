"""Uvicorn runner for the Storefront API.

Usage:
    python -m storefront.server                  # bind HOST/PORT from the environment
    python -m storefront.server --port 8080      # override the port
    python -m storefront.server --reload         # restart on code changes
"""

import argparse

import uvicorn

from storefront.config import StorefrontConfig


def main(argv=None):
    config = StorefrontConfig.from_env()

    parser = argparse.ArgumentParser(description="Storefront API server")
    parser.add_argument("--host", default=config.host, help=f"Bind address (default: {config.host})")
    parser.add_argument("--port", type=int, default=config.port, help=f"Bind port (default: {config.port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args(argv)

    uvicorn.run(
        "storefront.app:build_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()

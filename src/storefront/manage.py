"""PureFood management CLI.

Usage:
    purefood serve --port 5000      # Run the HTTP API
    purefood seed-catalog           # Persist the sample catalog into an empty store
    purefood stats                  # Print the sales figures
"""

import argparse
import sys

from storefront.config import load_settings


def serve(host: str, port: int) -> None:
    import uvicorn

    uvicorn.run("storefront.app:create_app", factory=True, host=host, port=port)


def seed_catalog() -> None:
    """Persist the sample products when the store holds none."""
    from storefront.backends.local_adapter import LocalBackend
    from storefront.domain import init_domain
    from storefront.storage import open_store

    domain = init_domain()
    settings = load_settings()
    with domain.domain_context():
        created = LocalBackend(open_store(settings.store_uri)).products.initialize_samples()

    if created:
        print(f"Seeded {len(created)} sample products.")
    else:
        print("Catalog already has products; nothing seeded.")


def print_stats() -> None:
    from storefront.domain import init_domain
    from storefront.shop import Shop

    domain = init_domain()
    with domain.domain_context():
        stats = Shop.from_settings().backend.get_order_stats()

    print(f"Orders:    {stats.total_orders}")
    print(f"Pending:   {stats.pending_orders}")
    print(f"Completed: {stats.completed_orders}")
    print(f"Sales:     {stats.total_sales:.2f}")


def main():
    parser = argparse.ArgumentParser(description="PureFood storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=5000)

    subparsers.add_parser("seed-catalog", help="Persist the sample catalog into an empty store")
    subparsers.add_parser("stats", help="Print the sales figures")

    args = parser.parse_args()

    if args.command == "serve":
        serve(args.host, args.port)
    elif args.command == "seed-catalog":
        seed_catalog()
    elif args.command == "stats":
        print_stats()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

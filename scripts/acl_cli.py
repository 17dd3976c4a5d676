"""
ACL CLI: fetch a container's access policy and print it as JSON.

Usage examples:
  python -m scripts.acl_cli get-acl --container images
  python -m scripts.acl_cli get-acl --container images --timeout 30 --lease-id 0f4a...
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from api.errors import ConfigError, StorageError
from app.bootstrap import build_client, configure_logging
from app.settings import StorageSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query blob container access policies")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_acl = sub.add_parser("get-acl", help="Show the access policy of a container")
    p_acl.add_argument("--container", required=True, help="Container name, e.g. images")
    p_acl.add_argument("--timeout", type=int, default=None, help="Server-side timeout in seconds")
    p_acl.add_argument("--client-request-id", default=None, help="Correlation id sent with the request")
    p_acl.add_argument("--lease-id", default=None, help="Active lease id (UUID) on the container")
    return parser


async def get_acl(client, args: argparse.Namespace) -> dict:
    builder = client.containers.get_acl(args.container)
    if args.timeout is not None:
        builder = builder.with_timeout(args.timeout)
    if args.client_request_id:
        builder = builder.with_client_request_id(args.client_request_id)
    if args.lease_id:
        builder = builder.with_lease_id(args.lease_id)
    response = await builder.finalize()
    return response.to_dict()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()

    try:
        settings = StorageSettings.from_env()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    configure_logging(settings.log_level)

    try:
        client = build_client(settings)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    try:
        if args.cmd == "get-acl":
            result = asyncio.run(get_acl(client, args))
        else:
            return 2
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except (StorageError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.http.close()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

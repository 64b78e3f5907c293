#!/usr/bin/env python3
"""Testhelper CLI for smoke-testing the realmsandbox client against a backend."""

import asyncio
import json
import os
import sys

from realmsandbox import RealmSandboxClient, RequestFailedError

USAGE = """usage: testhelper.py <command> [args]

commands:
  info                            service, user and system metadata
  list-sandboxes [--deleted]      sandboxes of the realm
  get-sandbox <sandbox_id>        one sandbox
  run-operation <sandbox_id> <json> request an operation, body given as JSON
  operations <sandbox_id>         operations on a sandbox
"""


async def info(client: RealmSandboxClient) -> None:
    """Print service, user and system metadata."""
    output = {
        "api": await client.get_api(),
        "user": await client.get_user(),
        "system": await client.get_system(),
    }
    print(json.dumps(output))


async def list_sandboxes(client: RealmSandboxClient, include_deleted: bool) -> None:
    """Print all sandboxes."""
    print(json.dumps(await client.sandboxes.get_sandboxes(include_deleted)))


async def get_sandbox(client: RealmSandboxClient, sandbox_id: str) -> None:
    """Print one sandbox."""
    print(json.dumps(await client.sandboxes.get_sandbox(sandbox_id)))


async def run_operation(client: RealmSandboxClient, sandbox_id: str, body: str) -> None:
    """Request an operation and print the backend's answer."""
    result = await client.sandboxes.run_sandbox_operation(sandbox_id, json.loads(body))
    print(json.dumps(result))


async def operations(client: RealmSandboxClient, sandbox_id: str) -> None:
    """Print the operations on a sandbox."""
    print(json.dumps(await client.sandboxes.get_sandbox_operations(sandbox_id)))


def usage_error(message: str = "") -> None:
    if message:
        print(message, file=sys.stderr)
    print(USAGE, file=sys.stderr)
    sys.exit(1)


async def main() -> None:
    """Main entry point."""
    args = sys.argv[1:]
    if not args:
        usage_error()

    command, rest = args[0], args[1:]

    base_url = os.environ.get("REALMSANDBOX_URL")
    if not base_url:
        usage_error("REALMSANDBOX_URL environment variable not set")

    headers = {}
    if os.environ.get("REALMSANDBOX_COOKIE"):
        headers["Cookie"] = os.environ["REALMSANDBOX_COOKIE"]

    async with RealmSandboxClient(
        base_url=base_url,
        base_path=os.environ.get("REALMSANDBOX_BASE_PATH", "/"),
        headers=headers,
    ) as client:
        try:
            if command == "info":
                await info(client)
            elif command == "list-sandboxes":
                await list_sandboxes(client, "--deleted" in rest)
            elif command == "get-sandbox" and len(rest) == 1:
                await get_sandbox(client, rest[0])
            elif command == "run-operation" and len(rest) == 2:
                await run_operation(client, rest[0], rest[1])
            elif command == "operations" and len(rest) == 1:
                await operations(client, rest[0])
            else:
                usage_error()
        except RequestFailedError as e:
            print(json.dumps({"success": False, "error": e.message}))
            sys.exit(2)


if __name__ == "__main__":
    asyncio.run(main())

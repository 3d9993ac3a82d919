#!/usr/bin/env python3
"""
Example showing environment switching and middleware reloading.

The client starts against production, turns request logging off at
runtime and then points at a local mock server if one is running on
port 8080.

Usage:
    python examples/environment_switching.py
"""

import logging

import httpx
from dotenv import load_dotenv

from dummyjson import ApiClient, ClientState, Environment

load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(message)s")


def main() -> None:
    state = ClientState()
    with ApiClient(Environment.PRODUCTION, state=state) as client:
        print(f"Using {client.server_url} with {[t.name for t in client.middleware_types]}")
        todos = client.get_todos(limit=3)
        for todo in todos.items:
            print(f"  [{'x' if todo.completed else ' '}] {todo.todo}")

        state.set_logging_enabled(False)
        client.reload_settings()
        print(f"Middleware after reload: {[t.name for t in client.middleware_types]}")
        print(f"Comment 1: {client.get_comment(1).body}")

        client.switch_environment(Environment.LOCAL)
        print(f"Switched to {client.server_url}")
        try:
            print(f"Local user 1: {client.get_user(1).first_name}")
        except httpx.ConnectError:
            print("No local mock server is running; skipping local calls")


if __name__ == "__main__":
    main()

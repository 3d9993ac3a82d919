#!/usr/bin/env python3
"""
Example demonstrating the sync and async DummyJSON clients side by side.

Logs in with the published demo account, stores the token in shared client
state and then reads a few resources with both clients.

Optional environment variables:
- DUMMYJSON_ENV: "production" (default) or "local"
- DUMMYJSON_LOGGING: set to 0 to silence request logging

Usage:
    python examples/sync_and_async.py
"""

import asyncio
import logging

from dotenv import load_dotenv

from dummyjson import ApiClient, AsyncApiClient, ClientState, NotFoundError
from dummyjson.env import get_env

load_dotenv()
logging.basicConfig(level=logging.INFO, format="%(message)s")


def run_sync(state: ClientState) -> None:
    env = get_env()
    with ApiClient(env.DUMMYJSON_ENV or "production", state=state) as client:
        auth = client.login("emilys", "emilyspass", expires_in_mins=30)
        state.set_token(auth.access_token)
        print(f"Logged in as {auth.username} ({auth.email})")

        page = client.get_users(limit=5, skip=0)
        print(f"First {len(page.items)} of {page.total} users:")
        for user in page.items:
            print(f"  {user.id}: {user.first_name} {user.last_name}")

        try:
            client.get_user(10**6)
        except NotFoundError as exc:
            print(f"As expected: {exc}")


async def run_async(state: ClientState) -> None:
    env = get_env()
    async with await AsyncApiClient.create(env.DUMMYJSON_ENV or "production", state=state) as client:
        post, product, cart = await asyncio.gather(
            client.get_post(1), client.get_product(1), client.get_cart(1)
        )
        print(f"Post 1: {post.title}")
        print(f"Product 1: {product.title} at ${product.price}")
        print(f"Cart 1: {cart.total_products} products, total {cart.total}")


def main() -> None:
    state = ClientState.from_env()
    run_sync(state)
    asyncio.run(run_async(state))


if __name__ == "__main__":
    main()

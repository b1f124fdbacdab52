# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import asyncio
import getpass
import logging
import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from restaurant_client import ClientConfig, RestaurantClient
from restaurant_client.core.telemetry import TelemetryConfig
from restaurant_client.core.token_store import FileTokenStore
from restaurant_client.models.menu_item import MenuItem

logging.basicConfig(level=logging.INFO)

entered = input("Enter API base URL (e.g. https://api.example.com/api): ").strip()
if not entered:
	print("No URL entered; exiting.")
	sys.exit(1)

config = ClientConfig(telemetry=TelemetryConfig(enable_logging=True, log_level="INFO"))
store = FileTokenStore(Path.home() / ".restaurant_client" / "token.json")


def log_call(call: str) -> None:
	print({"call": call})


with RestaurantClient(entered, token_store=store, config=config) as client:
	if store.get_token() is None:
		email = input("Email: ").strip()
		password = getpass.getpass("Password: ")
		log_call("client.auth.login(...)")
		login = client.auth.login(email, password)
		if login.is_failure:
			print(f"Login failed: {login.failure_or_none}")
			sys.exit(1)
		print(f"Logged in as {login.value_or_none.name} ({login.value_or_none.role})")

	log_call("client.menu.list(available=True)")
	client.menu.list(available=True).fold(
		on_success=lambda rows: [print(f"  {item.name:30} {item.price:8.2f}") for item in map(MenuItem.from_dict, rows)],
		on_failure=lambda failure: print(f"Menu unavailable: [{failure.kind.value}] {failure.message}"),
	)

	log_call("client.aio.get_list('/orders') + client.aio.get('/orders/stats')")

	async def dashboard():
		token = client.token_store.get_token()
		return await asyncio.gather(
			client.aio.get_list("/orders", {"status": "pending"}, token),
			client.aio.get("/orders/stats", token=token),
		)

	pending, stats = asyncio.run(dashboard())
	print({"pending_orders": len(pending.value_or_none or []), "stats": stats.value_or_none})

	log_call("client.get_dataframe('/orders')")
	df = client.get_dataframe("/orders").value_or_none
	if df is not None and not df.empty:
		print(df.head())

	if input("Log out? (y/N): ").strip().lower() in ("y", "yes"):
		client.auth.logout()

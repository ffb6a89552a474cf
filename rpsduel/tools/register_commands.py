"""Install the slash commands as global application commands."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import httpx

from rpsduel.backend.catalog import CATALOGS, get_catalog
from rpsduel.backend.commands import build_commands, commands_endpoint
from rpsduel.backend.config import load_settings
from rpsduel.backend.logs import configure_logging
from rpsduel.backend.webhooks import USER_AGENT

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Register rpsduel slash commands")
    parser.add_argument("--catalog", choices=sorted(CATALOGS), default=None)
    parser.add_argument("--dry-run", action="store_true", help="print the payload instead of sending it")
    return parser.parse_args(argv)


def install_global_commands(
    api_base_url: str,
    app_id: str,
    bot_token: str,
    commands: list[dict],
    transport: httpx.BaseTransport | None = None,
) -> list[dict]:
    url = f"{api_base_url.rstrip('/')}/{commands_endpoint(app_id)}"
    headers = {
        "Authorization": f"Bot {bot_token}",
        "Content-Type": "application/json; charset=UTF-8",
        "User-Agent": USER_AGENT,
    }
    with httpx.Client(timeout=10.0, transport=transport) as client:
        response = client.put(url, headers=headers, json=commands)
    response.raise_for_status()
    return response.json()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = load_settings()
    configure_logging(settings.log_level)

    commands = build_commands(get_catalog(args.catalog or settings.catalog))
    if args.dry_run:
        print(json.dumps(commands, indent=2))
        return 0

    if not settings.app_id or not settings.bot_token:
        raise RuntimeError("RPSDUEL_APP_ID and RPSDUEL_BOT_TOKEN are required to register commands")

    try:
        installed = install_global_commands(
            api_base_url=settings.api_base_url,
            app_id=settings.app_id,
            bot_token=settings.bot_token,
            commands=commands,
        )
    except httpx.HTTPError as exc:
        print(f"Command registration failed: {exc}", file=sys.stderr)
        return 1
    logger.info("installed %d commands", len(installed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Command-line interface for browsing and editing the roster."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from dataclasses import replace

import uvicorn

from puppybowl.app import create_app
from puppybowl.client import PlayerApiClient
from puppybowl.commands import Create, Remove
from puppybowl.config import RosterSettings
from puppybowl.controller import RosterController
from puppybowl.forms import NewPlayerForm


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the Puppy Bowl roster")
    parser.add_argument("--cohort", default=None, help="Cohort segment scoping the players collection")
    parser.add_argument("--api-base", default=None, help="Base URL of the roster API")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the roster web UI")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    sub.add_parser("list", help="Print all players as JSON")

    show = sub.add_parser("show", help="Print one player as JSON")
    show.add_argument("player_id", type=int)

    add = sub.add_parser("add", help="Add a player, then print the refreshed roster")
    add.add_argument("--name", required=True)
    add.add_argument("--breed", required=True)
    add.add_argument("--status", default="bench", help="field or bench")
    add.add_argument("--image-url", default="")
    add.add_argument("--team", default=None, help="Team id, omit for no team")

    remove = sub.add_parser("remove", help="Remove a player, then print the refreshed roster")
    remove.add_argument("player_id", type=int)
    return parser.parse_args(argv)


def _settings_from_args(args: argparse.Namespace) -> RosterSettings:
    settings = RosterSettings.from_env()
    if args.cohort:
        settings = replace(settings, cohort=args.cohort)
    if args.api_base:
        settings = replace(settings, api_base=args.api_base)
    return settings


def _dump_players(controller: RosterController) -> str:
    return json.dumps([player.model_dump(by_alias=True) for player in controller.players], indent=2)


async def _run(args: argparse.Namespace, settings: RosterSettings) -> int:
    async with PlayerApiClient(settings) as client:
        controller = RosterController(client)
        if args.command == "list":
            await controller.refresh()
            print(_dump_players(controller))
            return 0
        if args.command == "show":
            player = await client.fetch_single_player(args.player_id)
            if player is None:
                print(f"player {args.player_id} not found")
                return 1
            print(json.dumps(player.model_dump(by_alias=True), indent=2))
            return 0
        if args.command == "add":
            candidate = NewPlayerForm.parse(
                {
                    "name": args.name,
                    "breed": args.breed,
                    "status": args.status,
                    "imageUrl": args.image_url,
                    "team": args.team,
                }
            )
            await controller.dispatch(Create(candidate))
        elif args.command == "remove":
            await controller.dispatch(Remove(args.player_id))
        print(_dump_players(controller))
        return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )
    settings = _settings_from_args(args)

    if args.command == "serve":
        uvicorn.run(create_app(settings), host=args.host, port=args.port)
        return 0
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
CLI entry point for playwith.

Prints the games shared by every given player as JSON, most played first.
"""
import argparse
import json
import sys

from . import icon_cache, resolver, shared
from .config import Config, load_config
from .errors import PlayWithError, describe_error
from .logger import setup_logger, StageTimer, log_skipped_item
from .models import Profile, SharedGame, rank_shared_games

logger = setup_logger(__name__)


def split_tokens(raw: list[str]) -> list[str]:
    """
    Split arguments into identity tokens.

    Launchers often pass every player in one space-separated argument.

    Example:
        ["alice bob", "76561197960287930"] -> ["alice", "bob", "76561197960287930"]
    """
    return [token for arg in raw for token in arg.split()]


def resolve_profiles(config: Config, tokens: list[str]) -> list[Profile]:
    """
    Resolve every token, prepending YOUR_STEAM_ID when configured.

    The same identity requested twice is only kept once.

    Raises:
        PlayWithError: If any token cannot be resolved
    """
    profiles: list[Profile] = []
    seen: set[str] = set()

    if config.your_steam_id:
        tokens = [config.your_steam_id] + tokens

    for token in tokens:
        try:
            profile = resolver.resolve(config, token).object
        except PlayWithError as e:
            raise PlayWithError(f"failure to get profile for {token}") from e

        if profile.ids.steamid64 in seen:
            logger.debug(f"Skipping duplicate profile {profile.ids.steamid64}")
            continue
        seen.add(profile.ids.steamid64)
        profiles.append(profile)

    return profiles


def build_output(config: Config, games: list[SharedGame]) -> list[dict]:
    """
    Attach icon paths and launcher URLs to ranked shared games.

    An icon that cannot be resolved is logged and reported as null.
    """
    items = []

    for game in games:
        icon = None
        if game.img_icon_url:
            try:
                icon = str(icon_cache.get_icon(config, game))
            except PlayWithError as e:
                log_skipped_item(logger, "icon", f"{game.name} ({game.appid})", e)

        items.append({
            "appid": game.appid,
            "name": game.name,
            "playtime_shared_average": game.playtime_shared_average,
            "icon": icon,
            "launch_url": f"steam://nav/games/details/{game.appid}",
            "store_url": f"steam://store/{game.appid}",
            "web_store_url": f"https://store.steampowered.com/app/{game.appid}/",
        })

    return items


def run(config: Config, tokens: list[str]) -> list[dict]:
    """Resolve players, compute their shared library and build the output."""
    profiles = resolve_profiles(config, tokens)

    with StageTimer(logger, f"Finding games shared by {len(profiles)} profiles"):
        try:
            games = shared.find_shared_games(config, profiles)
        except PlayWithError as e:
            raise PlayWithError("failure to get games") from e

    logger.info(f"Results: shared_games={len(games)}")
    return build_output(config, rank_shared_games(games))


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Find the Steam games a group of players all own",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "players",
        nargs="+",
        help="Custom URL aliases or 64-bit Steam IDs (space separated values are split)",
    )

    args = parser.parse_args()

    tokens = split_tokens(args.players)
    if not tokens:
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        items = run(config, tokens)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except PlayWithError as e:
        logger.error(f"Error: {describe_error(e)}")
        print(json.dumps({"error": describe_error(e)}))
        sys.exit(1)

    print(json.dumps({"games": items}, indent=2))


if __name__ == "__main__":
    main()

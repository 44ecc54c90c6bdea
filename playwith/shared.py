from collections.abc import Sequence
from functools import reduce

from . import library_client
from .config import Config
from .models import Game, Profile, SharedGame


def find_shared_games(config: Config, profiles: Sequence[Profile]) -> list[SharedGame]:
    """
    Find the games every profile owns.

    Libraries missing from a profile are fetched (and saved) first.

    Args:
        config: Runtime configuration
        profiles: One or more resolved profiles

    Returns:
        Unordered shared games with averaged play time

    Raises:
        PlayWithError: If any library cannot be fetched
    """
    libraries = [library_client.get_games(config, profile).games for profile in profiles]
    return compute_shared_games(libraries)


def compute_shared_games(libraries: Sequence[Sequence[Game]]) -> list[SharedGame]:
    """
    Intersect game libraries and average play time across owners.

    The first library's first copy of a game supplies its name and icon hashes.
    Average play time is the floor of the mean of playtime_forever.

    Args:
        libraries: Game lists, one per profile

    Returns:
        One SharedGame per appid present in every library (empty when there are no libraries)
    """
    if not libraries:
        return []

    id_sets = [{game.appid for game in games} for games in libraries]
    # Seed with the first set; an empty seed would make every intersection empty
    shared_ids = reduce(lambda acc, ids: acc & ids, id_sets[1:], id_sets[0])

    copies: dict[int, list[Game]] = {appid: [] for appid in shared_ids}
    for games in libraries:
        for game in games:
            if game.appid in copies:
                copies[game.appid].append(game)

    shared = []
    for appid, owned in copies.items():
        canonical = owned[0]
        shared.append(SharedGame(
            appid=appid,
            name=canonical.name,
            playtime_shared_average=sum(g.playtime_forever for g in owned) // len(owned),
            img_logo_url=canonical.img_logo_url,
            img_icon_url=canonical.img_icon_url,
        ))

    return shared

from __future__ import annotations

from plunder.application.dtos import BattleView, ItemOptionView, LevelView, LocationView, PlayerView
from plunder.domain.models.adversary import Adversary
from plunder.domain.models.location import Level, Location
from plunder.domain.models.player import Player


def location_status(player: Player, location: Location) -> str:
    if not player.has_visited(location.name):
        return ""
    return "[LOOTED]" if location.sufficiently_looted else "[VISITED]"


def to_player_view(player: Player) -> PlayerView:
    return PlayerView(
        name=player.name,
        health=player.health,
        treasure=player.treasure,
        equipped=player.equipped.label,
        items=[item.label for item in player.owned_in_catalog_order()],
    )


def to_location_view(index: int, player: Player, location: Location) -> LocationView:
    return LocationView(
        index=index,
        name=location.name,
        total_treasure=location.total_treasure,
        minimum_to_loot=location.minimum_to_loot,
        status=location_status(player, location),
    )


def to_level_view(level: Level, level_count: int, player: Player) -> LevelView:
    return LevelView(
        number=level.number,
        level_count=level_count,
        locations=[to_location_view(idx, player, loc) for idx, loc in enumerate(level.locations, start=1)],
    )


def to_item_option_views(player: Player) -> list[ItemOptionView]:
    return [
        ItemOptionView(
            index=idx,
            label=item.label,
            damage=item.damage,
            accuracy_percent=item.accuracy_percent,
            equipped=item == player.equipped,
        )
        for idx, item in enumerate(player.owned_in_catalog_order(), start=1)
    ]


def to_battle_view(round_no: int, player: Player, adversary: Adversary) -> BattleView:
    return BattleView(
        round_no=round_no,
        player_health=player.health,
        adversary_name=adversary.name,
        adversary_health=adversary.health,
        equipped=player.equipped.label,
    )

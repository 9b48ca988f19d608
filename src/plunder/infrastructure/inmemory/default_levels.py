from __future__ import annotations

from typing import List

from plunder.domain.models.adversary import AdversaryTemplate, mercenary, soldier
from plunder.domain.models.location import Level, Location, Obstacle

_TOWN_GUARD = soldier("Town Guard", 40, 10, 0.7)


def _town(
    name: str,
    total: int,
    minimum: int,
    obstacles: List[Obstacle],
    adversaries: List[AdversaryTemplate],
) -> Location:
    return Location(
        name=name,
        total_treasure=total,
        minimum_to_loot=minimum,
        obstacles=list(obstacles),
        adversaries=list(adversaries),
    )


def build_default_levels() -> List[Level]:
    """Build the six-level campaign. Locations carry session state, so every call builds new ones."""

    return [
        Level(1, [
            _town("Port Blossom", 100, 50, [Obstacle("Quicksand", 5)], [_TOWN_GUARD]),
            _town("Sandy Creek", 120, 60, [Obstacle("Falling Coconut", 5)],
                  [soldier("Town Guard", 45, 12, 0.7)]),
            _town("Whispering Isle", 150, 70, [Obstacle("Poisonous Spider", 10)],
                  [soldier("Veteran Town Guard", 50, 15, 0.75)]),
        ]),
        Level(2, [
            _town("Gator's End", 200, 100, [Obstacle("Snapping Crocodile", 15)],
                  [mercenary("Swamp Mercenary", 60, 20, 0.65)]),
            _town("Swamp Foot", 220, 110, [Obstacle("Leech-infested water", 15)],
                  [soldier("Swamp Patroller", 55, 15, 0.8), mercenary("Swamp Mercenary", 60, 20, 0.65)]),
            _town("Misty Mangrove", 250, 120,
                  [Obstacle("Sudden Sinkhole", 15), Obstacle("Snapping Crocodile", 15)],
                  [mercenary("Elite Mercenary", 70, 25, 0.7)]),
        ]),
        Level(3, [
            _town("Serpent's Coil", 300, 150, [Obstacle("Venomous Snake", 20)],
                  [mercenary("Jungle Assassin", 80, 25, 0.75)]),
            _town("Viper's Nest", 320, 160, [Obstacle("Spike Trap", 25)],
                  [soldier("Temple Guard", 70, 20, 0.8), mercenary("Jungle Assassin", 85, 25, 0.75)]),
            _town("Poisoned Spring", 350, 170,
                  [Obstacle("Dart Trap", 20), Obstacle("Venomous Snake", 20)],
                  [mercenary("Temple Executioner", 90, 30, 0.8)]),
        ]),
        Level(4, [
            _town("Fort Courage", 400, 200, [Obstacle("Landmine", 30)],
                  [soldier("Fortress Soldier", 100, 30, 0.8)]),
            _town("Cannonball Bay", 450, 220, [Obstacle("Stray Cannonball", 35)],
                  [soldier("Cannoneer", 110, 35, 0.8), mercenary("Fortress Mercenary", 120, 35, 0.8)]),
            _town("The Garrison", 500, 250, [Obstacle("Barbed Wire", 25)],
                  [soldier("Garrison Captain", 150, 40, 0.85), soldier("Elite Guard", 110, 35, 0.8)]),
        ]),
        Level(5, [
            _town("Jaguar Jungle", 550, 270, [Obstacle("Shadow Cat Pounce", 30)],
                  [mercenary("Jungle Stalker", 140, 40, 0.8)]),
            _town("The Lost Ruins", 600, 300,
                  [Obstacle("Crumbling Floor", 25), Obstacle("Ancient Curse", 15)],
                  [soldier("Undead Soldier", 130, 40, 0.7), mercenary("Ruin Guardian", 160, 45, 0.8)]),
            _town("Temple of Fangs", 650, 320, [Obstacle("Swinging Blade Trap", 40)],
                  [mercenary("High Priest", 180, 45, 0.85), mercenary("Temple Fanatic", 150, 40, 0.85)]),
        ]),
        Level(6, [
            _town("Volcano's Heart", 800, 400, [Obstacle("Lava Geyser", 50)],
                  [soldier("Lava Elemental", 200, 50, 0.75)]),
            _town("The Obsidian Fortress", 900, 450, [Obstacle("Obsidian Shards", 40)],
                  [soldier("Obsidian Knight", 220, 55, 0.8), mercenary("Obsidian Guard", 250, 55, 0.75)]),
            _town("The Mad King's Treasury", 1500, 750, [Obstacle("Royal Treasury Trap", 60)],
                  [mercenary("The Mad King", 500, 65, 0.9), soldier("Royal Guard", 300, 60, 0.9)]),
        ]),
    ]

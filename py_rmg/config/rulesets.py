"""
Built-in rulesets.

"default" has everything random map generation needs: a spawn actor, a
resource-producing mine, and the Neutral and Creeps players.
"""

from typing import Dict, List

from ..core.catalog import ActorInfo, PlayerReference, ResourceTypeInfo, Ruleset


def _default_ruleset() -> Ruleset:
    return Ruleset(
        name="default",
        actors={
            "mpspawn": ActorInfo("mpspawn"),
            "^mine": ActorInfo("^mine", seeds_resource="ore"),
            "mine": ActorInfo("mine", seeds_resource="ore"),
            "gmine": ActorInfo("gmine", seeds_resource="gems"),
        },
        resources={
            "ore": ResourceTypeInfo("ore", type_id=1, max_density=12),
            "gems": ResourceTypeInfo("gems", type_id=2, max_density=3),
        },
        players=[
            PlayerReference("Neutral", owns_world=True, non_combatant=True, faction="allies"),
            PlayerReference("Creeps", non_combatant=True, faction="allies"),
        ],
        maximum_terrain_height=8,
    )


RULESETS: Dict[str, Ruleset] = {
    "default": _default_ruleset(),
}


def get_ruleset(name: str) -> Ruleset:
    """
    Get a built-in ruleset by name.

    Raises:
        KeyError: If the ruleset is not known
    """
    if name not in RULESETS:
        raise KeyError(f"Unknown ruleset: {name}")
    return RULESETS[name]


def list_rulesets() -> List[str]:
    return list(RULESETS.keys())

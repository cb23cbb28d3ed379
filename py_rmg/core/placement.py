"""
Per-run placement state and the shared bounded-retry sampling routine.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, TypeVar

import structlog

from .alea_prng import AleaPRNG
from .occupancy import OccupancyGrid
from .tile_map import ActorReference, TileMap

logger = structlog.get_logger()

T = TypeVar("T")


@dataclass
class Diagnostic:
    """A shortfall or skipped stage reported during generation."""

    stage: str
    message: str
    requested: Optional[int] = None
    placed: Optional[int] = None


@dataclass
class GenerationContext:
    """
    State owned by exactly one generation run.

    Holds the random stream, the occupancy grid, the actor counter and the
    diagnostics list. Not shared between runs or threads.
    """

    prng: AleaPRNG
    occupancy: OccupancyGrid
    diagnostics: List[Diagnostic] = field(default_factory=list)
    actor_count: int = 0

    @classmethod
    def for_map(
        cls,
        tile_map: TileMap,
        seed: str,
        diagnostics: Optional[List[Diagnostic]] = None,
    ) -> "GenerationContext":
        return cls(
            prng=AleaPRNG(seed),
            occupancy=OccupancyGrid(tile_map.width, tile_map.height),
            diagnostics=diagnostics if diagnostics is not None else [],
        )

    def next_actor_name(self) -> str:
        name = f"Actor{self.actor_count}"
        self.actor_count += 1
        return name

    def add_actor(self, tile_map: TileMap, actor: ActorReference) -> str:
        """Add an actor under the next sequential name and return the name."""
        name = self.next_actor_name()
        tile_map.add_actor(name, actor)
        return name

    def report(
        self,
        stage: str,
        message: str,
        requested: Optional[int] = None,
        placed: Optional[int] = None,
    ) -> None:
        logger.warning(message, stage=stage, requested=requested, placed=placed)
        self.diagnostics.append(Diagnostic(stage, message, requested, placed))


def sample_with_rejection(
    count: int,
    draw: Callable[[], T],
    accept: Callable[[T, List[T]], bool],
    attempts: int = 10,
) -> List[T]:
    """
    Collect up to `count` candidates that pass `accept`.

    Each slot gets `attempts` draws; a candidate is kept when
    `accept(candidate, accepted_so_far)` is true. The first slot that
    exhausts its attempts ends the batch, so the result may be short.
    """
    accepted: List[T] = []
    for _ in range(count):
        for _ in range(attempts):
            candidate = draw()
            if accept(candidate, accepted):
                accepted.append(candidate)
                break
        else:
            break
    return accepted


def far_from_all(point, others, min_distance: float) -> bool:
    """Whether point is at least min_distance from every one of others."""
    return all(point.distance_to(other) >= min_distance for other in others)

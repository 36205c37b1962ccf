"""
Initial placement tests.

Calls spawn_population directly so the exhaustion branch, which World.create
guards against, is still exercised.
"""

from wator.creature import Fish, Shark
from wator.data_types import SimulationConfig
from wator.rng import make_rng
from wator.spawning import spawn_population
from wator.world import World


CONFIG = SimulationConfig(fish_spawn_period=3, shark_spawn_period=3, shark_starve_limit=2)


def test_places_fish_then_sharks():
    world = World.empty(4, 4, CONFIG)
    placed = spawn_population(world, 5, 3, CONFIG, make_rng(11))

    assert placed == {'fish': 5, 'sharks': 3}
    assert world.population() == placed
    for creature in world.cells:
        if isinstance(creature, Shark):
            assert creature.health == CONFIG.shark_starve_limit


def test_exhausted_sequence_stops_with_warning(capsys):
    world = World.empty(2, 2, CONFIG)
    placed = spawn_population(world, 3, 3, CONFIG, make_rng(0))

    assert placed == {'fish': 3, 'sharks': 1}
    assert world.population() == {'fish': 3, 'sharks': 1}
    assert all(creature is not None for creature in world.cells)

    out = capsys.readouterr().out
    assert "[WARN] No more cells left on map to place SHARK" in out
    assert "place FISH" not in out


def test_fish_overflow_skips_sharks(capsys):
    world = World.empty(2, 1, CONFIG)
    placed = spawn_population(world, 4, 2, CONFIG, make_rng(3))

    assert placed == {'fish': 2, 'sharks': 0}
    assert all(isinstance(creature, Fish) for creature in world.cells)

    out = capsys.readouterr().out
    assert "[WARN] No more cells left on map to place FISH" in out
    assert "[WARN] No more cells left on map to place SHARK" in out

"""
Test scenario loading system

Verifies YAML → Python dataclass conversion and schema validation.
"""

import sys
import pytest
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from wator.loader import (
    DataLoadError,
    load_scenario,
    load_scenario_registry,
    load_yaml,
    parse_scenario,
)
from wator.simulation import WatorSimulation


DATA_ROOT = Path(__file__).parent.parent.parent / "data"
SCHEMA_DIR = DATA_ROOT / "schemas"


def test_load_default_scenario():
    """Test loading the default scenario"""
    scenario = load_scenario(DATA_ROOT / "scenarios" / "default.yaml", SCHEMA_DIR)

    print(f"[OK] Loaded scenario: {scenario.name} ({scenario.scenario_id})")
    print(f"  Grid: {scenario.grid.width}x{scenario.grid.height}, seed={scenario.grid.seed}")
    print(f"  Population: {scenario.population.fish} fish, {scenario.population.sharks} sharks")

    assert scenario.scenario_id == "default"
    assert scenario.grid.width == 10
    assert scenario.grid.height == 4
    assert scenario.grid.seed == 12345
    assert scenario.population.fish == 10
    assert scenario.population.sharks == 4
    assert scenario.rules.fish_spawn_period == 25
    assert scenario.rules.shark_spawn_period == 35
    assert scenario.rules.shark_starve_limit == 10


def test_load_registry():
    """Test loading every shipped scenario"""
    registry = load_scenario_registry(DATA_ROOT / "scenarios", SCHEMA_DIR)

    print(f"[OK] Loaded {len(registry)} scenarios: {', '.join(sorted(registry))}")
    assert "default" in registry
    assert "open-ocean" in registry


def test_schema_rejects_bad_rules(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text(
        "scenario_id: bad\n"
        "name: Bad\n"
        "grid: {width: 3, height: 3}\n"
        "rules: {fish_spawn_period: 0, shark_spawn_period: 3, shark_starve_limit: 2}\n"
    )
    with pytest.raises(DataLoadError, match="Validation error"):
        load_scenario(bad, SCHEMA_DIR)


def test_missing_section_without_schema(tmp_path):
    partial = tmp_path / "partial.yaml"
    partial.write_text("scenario_id: partial\nname: Partial\ngrid: {width: 3, height: 3}\n")
    with pytest.raises(DataLoadError, match="rules"):
        load_scenario(partial)


def test_unknown_field_without_schema():
    data = {
        'scenario_id': 'x',
        'name': 'X',
        'grid': {'width': 3, 'height': 3, 'depth': 2},
        'rules': {'fish_spawn_period': 3, 'shark_spawn_period': 3, 'shark_starve_limit': 2},
    }
    with pytest.raises(DataLoadError, match="Malformed"):
        parse_scenario(data)


def test_population_defaults_to_empty():
    scenario = parse_scenario({
        'scenario_id': 'empty',
        'name': 'Empty',
        'grid': {'width': 2, 'height': 2},
        'rules': {'fish_spawn_period': 3, 'shark_spawn_period': 3, 'shark_starve_limit': 2},
    })
    assert scenario.population.fish == 0
    assert scenario.population.sharks == 0
    assert scenario.grid.seed is None
    assert scenario.to_dict()['rules']['shark_starve_limit'] == 2


@pytest.mark.parametrize("seed", [-1, 1.5, "abc", True])
def test_invalid_seed_without_schema(seed):
    data = {
        'scenario_id': 'seeded',
        'name': 'Seeded',
        'grid': {'width': 3, 'height': 3, 'seed': seed},
        'rules': {'fish_spawn_period': 3, 'shark_spawn_period': 3, 'shark_starve_limit': 2},
    }
    with pytest.raises(DataLoadError, match="Invalid seed"):
        parse_scenario(data)


def test_negative_seed_scenario_file(tmp_path):
    seeded = tmp_path / "seeded.yaml"
    seeded.write_text(
        "scenario_id: seeded\n"
        "name: Seeded\n"
        "grid: {width: 3, height: 3, seed: -5}\n"
        "rules: {fish_spawn_period: 3, shark_spawn_period: 3, shark_starve_limit: 2}\n"
    )
    with pytest.raises(DataLoadError, match="Invalid seed"):
        WatorSimulation.from_scenario(seeded)


def test_zero_seed_accepted():
    scenario = parse_scenario({
        'scenario_id': 'zero',
        'name': 'Zero',
        'grid': {'width': 2, 'height': 2, 'seed': 0},
        'rules': {'fish_spawn_period': 3, 'shark_spawn_period': 3, 'shark_starve_limit': 2},
    })
    assert scenario.grid.seed == 0


def test_missing_file():
    with pytest.raises(DataLoadError, match="File not found"):
        load_yaml(DATA_ROOT / "scenarios" / "does-not-exist.yaml")


def test_yaml_parse_error(tmp_path):
    broken = tmp_path / "broken.yaml"
    broken.write_text("grid: [1, 2\n")
    with pytest.raises(DataLoadError, match="YAML parse error"):
        load_yaml(broken)


def test_empty_registry_dir(tmp_path):
    with pytest.raises(DataLoadError, match="No scenario files"):
        load_scenario_registry(tmp_path)


def test_simulation_from_scenario():
    """Test building a simulation straight from a scenario file"""
    sim = WatorSimulation.from_scenario(DATA_ROOT / "scenarios" / "default.yaml", SCHEMA_DIR)

    assert sim.world.width == 10
    assert sim.world.height == 4
    assert sim.population() == {'fish': 10, 'sharks': 4}
    assert sim.seed == 12345

    again = WatorSimulation.from_scenario(DATA_ROOT / "scenarios" / "default.yaml")
    assert (sim.state() == again.state()).all()

    print("[OK] Simulation built from scenario\n")


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))

"""
YAML scenario loader with schema validation.

Loads scenario definitions (grid size, seed, initial population, rules)
from YAML files and validates them against a JSON schema.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .data_types import Scenario, GridConfig, PopulationConfig, SimulationConfig


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")

    if not isinstance(data, dict):
        raise DataLoadError(f"Expected a mapping at top level of {file_path}")
    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional when no schema is shipped
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def parse_scenario(data: dict, source: str = "<dict>") -> Scenario:
    """
    Build a Scenario from an already parsed mapping.

    Args:
        data: Parsed scenario mapping
        source: Where the data came from (for error messages)

    Raises:
        DataLoadError: If a required section or field is missing, or the
            seed is not a non-negative integer
    """
    try:
        grid = GridConfig(**data['grid'])
        seed = grid.seed
        # bool is an int subclass; PCG64 rejects negatives
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
            raise DataLoadError(f"Invalid seed {seed!r} in {source}: expected a non-negative integer")
        population = PopulationConfig(**data.get('population', {}))
        rules = SimulationConfig(**data['rules'])

        return Scenario(
            scenario_id=data['scenario_id'],
            name=data['name'],
            grid=grid,
            population=population,
            rules=rules,
            description=data.get('description')
        )
    except KeyError as e:
        raise DataLoadError(f"Missing field {e} in {source}")
    except TypeError as e:
        raise DataLoadError(f"Malformed section in {source}: {e}")


def load_scenario(file_path: Path, schema_dir: Optional[Path] = None) -> Scenario:
    """Load scenario definition from YAML"""
    file_path = Path(file_path)
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        schema_path = Path(schema_dir) / "scenario.schema.json"
        validate_against_schema(data, schema_path, file_path)

    return parse_scenario(data, str(file_path))


def load_scenario_registry(scenario_dir: Path, schema_dir: Optional[Path] = None) -> Dict[str, Scenario]:
    """Load all scenarios from directory, keyed by scenario_id"""
    scenario_dir = Path(scenario_dir)
    if not scenario_dir.exists():
        raise DataLoadError(f"Scenario directory not found: {scenario_dir}")

    registry = {}
    for yaml_file in sorted(scenario_dir.glob("*.yaml")):
        scenario = load_scenario(yaml_file, schema_dir)
        registry[scenario.scenario_id] = scenario

    if not registry:
        raise DataLoadError(f"No scenario files found in {scenario_dir}")

    return registry

"""
YAML species catalog loader with schema validation.

Loads species and their named attributes (colors, shapes, habitats) from
YAML files and validates them against the bundled JSON schema.
"""

import logging
import yaml
import json
from pathlib import Path
from typing import Dict, List, Optional
import jsonschema

from .constants import DEFAULT_SCHEMA_DIR, CATALOG_SCHEMA_FILE
from .data_types import Species, Color, Shape, Habitat

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")
    except OSError as e:
        raise DataLoadError(f"Cannot read {file_path}: {e}")

    if not isinstance(data, dict):
        raise DataLoadError(f"Expected a mapping at top level of {file_path}")

    return data


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.is_file():
        # Custom schema dirs may omit the catalog schema
        return

    try:
        with open(schema_path, 'r', encoding='utf-8') as f:
            schema = json.load(f)
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")
    except OSError as e:
        raise DataLoadError(f"Cannot read schema {schema_path}: {e}")

    try:
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")


def _require_int(value, field_name: str, file_path: Path) -> int:
    # YAML "200.0" is a float that draft-07 "integer" still accepts
    if isinstance(value, bool) or not isinstance(value, int):
        raise DataLoadError(
            f"Field '{field_name}' in {file_path} must be an integer, got {value!r}"
        )
    return value


def _index_attributes(entries: List[dict], attribute_cls, kind: str, file_path: Path) -> Dict[int, object]:
    table = {}
    for entry in entries:
        attribute_id = _require_int(entry['id'], f"{kind}.id", file_path)
        table[attribute_id] = attribute_cls(attribute_id, entry['name'])
    return table


def _resolve(table: Dict[int, object], ref: int, kind: str, species_data: dict, file_path: Path):
    ref = _require_int(ref, f"species.{kind}", file_path)
    try:
        return table[ref]
    except KeyError:
        raise DataLoadError(
            f"Species {species_data['id']} ({species_data['name']}) in {file_path} "
            f"references unknown {kind} {ref}"
        )


def _parse_species(s_data: dict, colors, shapes, habitats, file_path: Path) -> Species:
    return Species(
        species_id=_require_int(s_data['id'], 'species.id', file_path),
        species_name=s_data['name'],
        category_name=s_data['category'],
        description_text=s_data['description'],
        weight=_require_int(s_data['weight'], 'species.weight', file_path),
        height=_require_int(s_data['height'], 'species.height', file_path),
        color_ref=_resolve(colors, s_data['color'], 'color', s_data, file_path),
        shape_ref=_resolve(shapes, s_data['shape'], 'shape', s_data, file_path),
        habitat_ref=_resolve(habitats, s_data['habitat'], 'habitat', s_data, file_path),
    )


def load_species_catalog(file_path: Path, schema_dir: Optional[Path] = None) -> List[Species]:
    """
    Load species definitions from a YAML catalog.

    Args:
        file_path: Catalog YAML file
        schema_dir: Directory holding species_catalog.schema.json
            (defaults to the bundled schemas)

    Returns:
        Species in file order. Duplicate ids are kept as-is.

    Raises:
        DataLoadError: On any read, validation or structure problem
    """
    file_path = Path(file_path)
    data = load_yaml(file_path)

    schema_dir = Path(schema_dir) if schema_dir else DEFAULT_SCHEMA_DIR
    validate_against_schema(data, schema_dir / CATALOG_SCHEMA_FILE, file_path)

    # Without a schema the structure is unchecked until here
    try:
        colors = _index_attributes(data.get('colors', []), Color, 'color', file_path)
        shapes = _index_attributes(data.get('shapes', []), Shape, 'shape', file_path)
        habitats = _index_attributes(data.get('habitats', []), Habitat, 'habitat', file_path)

        species_list = [
            _parse_species(s_data, colors, shapes, habitats, file_path)
            for s_data in data['species']
        ]
    except KeyError as e:
        raise DataLoadError(f"Missing field {e} in {file_path}")
    except TypeError as e:
        raise DataLoadError(f"Malformed catalog {file_path}: {e}")

    logger.info("Loaded %d species from %s", len(species_list), file_path)
    return species_list


def load_species_dir(species_dir: Path, schema_dir: Optional[Path] = None) -> List[Species]:
    """Load and concatenate all catalogs in a directory, in file name order"""
    species_dir = Path(species_dir)
    if not species_dir.exists():
        raise DataLoadError(f"Species directory not found: {species_dir}")

    species_list = []
    yaml_files = sorted(species_dir.glob("*.yaml"))
    for yaml_file in yaml_files:
        species_list.extend(load_species_catalog(yaml_file, schema_dir))

    if not yaml_files:
        raise DataLoadError(f"No species files found in {species_dir}")

    return species_list

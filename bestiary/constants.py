"""
Central configuration constants for the bestiary.

Defines data file locations used across modules.
"""

from pathlib import Path


# ============================================================================
# Catalog Loading
# ============================================================================

# Bundled JSON schemas (used when the caller passes no schema_dir)
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schemas"

CATALOG_SCHEMA_FILE = "species_catalog.schema.json"

"""Constants for the project."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

# ============================================================================
# Configuration
# ============================================================================
CONFIG_FOLDER = PROJECT_ROOT / "config"
SCORING_YAML = CONFIG_FOLDER / "scoring.yaml"

# ============================================================================
# Output formatting
# ============================================================================
LABEL_WIDTH = 10

"""Test package for dnadiff."""

import sys
from pathlib import Path

# Make dnadiff and scripts importable from a plain checkout
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

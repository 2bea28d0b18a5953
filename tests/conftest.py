from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]
# Make the package importable without installing it
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Keep test runs from writing logs or reading config in the user's home
_TMP = Path(tempfile.mkdtemp(prefix="spellrank-tests-"))
os.environ.setdefault("SPELLRANK_LOG_DIR", str(_TMP / "logs"))
os.environ.setdefault("SPELLRANK_CONFIG", str(_TMP / "config.json"))

# bitdist/config.py
import json
from pathlib import Path
from typing import Any, Dict

DEFAULTS: Dict[str, Any] = {
    "count": None,
    "width": None,
    "height": None,
    "mode": "random",     # random | input
    "values": None,       # list of 0/1 or a string of bits, only for mode=input
    "seed": None,
    "method": "bfs",      # bfs | brute
}


def load_config(path: str | Path) -> Dict[str, Any]:
    """Reads a JSON config and fills missing keys from DEFAULTS. Unknown keys are kept."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        cfg = json.load(f)
    return {**DEFAULTS, **cfg}

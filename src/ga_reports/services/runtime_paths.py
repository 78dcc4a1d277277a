from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional

def resolve_runtime_path(rel_path: str | Path) -> Optional[str]:
    """Search for a relative resource (e.g., '.env' or 'resources/service-account-credentials.json')
    in this order:
    1) Absolute paths are checked as given
    2) Next to the .exe when running frozen (PyInstaller)
    3) Current working directory (cwd)
    4) The project root (the folder holding src/) and src/ itself

    Returns str with the found path, or None if it doesn't exist anywhere.
    """
    rel_path = Path(rel_path)

    if rel_path.is_absolute():
        return str(rel_path) if rel_path.exists() else None

    candidates: list[Path] = []

    if getattr(sys, "frozen", False):
        candidates.append(Path(sys.executable).parent / rel_path)

    candidates.append(Path.cwd() / rel_path)

    # src/ga_reports/services/runtime_paths.py -> parents[2] is src/, parents[3] the project root
    this_file = Path(__file__).resolve()
    candidates.extend(base / rel_path for base in (this_file.parents[3], this_file.parents[2]))

    for p in candidates:
        if p.exists():
            return str(p)

    return None

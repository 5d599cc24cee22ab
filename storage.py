from __future__ import annotations

import json
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Dict, List

from models import Project

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.environ.get("SAW_DATA_DIR", "data"))
PROJECT_SUFFIX = ".json"


def data_dir() -> Path:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    return DATA_DIR


def slugify(name: str) -> str:
    slug = re.sub(r"[^a-zA-Z0-9_-]+", "-", name.strip()).strip("-").lower()
    return slug if slug else "project"


def project_path(name: str) -> Path:
    return data_dir() / (slugify(name) + PROJECT_SUFFIX)


def _write_json(path: Path, payload) -> None:
    # Write beside the target and swap in, so a failed dump never leaves a truncated file.
    fd, temp_name = tempfile.mkstemp(dir=path.parent, prefix=".", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
        os.replace(temp_name, path)
    except BaseException:
        os.unlink(temp_name)
        raise


def list_projects() -> Dict[str, str]:
    """Map each stored slug to the project name saved inside it."""
    projects: Dict[str, str] = {}
    for path in sorted(data_dir().glob("*" + PROJECT_SUFFIX)):
        with path.open("r", encoding="utf-8") as handle:
            projects[path.stem] = json.load(handle).get("name", path.stem)
    return projects


def save_project(project: Project) -> Path:
    path = project_path(project.name)
    _write_json(path, project.to_dict())
    logger.debug("Saved project %r to %s", project.name, path)
    return path


def load_project(name: str) -> Project | None:
    path = project_path(name)
    if not path.is_file():
        logger.debug("No stored project %r at %s", name, path)
        return None
    with path.open("r", encoding="utf-8") as handle:
        return Project.from_dict(json.load(handle))


def export_scored_records(project: Project, path: Path) -> List[dict]:
    records = project.scored_records()
    _write_json(path, records)
    logger.debug("Exported %d scored records for %r to %s", len(records), project.name, path)
    return records


def delete_project(name: str) -> bool:
    path = project_path(name)
    if not path.exists():
        return False
    path.unlink()
    logger.debug("Deleted project %r", name)
    return True

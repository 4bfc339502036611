import json
import logging
from pathlib import Path
from typing import List

from .models import TremaSwitch

logger = logging.getLogger(__name__)

DESCRIPTOR_FILE = "switches.json"


def save_switches(data_dir: Path, switches: List[TremaSwitch]) -> Path:
    """Write switch descriptors to <data_dir>/switches.json."""
    data_dir.mkdir(parents=True, exist_ok=True)
    file_path = data_dir / DESCRIPTOR_FILE
    logger.info("Saving %s switch descriptor(s) to %s", len(switches), file_path)

    payload = [sw.as_dict() for sw in switches]

    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, sort_keys=True)

    return file_path


def load_switches(data_dir: Path) -> List[dict]:
    """
    Load switch descriptors previously written by save_switches().

    Returns a list of dicts:
        [{"name": "...", "dpid_short": ..., "dpid_long": ..., "ports": "..."}, ...]
    """
    file_path = data_dir / DESCRIPTOR_FILE
    if not file_path.is_file():
        logger.warning("Descriptor file %s does not exist.", file_path)
        return []

    logger.info("Loading switch descriptors from %s", file_path)
    with open(file_path, "r", encoding="utf-8") as fh:
        try:
            return json.load(fh)
        except json.JSONDecodeError as exc:
            logger.error("Failed to parse %s: %s", file_path, exc)
            return []

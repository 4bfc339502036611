import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Set

import yaml

from .logging_config import resolve_level
from .models import TremaSwitch

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "switches.yaml"


@dataclass
class Settings:
    switches: List[TremaSwitch]
    output_dir: Path
    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    source: Optional[Path] = field(default=None, compare=False)


def _parse_switch(index: int, raw: object) -> TremaSwitch:
    """Build one switch from a `switches:` entry, applying name, dpid and ports in that order."""
    if not isinstance(raw, dict):
        raise RuntimeError(f"switches[{index}] must be a mapping/object")

    name = raw.get("name")
    if name is not None and not isinstance(name, str):
        raise RuntimeError(f"switches[{index}].name must be a string or null")

    switch = TremaSwitch(name)

    dpid = raw.get("dpid")
    if dpid is not None:
        if not isinstance(dpid, str):
            raise RuntimeError(f"switches[{index}].dpid must be a string (quote hex values in YAML)")
        try:
            switch.set_dpid(dpid)
        except ValueError as exc:
            raise RuntimeError(f"switches[{index}].dpid is invalid: {dpid!r}") from exc

    ports = raw.get("ports")
    if ports is not None:
        if not isinstance(ports, str):
            raise RuntimeError(f"switches[{index}].ports must be a quoted comma-separated string")
        switch.set_ports(ports)

    return switch


def _parse_switches(raw: object) -> List[TremaSwitch]:
    if raw is None:
        raise RuntimeError("switches is required")
    if not isinstance(raw, list):
        raise RuntimeError("switches must be a list")
    if not raw:
        logger.warning("No switches declared in configuration")

    switches: List[TremaSwitch] = []
    seen: Set[str] = set()
    for index, entry in enumerate(raw):
        switch = _parse_switch(index, entry)
        if switch.name is not None:
            if switch.name in seen:
                raise RuntimeError(f"Switch {switch.name!r} is declared more than once")
            seen.add(switch.name)
        logger.debug("Declared %r", switch)
        switches.append(switch)

    return switches


def _load_settings_from_yaml(path: Path) -> Settings:
    """Load settings and switch declarations from a single YAML config file."""
    if not path.is_file():
        raise RuntimeError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        raise RuntimeError(f"Failed to read YAML config: {path}") from exc

    if not isinstance(raw, dict):
        raise RuntimeError("YAML config root must be a mapping/object")

    # Runtime config
    runtime = raw.get("runtime") or {}
    if not isinstance(runtime, dict):
        raise RuntimeError("runtime must be a mapping/object")

    log_level = runtime.get("log_level") or "INFO"
    try:
        resolve_level(log_level)
    except RuntimeError as exc:
        raise RuntimeError(f"runtime.log_level is invalid: {log_level!r}") from exc

    output_dir_raw = runtime.get("output_dir") or "data"
    if not isinstance(output_dir_raw, str):
        raise RuntimeError("runtime.output_dir must be a string or null")
    output_dir = Path(output_dir_raw)

    log_dir_raw = runtime.get("log_dir")
    if log_dir_raw is not None and not isinstance(log_dir_raw, str):
        raise RuntimeError("runtime.log_dir must be a string or null")
    log_dir = Path(log_dir_raw) if log_dir_raw and log_dir_raw.strip() else None

    switches = _parse_switches(raw.get("switches"))
    output_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Loaded %s switch declaration(s) from %s", len(switches), path)

    return Settings(
        switches=switches,
        output_dir=output_dir,
        log_level=log_level,
        log_dir=log_dir,
        source=path,
    )


def load_settings(path: Optional[str] = None) -> Settings:
    """Load settings from `path`, or APP_CONFIG_FILE, or ./switches.yaml."""
    config_file = path or os.getenv("APP_CONFIG_FILE") or DEFAULT_CONFIG_FILE
    return _load_settings_from_yaml(Path(config_file))

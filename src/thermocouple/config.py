from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence, Tuple

from .calibration import DOMAIN_MODES, PRECISIONS, Calibration, resolve
from .tables import TABLES, get_table

logger = logging.getLogger(__name__)

ALL_TYPES: Tuple[str, ...] = tuple(sorted(TABLES))


@dataclass(frozen=True)
class EngineConfig:
    """Deployment switches, resolved once when a thermocouple is built."""

    precision: str = "double"  # double | single
    domain_check: str = "strict"  # strict | extrapolate
    types: Tuple[str, ...] = field(default=ALL_TYPES)

    def __post_init__(self) -> None:
        if self.precision not in PRECISIONS:
            raise ValueError(
                f"Unsupported precision '{self.precision}'. Expected one of {sorted(PRECISIONS)}"
            )
        if self.domain_check not in DOMAIN_MODES:
            raise ValueError(
                f"Unsupported domain_check '{self.domain_check}'. Expected one of {sorted(DOMAIN_MODES)}"
            )
        normalized = tuple(get_table(name).name for name in self.types)
        if not normalized:
            raise ValueError("At least one thermocouple type must be enabled")
        object.__setattr__(self, "types", normalized)

    def calibration(self, type_name: str) -> Calibration:
        table = get_table(type_name)
        if table.name not in self.types:
            raise ValueError(
                f"Thermocouple type {table.name} is not enabled (enabled: {', '.join(self.types)})"
            )
        return resolve(table, self.precision, self.domain_check)


DEFAULT_CONFIG = EngineConfig()


def _load_json(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Engine config {path} must be a JSON object")
    return data


def load_config(path: Path | str | None = None, overrides: Sequence[str] | None = None) -> EngineConfig:
    """
    Load an engine configuration from JSON and apply CLI-style overrides.

    Overrides are expressed as `key=value` pairs, e.g.:
        ["precision=single", "types=[\"K\", \"J\"]"]
    A comma separated string is also accepted for `types`.
    """
    merged: Dict[str, Any] = {}
    if path is not None:
        merged.update(_load_json(Path(path)))
        logger.info("Loaded engine config from %s", path)
    for override in overrides or []:
        key, value = _parse_override(override)
        merged[key] = value
    unknown = set(merged) - {"precision", "domain_check", "types"}
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    types = merged.get("types", ALL_TYPES)
    if isinstance(types, str):
        types = [item for item in types.split(",") if item.strip()]
    config = EngineConfig(
        precision=str(merged.get("precision", "double")).lower(),
        domain_check=str(merged.get("domain_check", "strict")).lower(),
        types=tuple(str(item) for item in types),
    )
    logger.debug(
        "Engine config: precision=%s domain_check=%s types=%s",
        config.precision,
        config.domain_check,
        ",".join(config.types),
    )
    return config


def _parse_override(item: str) -> tuple[str, Any]:
    if "=" not in item:
        raise ValueError(f"Override '{item}' must use key=value syntax")
    key, raw_value = item.split("=", 1)
    key = key.strip()
    if not key:
        raise ValueError("Override key may not be empty")
    value = _coerce_value(raw_value.strip())
    return key, value


def _coerce_value(raw: str) -> Any:
    if raw.lower() in {"true", "false"}:
        return raw.lower() == "true"
    try:
        if "." in raw or "e" in raw.lower():
            return float(raw)
        return int(raw)
    except ValueError:
        pass
    if raw.startswith("[") and raw.endswith("]"):
        return json.loads(raw)
    return raw


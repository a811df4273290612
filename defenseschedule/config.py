"""
Configuration file handling.

The configuration tells the parser where the schedule lives and which themes
workbook belongs to which level of education:

    {
      "schedule": "https://disk.yandex.ru/i/...",
      "themes": {
        "бакалавры техпрога": "themes/bachelors_pt.xlsx",
        "магистры ПИ": ""
      },
      "chair_sheets": {"Информатика/ПА": ["Информатики", "ПА"]},
      "strict_levels": false
    }

An empty themes entry means "no consultants for this level".

The flat layout written by the older tool is accepted as well:

    {"Расписание": "...", "Темы ВКР, бакалавры техпрога": "...", ...}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from defenseschedule.errors import ConfigError


DEFAULT_CONFIG_PATH = Path("Config") / "config.json"

LEGACY_SCHEDULE_KEY = "Расписание"
LEGACY_THEMES_PREFIX = "Темы ВКР, "

# A composite chair is spread over several sheets of the themes workbook.
DEFAULT_CHAIR_SHEETS: Dict[str, List[str]] = {
    "Информатика/ПА": ["Информатики", "ПА"],
}

TEMPLATE_LEVELS = (
    "бакалавры техпрога",
    "бакалавры ПИ",
    "магистры техпрога",
    "магистры ПИ",
)

PLACEHOLDER = "путь или ссылка на файл"


@dataclass
class Config:
    """
    Locations of the schedule and of the themes workbooks.
    """

    schedule: str
    themes: Dict[str, str] = field(default_factory=dict)
    chair_sheets: Dict[str, List[str]] = field(default_factory=lambda: dict(DEFAULT_CHAIR_SHEETS))
    strict_levels: bool = False

    def themes_location(self, level: str) -> str:
        """
        Return the themes workbook location for a level, '' if none.
        """
        return (self.themes.get(level) or "").strip()


def _as_str_dict(value: Any, key: str) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' must be an object")
    return {str(k): "" if v is None else str(v) for k, v in value.items()}


def _as_chair_sheets(value: Any) -> Dict[str, List[str]]:
    if not isinstance(value, dict):
        raise ConfigError("'chair_sheets' must be an object")
    out: Dict[str, List[str]] = {}
    for chair, sheets in value.items():
        if isinstance(sheets, str):
            sheets = [sheets]
        if not isinstance(sheets, list) or not sheets:
            raise ConfigError(f"'chair_sheets' entry for {chair!r} must be a sheet name or a list of names")
        out[str(chair)] = [str(s) for s in sheets]
    return out


def config_from_dict(data: Any) -> Config:
    """
    Build a Config from decoded JSON, native or legacy layout.
    """
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    schedule = data.get("schedule", data.get(LEGACY_SCHEDULE_KEY))
    if not isinstance(schedule, str) or not schedule.strip():
        raise ConfigError("Configuration has no schedule location")

    themes = _as_str_dict(data.get("themes", {}), "themes")

    # legacy: one top-level key per level
    for key, value in data.items():
        if key.startswith(LEGACY_THEMES_PREFIX):
            level = key[len(LEGACY_THEMES_PREFIX):].strip()
            themes.setdefault(level, "" if value is None else str(value))

    chair_sheets = dict(DEFAULT_CHAIR_SHEETS)
    if "chair_sheets" in data:
        chair_sheets.update(_as_chair_sheets(data["chair_sheets"]))

    return Config(
        schedule=schedule.strip(),
        themes=themes,
        chair_sheets=chair_sheets,
        strict_levels=bool(data.get("strict_levels", False)),
    )


def load_config(path: str | Path | None = None) -> Config:
    """
    Load the configuration file (default: Config/config.json).

    Raises ConfigError if the file is missing or invalid.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {config_path}") from exc
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Configuration file is invalid: {config_path} ({exc})") from exc

    return config_from_dict(data)


def write_default_config(path: str | Path | None = None) -> bool:
    """
    Write a configuration template with placeholders.

    An existing file is never overwritten. Returns True if a file was written.
    """
    config_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if config_path.exists():
        return False

    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "schedule": PLACEHOLDER,
        "themes": {level: PLACEHOLDER for level in TEMPLATE_LEVELS},
        "chair_sheets": DEFAULT_CHAIR_SHEETS,
        "strict_levels": False,
    }
    config_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return True

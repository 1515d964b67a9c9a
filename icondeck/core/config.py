from typing import Any, List, Optional
import json
import os
from pydantic import BaseModel, Field
from loguru import logger
from .events import Signal

# Arbitrary upper bound on catalog size; the source library ships ~1000 glyphs.
DEFAULT_MAX_ICONS = 800

# Non-icon exports incidentally exposed by icon packages (factories, aliases).
DEFAULT_EXCLUDED_EXPORTS = ["default", "icons", "create_icon", "createLucideIcon"]

# --- Settings Models ---
class GeneralSettings(BaseModel):
    debug_mode: bool = True
    theme: str = "collection_detail"
    log_dir: str = "logs"
    log_to_file: bool = True

class CatalogSettings(BaseModel):
    max_icons: int = Field(DEFAULT_MAX_ICONS, ge=0)
    excluded_exports: List[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_EXPORTS))

class ClipboardSettings(BaseModel):
    notification_timeout_ms: int = 2000
    notify_on_success: bool = True

class SnippetSettings(BaseModel):
    package: str = "lucide-react"
    iconify_prefix: str = "lucide"
    iconify_api: str = "https://api.iconify.design"

class PresentationSettings(BaseModel):
    filler_seed: Optional[int] = None

class AppConfig(BaseModel):
    general: GeneralSettings = Field(default_factory=GeneralSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    clipboard: ClipboardSettings = Field(default_factory=ClipboardSettings)
    snippets: SnippetSettings = Field(default_factory=SnippetSettings)
    presentation: PresentationSettings = Field(default_factory=PresentationSettings)

# --- Manager ---
class ConfigManager:
    """
    Manages application configuration with persistence and reactivity.
    """
    def __init__(self, filepath: str = "icondeck.json"):
        self.filepath = filepath
        self._data = AppConfig()
        self.on_changed = Signal("ConfigChanged")
        self._load()

    @property
    def data(self) -> AppConfig:
        return self._data

    def update(self, section: str, key: str, value: Any):
        """Update a setting, validate via Pydantic, autosave, and emit change event."""
        if not hasattr(self._data, section):
            raise ValueError(f"Invalid section: {section}")

        section_obj = getattr(self._data, section)
        if not hasattr(section_obj, key):
            raise ValueError(f"Invalid key: {key} in section {section}")

        validated = type(section_obj).model_validate({**section_obj.model_dump(), key: value})
        setattr(self._data, section, validated)
        self._save()
        self.on_changed.emit(section, key, getattr(validated, key))

    def get(self, section: str, key: str) -> Any:
        section_obj = getattr(self._data, section)
        return getattr(section_obj, key)

    def _load(self):
        """Load settings from JSON or TOML file if present; otherwise keep defaults."""
        if os.path.isfile(self.filepath):
            try:
                if self.filepath.endswith('.toml'):
                    import tomllib
                    with open(self.filepath, "rb") as f:
                        raw = tomllib.load(f)
                else:
                    with open(self.filepath, "r", encoding="utf-8") as f:
                        raw = json.load(f)
                self._data = AppConfig.model_validate(raw)
            except Exception as e:
                logger.error(f"Failed to load config from {self.filepath}: {e}")
                self._save()
        else:
            self._save()

    def _save(self):
        """Persist current config to JSON file."""
        if self.filepath.endswith('.toml'):
            # tomllib is read-only
            return
        try:
            dirname = os.path.dirname(self.filepath)
            if dirname:
                os.makedirs(dirname, exist_ok=True)
            with open(self.filepath, "w", encoding="utf-8") as f:
                json.dump(self._data.model_dump(), f, indent=4)
        except Exception as e:
            logger.error(f"Failed to save config to {self.filepath}: {e}")

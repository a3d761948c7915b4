"""
Locale preference persistence.

Handles:
- Reading/writing the locale preference to ~/.phrasal/preferences.yaml
- Locale validation
- Thread-safe and process-safe file access

Concurrency Safety:
- Thread locks (threading.Lock) protect against races within a single process
- File locks (fcntl.flock) protect against races between processes
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Any

import yaml

from phrasal.i18n.detector import detect_os_locale, parse_locale
from phrasal.i18n.errors import ConfigurationError
from phrasal.i18n.locales import DEFAULT_LOCALE, SUPPORTED_LOCALES

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "PHRASAL_LOCALE"
CATALOG_DIR_ENV_VAR = "PHRASAL_CATALOG_DIR"


def normalize_locale_code(value: Any) -> str | None:
    """
    Turn user input into a supported locale code.

    Exact codes (including pseudo-locales such as "en_A*") are accepted as
    is; anything else goes through the OS locale parser, so "cs", "en-gb"
    and "de_DE.UTF-8" work too.

    Returns:
        Supported locale code, or None
    """
    if not isinstance(value, str):
        return None
    value = value.strip()
    if value in SUPPORTED_LOCALES:
        return value
    parsed = parse_locale(value)
    return parsed if parsed in SUPPORTED_LOCALES else None


class LocaleConfig:
    """
    Manages locale preference persistence.

    Preference resolution order:
    1. PHRASAL_LOCALE environment variable
    2. User preference in ~/.phrasal/preferences.yaml
    3. OS-detected locale
    4. Default (en_US)
    """

    def __init__(self) -> None:
        self.config_dir = Path.home() / ".phrasal"
        self.preferences_file = self.config_dir / "preferences.yaml"
        self._thread_lock = threading.Lock()

    def _acquire_file_lock(self, file_obj: Any, exclusive: bool = False) -> None:
        """
        Acquire a file lock for concurrent access.

        Uses fcntl.flock on Unix systems. On Windows only the thread lock
        applies.
        """
        if sys.platform != "win32":
            import fcntl

            lock_type = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
            try:
                fcntl.flock(file_obj.fileno(), lock_type)
            except OSError as e:
                logger.debug(f"Could not acquire file lock: {e}")

    def _release_file_lock(self, file_obj: Any) -> None:
        if sys.platform != "win32":
            import fcntl

            try:
                fcntl.flock(file_obj.fileno(), fcntl.LOCK_UN)
            except OSError as e:
                logger.debug(f"Could not release file lock: {e}")

    def _load_preferences(self) -> dict[str, Any]:
        """
        Load preferences from file with proper locking.

        Returns:
            Dictionary of preferences, or empty dict on failure

        Handles:
            - Missing or empty file
            - Malformed YAML (logs warning)
            - Root value that is not a mapping
        """
        try:
            with self._thread_lock:
                if not self.preferences_file.exists():
                    return {}

                with open(self.preferences_file, encoding="utf-8") as f:
                    self._acquire_file_lock(f, exclusive=False)
                    try:
                        content = f.read()
                        if not content.strip():
                            return {}

                        data = yaml.safe_load(content)
                        if data is None:
                            return {}
                        if not isinstance(data, dict):
                            logger.warning(
                                f"Preferences file contains invalid type: {type(data).__name__}, "
                                "expected dict. Using defaults."
                            )
                            return {}

                        return data
                    finally:
                        self._release_file_lock(f)

        except yaml.YAMLError as e:
            logger.warning(f"Malformed YAML in preferences file: {e}. Using defaults.")
            return {}
        except OSError as e:
            logger.debug(f"Could not read preferences file: {e}")
            return {}

    def _save_preferences(self, preferences: dict[str, Any]) -> None:
        """
        Save preferences atomically (temp file, then rename).

        Raises:
            RuntimeError: If preferences cannot be saved
        """
        try:
            with self._thread_lock:
                self.config_dir.mkdir(mode=0o700, parents=True, exist_ok=True)
                temp_file = self.preferences_file.with_suffix(".yaml.tmp")

                with open(temp_file, "w", encoding="utf-8") as f:
                    self._acquire_file_lock(f, exclusive=True)
                    try:
                        yaml.safe_dump(preferences, f, default_flow_style=False, allow_unicode=True)
                    finally:
                        self._release_file_lock(f)

                temp_file.replace(self.preferences_file)

        except OSError as e:
            raise RuntimeError(f"Could not save preferences: {e}") from e

    def get_locale(self) -> str:
        """
        Get the effective locale code.

        Returns:
            Locale code from the first source that names a supported locale
        """
        return self.get_locale_info()["locale"]

    def set_locale(self, code: str) -> None:
        """
        Persist a locale preference.

        Args:
            code: Locale code, or anything normalize_locale_code() accepts

        Raises:
            ConfigurationError: If the locale is not supported
        """
        locale = normalize_locale_code(code)
        if locale is None:
            raise ConfigurationError(
                f"Unsupported locale: {code}. Supported: {', '.join(sorted(SUPPORTED_LOCALES))}"
            )

        preferences = self._load_preferences()
        old_locale = preferences.get("locale")
        preferences["locale"] = locale
        self._save_preferences(preferences)
        logger.debug(f"Locale preference changed: {old_locale} -> {locale}")

    def clear_locale(self) -> None:
        """Remove the saved preference so detection is used again."""
        preferences = self._load_preferences()
        if "locale" in preferences:
            old_locale = preferences.pop("locale")
            self._save_preferences(preferences)
            logger.debug(f"Locale preference cleared (was {old_locale})")

    def get_catalog_dir(self) -> Path | None:
        """
        Directory holding <locale>.yaml catalogs, if one is configured.

        PHRASAL_CATALOG_DIR wins over the `catalog_dir` preference.
        """
        value = os.environ.get(CATALOG_DIR_ENV_VAR) or self._load_preferences().get("catalog_dir")
        if isinstance(value, str) and value:
            return Path(value).expanduser()
        return None

    def get_locale_info(self) -> dict[str, Any]:
        """
        Get detailed locale configuration info.

        Returns:
            Dictionary with the effective locale, where it came from
            ("environment", "config", "auto-detected" or "default") and
            the value of each source
        """
        env_locale = normalize_locale_code(os.environ.get(LOCALE_ENV_VAR, ""))
        saved_locale = normalize_locale_code(self._load_preferences().get("locale"))
        detected_locale = detect_os_locale()

        if env_locale:
            effective, source = env_locale, "environment"
        elif saved_locale:
            effective, source = saved_locale, "config"
        elif detected_locale in SUPPORTED_LOCALES:
            effective, source = detected_locale, "auto-detected"
        else:
            effective, source = DEFAULT_LOCALE, "default"

        return {
            "locale": effective,
            "source": source,
            "name": SUPPORTED_LOCALES[effective].name,
            "env_override": env_locale,
            "saved_preference": saved_locale,
            "detected_locale": detected_locale,
        }

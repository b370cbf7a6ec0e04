"""
Configuration for repository loading, prompting and diagram output.

Values come from three layers applied in order: the built-in defaults,
an optional JSON file and REPOUML_<SECTION>_<KEY> environment variables.
"""

import os
import copy
import json
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)

ENV_PREFIX = "REPOUML_"


def convert_value(raw: str) -> Any:
    """
    Interpret an environment variable value.

    Numbers become int or float, true/yes and false/no become booleans,
    JSON literals are decoded and anything else stays a string.
    """
    for numeric in (int, float):
        try:
            return numeric(raw)
        except ValueError:
            continue

    lowered = raw.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False

    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def merge_into(base: Dict, overrides: Dict) -> None:
    """Merge overrides into base in place; nested dicts are merged key by key."""
    for key, value in overrides.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merge_into(current, value)
        else:
            base[key] = value


class Settings:
    """
    Layered settings store.

    Sections:
        llm: chat model name, sampling and retry policy
        repository: caps on the files read from a checkout
        prompt: file and content limits for the language model path
        output: diagram title, style, language and PlantUML server

    An environment variable names its section with the first segment
    after the prefix; the rest is the key, so REPOUML_LLM_MODEL_NAME
    sets llm.model_name.
    """

    DEFAULT_SETTINGS = {
        "llm": {
            "model_name": "gpt-4o-mini",
            "temperature": 0.2,
            "max_tokens": 4000,
            "max_retries": 3,
            "retry_delay": 2.0
        },

        "repository": {
            "max_files": 15,
            "max_file_size": 100000
        },

        # Plain requests use content_length for every file; requests with
        # a focus, classes or extra instructions use the high/low pair
        "prompt": {
            "max_files": 10,
            "content_length": 800,
            "reduced_max_files": 5,
            "reduced_content_length": 400,
            "focused_content_length": {"high": 1500, "low": 500},
            "reduced_focused_content_length": {"high": 800, "low": 300},
            "high_relevance_threshold": 0.7
        },

        "output": {
            "title": "Class Diagram",
            "diagram_style": "default",
            "language": "java",
            "server_url": "http://www.plantuml.com/plantuml/img/",
            "output_directory": "output"
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Build the settings from defaults, a file and the environment.

        Args:
            config_path: JSON file merged over the defaults, if given
        """
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)

        if config_path:
            self.load_from_file(config_path)

        self.apply_environment(os.environ)

    def load_from_file(self, config_path: str) -> bool:
        """
        Merge a JSON file over the current values.

        Returns:
            False when the file is missing or not valid JSON
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                overrides = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read settings file %s: %s", config_path, str(e))
            return False

        merge_into(self.settings, overrides)
        logger.info("Loaded settings from %s", config_path)
        return True

    def apply_environment(self, environ: Dict[str, str]) -> None:
        """Apply REPOUML_<SECTION>_<KEY> variables from a mapping."""
        for name, raw in environ.items():
            if not name.startswith(ENV_PREFIX):
                continue

            section, _, key = name[len(ENV_PREFIX):].lower().partition('_')
            if not key:
                logger.debug("Ignoring %s: no setting key after the section", name)
                continue

            self.settings.setdefault(section, {})[key] = convert_value(raw)
            logger.debug("Applied %s", name)

    def get(self, *path: str, default: Any = None) -> Any:
        """
        Look up a value, e.g. get("prompt", "focused_content_length", "high").

        Returns:
            The value, or default when any component is missing
        """
        node = self.settings
        for part in path:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def set(self, *path_and_value: Any) -> None:
        """
        Store a value, e.g. set("output", "title", "Billing").

        Missing intermediate sections are created.

        Raises:
            ValueError: If fewer than one key and a value are given
        """
        if len(path_and_value) < 2:
            raise ValueError("set() needs at least one key and a value")

        *keys, value = path_and_value
        node = self.settings
        for part in keys[:-1]:
            node = node.setdefault(part, {})
        node[keys[-1]] = value

    def save_to_file(self, config_path: str) -> bool:
        """
        Write all current values as JSON, creating parent directories.

        Returns:
            False when the file cannot be written
        """
        try:
            os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
            with open(config_path, 'w', encoding='utf-8') as f:
                json.dump(self.settings, f, indent=2)
        except OSError as e:
            logger.warning("Could not write settings file %s: %s", config_path, str(e))
            return False

        logger.info("Saved settings to %s", config_path)
        return True

    def get_all(self) -> Dict[str, Any]:
        """Return a deep copy of every section."""
        return copy.deepcopy(self.settings)

    def reset(self) -> None:
        self.settings = copy.deepcopy(self.DEFAULT_SETTINGS)
        logger.info("Settings reset to defaults")

    def reset_section(self, section: str) -> bool:
        """
        Restore one section to its defaults.

        Returns:
            False if the section has no defaults
        """
        if section not in self.DEFAULT_SETTINGS:
            logger.warning("No default settings for section %s", section)
            return False

        self.settings[section] = copy.deepcopy(self.DEFAULT_SETTINGS[section])
        logger.info("Settings section %s reset to defaults", section)
        return True

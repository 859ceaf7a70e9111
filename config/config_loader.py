import os

import yaml

from modules.dungeon.errors import ConfigError
from modules.dungeon.gen.params import GenerationConfig

DEFAULT_SETTINGS_FILE = os.path.join(os.path.dirname(__file__), "dungeon_settings.yaml")


class ConfigLoader:
    def __init__(self, config_file=DEFAULT_SETTINGS_FILE, required=False):
        self.config = {}
        if os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                try:
                    self.config = yaml.safe_load(f) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"{config_file} is not valid YAML: {exc}") from exc
        elif required:
            raise ConfigError(f"settings file {config_file} does not exist")
        if not isinstance(self.config, dict):
            raise ConfigError(f"{config_file} must contain a mapping at top level")

    def get(self, *keys, default=None):
        """
        Return the value stored under the nested ``keys`` path.
        When the path does not exist:
          - raise KeyError if no default was given
          - return the default otherwise
        """
        ref = self.config
        for key in keys:
            if isinstance(ref, dict) and key in ref:
                ref = ref[key]
            else:
                if default is not None:
                    return default
                raise KeyError(f"Configuration key {' -> '.join(keys)} not found and no default provided.")
        return ref

    def generation_config(self, section="dungeon"):
        """Build a validated :class:`GenerationConfig` from ``section``."""
        data = self.get(section, default={})
        if not isinstance(data, dict):
            raise ConfigError(f"'{section}' settings must be a mapping")
        return GenerationConfig.from_mapping(data)


def load_generation_config(path=None, section="dungeon"):
    """Load ``section`` of ``path``; an explicit path must exist, the shipped default may not."""
    if path is None:
        return ConfigLoader(DEFAULT_SETTINGS_FILE).generation_config(section)
    return ConfigLoader(path, required=True).generation_config(section)

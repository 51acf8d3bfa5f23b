import json
import logging
import os
import tomllib

from .exceptions import ConfigError

RC_DIR = "~/.workers"
CONFIG_FILE = "config.json"
PROJECT_CONFIG_FILE = "wrangler.toml"
logger = logging.getLogger(__name__)


class ConfigManager:
    """User-level defaults shared by every project, e.g. the account id."""

    def __init__(self, path=None):
        self._path = os.path.expanduser(path or os.getenv("WORKERS_TOOLS_CONFIG_DIR") or RC_DIR)
        self._data = {}
        self.load()

    def init_path(self):
        """Ensure the config directory exists"""
        logger.debug(f"Creating directory: {self._path}")
        try:
            os.makedirs(self._path, mode=0o700, exist_ok=True)
        except OSError as e:
            msg = f"Cannot create directory {self._path}. Please check directory permissions."
            raise ConfigError(msg) from e

    @property
    def config_path(self):
        return os.path.join(self._path, CONFIG_FILE)

    def load(self):
        self._data = {}
        cpath = self.config_path
        if os.path.isfile(cpath):
            with open(cpath, "r") as fp:
                data = fp.read()
            if data.startswith("{"):
                try:
                    self._data.update(json.loads(data))
                except ValueError as e:
                    raise ConfigError(f"Invalid config file {cpath}: {e}") from e

    def save(self):
        self.init_path()
        with open(self.config_path, "w") as fp:
            json.dump(self._data, fp)

    def get(self, key, default=None):
        return self._data.get(key, default)

    def set(self, key, value):
        self._data[key] = value
        self.save()


class ProjectConfig:
    """The Worker's own configuration file, with per-environment overrides.

    Args:
        data: the parsed top level table of the configuration file.
        path: where the data came from, or None if no file was found.
    """

    def __init__(self, data=None, path=None):
        self._data = data or {}
        self.path = path

    @classmethod
    def read(cls, path=None):
        explicit = path is not None
        path = path or os.path.join(os.getcwd(), PROJECT_CONFIG_FILE)
        if not os.path.isfile(path):
            if explicit:
                raise ConfigError(f"Config file {path} not found.")
            logger.debug(f"No project config at {path}")
            return cls()
        try:
            with open(path, "rb") as fp:
                data = tomllib.load(fp)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
        logger.debug(f"Loaded project config from {path}")
        return cls(data, path)

    @property
    def legacy_env(self):
        return bool(self._data.get("legacy_env", True))

    @property
    def send_metrics(self):
        return self._data.get("send_metrics")

    def _env_table(self, env):
        if not env:
            return {}
        return self._data.get("env", {}).get(env, {})

    def account_id(self, env=None):
        return self._env_table(env).get("account_id") or self._data.get("account_id")

    def name(self, env=None):
        """Worker name as deployed for the given environment."""
        override = self._env_table(env).get("name")
        if override:
            return override
        name = self._data.get("name")
        if name and env and self.legacy_env:
            return f"{name}-{env}"
        return name


config = ConfigManager()

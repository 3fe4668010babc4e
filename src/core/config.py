"""Configuration and settings management."""

import json
import os
import platform
from pathlib import Path

from .platforms import BuildTarget, parse_build_target, native_build_target


class Config:
    """Configuration manager for the build helper."""

    APP_NAME = "BuildHelper"

    # Platform-specific paths
    if platform.system() == "Windows":
        APPDATA_DIR = Path.home() / "AppData" / "Roaming" / APP_NAME
    elif platform.system() == "Darwin":  # macOS
        APPDATA_DIR = Path.home() / "Library" / "Application Support" / APP_NAME
    else:  # Linux
        APPDATA_DIR = Path.home() / ".local" / "share" / APP_NAME

    CONFIG_FILE = APPDATA_DIR / "config.json"
    LOGS_DIR = APPDATA_DIR / "logs"

    # Environment overrides
    ENV_PRODUCT_NAME = "BUILDHELPER_PRODUCT_NAME"
    ENV_BUILD_TARGET = "BUILDHELPER_BUILD_TARGET"
    ENV_LOG_LEVEL = "BUILDHELPER_LOG_LEVEL"

    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    DEFAULT_CONFIG = {
        "version": "1.0.0",
        "product_name": "Product",
        # None means the target native to the running OS
        "active_build_target": None,
    }

    @classmethod
    def ensure_directories(cls):
        """Create necessary directories if they don't exist."""
        cls.APPDATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def load_config(cls):
        """Load configuration from file, merged over the defaults."""
        config = cls.DEFAULT_CONFIG.copy()
        if not cls.CONFIG_FILE.exists():
            return config
        try:
            with open(cls.CONFIG_FILE, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            cls._warn(f"Failed to read {cls.CONFIG_FILE}, using defaults: {e}")
            return config
        if not isinstance(data, dict):
            cls._warn(f"{cls.CONFIG_FILE} is not a JSON object, using defaults")
            return config
        config.update(data)
        return config

    @staticmethod
    def _warn(message):
        # Imported lazily, the logger itself depends on Config
        from .logger import setup_logger
        setup_logger("Config").warning(message)

    @classmethod
    def save_config(cls, config):
        """Save configuration to file."""
        cls.ensure_directories()
        with open(cls.CONFIG_FILE, 'w') as f:
            json.dump(config, f, indent=2)

    @classmethod
    def is_first_run(cls):
        """Check if this is the first run."""
        return not cls.CONFIG_FILE.exists()

    @classmethod
    def get_app_data_dir(cls):
        """Get the application data directory."""
        return cls.APPDATA_DIR

    @classmethod
    def get_product_name(cls, config=None):
        """Product name used for default output filenames."""
        env_name = os.environ.get(cls.ENV_PRODUCT_NAME)
        if env_name:
            return env_name
        if config is None:
            config = cls.load_config()
        name = config.get("product_name")
        if isinstance(name, str) and name:
            return name
        return cls.DEFAULT_CONFIG["product_name"]

    @classmethod
    def get_active_build_target(cls, config=None) -> BuildTarget:
        """Build target used when no valid ``-buildTarget`` is passed.

        The environment override wins over the config file; an unknown or
        missing name falls back to the target native to this OS.
        """
        name = os.environ.get(cls.ENV_BUILD_TARGET)
        if not name:
            if config is None:
                config = cls.load_config()
            name = config.get("active_build_target")
        if isinstance(name, str) and name:
            target = parse_build_target(name)
            if target is not None:
                return target
        return native_build_target()

    @classmethod
    def set_active_build_target(cls, config, build_target):
        """Store the active build target in config."""
        config["active_build_target"] = build_target.name if build_target else None
        return config

    @classmethod
    def get_console_log_level(cls):
        """Console log level name, ``INFO`` unless overridden by env."""
        level = os.environ.get(cls.ENV_LOG_LEVEL, "").upper()
        return level if level in cls.LOG_LEVELS else "INFO"

"""Configuration loader for the HMRC MTD client

Values are looked up in this order:
1. Environment variable with the HMRC_ prefix, e.g. HMRC_CONNECT_TIMEOUT
2. Environment variable without the prefix, e.g. CONNECT_TIMEOUT
3. The default passed by the caller

A .env file, when present, is loaded into the environment first without
overriding variables that are already set.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Tuple
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "HMRC_"

_TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigLoader:
    """Resolves HMRC client settings from the environment and a .env file"""

    def __init__(self, env_path: Optional[str] = None, prefix: str = ENV_PREFIX):
        """
        Args:
            env_path: Path to a .env file, '.env' in the current directory by default
            prefix: Prefix tried before the bare variable name
        """
        self.env_path = Path(env_path) if env_path else Path(".env")
        self.prefix = prefix
        if self.env_path.exists():
            load_dotenv(dotenv_path=self.env_path)
            logger.debug(f"Loaded environment variables from {self.env_path}")

    def candidates(self, name: str) -> Tuple[str, ...]:
        """Environment variable names checked for a setting, in priority order"""
        if not self.prefix or name.startswith(self.prefix):
            return (name,)
        return (f"{self.prefix}{name}", name)

    def lookup(self, name: str) -> Tuple[Optional[str], Optional[str]]:
        """Find the raw value for a setting

        Returns:
            Tuple of (variable name, raw value), both None when unset
        """
        for env_var in self.candidates(name):
            value = os.getenv(env_var)
            if value is not None:
                return env_var, value
        return None, None

    def get(self, name: str, default: Any) -> Any:
        """Get a setting, coerced to the type of ``default``

        Bool, int and float defaults coerce the environment string; a value
        that does not parse logs a warning and yields the default.
        """
        env_var, raw = self.lookup(name)
        if raw is None:
            return default
        return self._coerce(env_var, raw, default)

    @staticmethod
    def _coerce(env_var: str, raw: str, default: Any) -> Any:
        # bool first: it is a subclass of int
        if isinstance(default, bool):
            return raw.strip().lower() in _TRUE_VALUES
        for kind in (int, float):
            if isinstance(default, kind):
                try:
                    return kind(raw)
                except ValueError:
                    logger.warning(f"Failed to parse {env_var}={raw} as {kind.__name__}, using default: {default}")
                    return default
        return raw


_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Get or create the global ConfigLoader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader

'''
Configuration management system for the Unit Root Toolbox.

Settings are grouped into dataclass sections and managed by a single
ConfigManager. Values are layered:

1. Default configurations built into the package
2. A user configuration file (``~/.unitroot/unitroot_config.json``, or the
   directory named by ``UNITROOT_CONFIG_DIR``)
3. Environment variables of the form ``UNITROOT_<SECTION>_<OPTION>``
4. Runtime modifications through ``set_config``

Tests read their defaults from here when they are constructed, so a running
computation never observes a configuration change.
'''

import json
import logging
import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from .exceptions import ConfigurationError
from .types import LogLevel

# Set up module-level logger
logger = logging.getLogger("unitroot.core.config")

# Constants for configuration paths and environment variables
CONFIG_ENV_PREFIX = "UNITROOT_"
DEFAULT_CONFIG_FILENAME = "unitroot_config.json"
USER_CONFIG_DIR_ENV = "UNITROOT_CONFIG_DIR"
DEFAULT_USER_CONFIG_DIR = Path.home() / ".unitroot"


@dataclass
class NumericalConfig:
    """
    Numerical tolerances.

    Attributes:
        matrix_rank_tolerance: Singular values below this fraction of the
            largest one are treated as zero when checking the design rank
        zero_variance_tolerance: A residual sum of squares below this fraction
            of the sum of squared regressands is treated as an exact fit
            (machine epsilon by default)
    """
    matrix_rank_tolerance: float = 1e-10
    zero_variance_tolerance: float = sys.float_info.epsilon


@dataclass
class UnitRootConfig:
    """
    Defaults for the (Augmented) Dickey-Fuller / Phillips-Perron test.

    Attributes:
        lag_significance: Level above which the newest augmented lag is
            considered insignificant and lag selection stops
        max_lags: Upper bound on the selected lag order (None for the largest
            order the sample supports)
        pp_lags: Bartlett bandwidth for the Phillips-Perron long-run variance
            (None for the automatic rule)
        dw_significance: Level at which the Durbin-Watson critical bounds are
            reported
        durbin_h_tails: Number of tails for the Durbin-h significance level
        reject_level: Level used by the unit-root decision rule
        autocorrelation_level: Level at which residual autocorrelation is
            considered significant by the decision rule
    """
    lag_significance: float = 0.05
    max_lags: Optional[int] = None
    pp_lags: Optional[int] = None
    dw_significance: float = 0.05
    durbin_h_tails: int = 2
    reject_level: float = 0.10
    autocorrelation_level: float = 0.05


@dataclass
class LoggingConfig:
    """
    Logging configuration.

    Attributes:
        log_level: Default logging level
        log_file: Path to log file (None for no file logging)
        log_format: Format string for log messages
        log_date_format: Format string for log message timestamps
        console_logging: Whether to log to console
        file_logging: Whether to log to file
    """
    log_level: LogLevel = "WARNING"
    log_file: Optional[Path] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    console_logging: bool = True
    file_logging: bool = False


@dataclass
class UnitRootToolboxConfig:
    """
    Complete configuration for the Unit Root Toolbox.

    Attributes:
        numerical: Numerical tolerances
        unit_root: Unit root test defaults
        logging: Logging configuration
    """
    numerical: NumericalConfig = field(default_factory=NumericalConfig)
    unit_root: UnitRootConfig = field(default_factory=UnitRootConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Constraints checked whenever a value is set
_CONSTRAINTS = {
    "numerical.matrix_rank_tolerance": lambda v: 0.0 < v < 1.0,
    "numerical.zero_variance_tolerance": lambda v: 0.0 <= v < 1.0,
    "unit_root.lag_significance": lambda v: 0.0 < v < 1.0,
    "unit_root.max_lags": lambda v: v is None or v >= 0,
    "unit_root.pp_lags": lambda v: v is None or v >= 0,
    "unit_root.dw_significance": lambda v: 0.0 < v < 1.0,
    "unit_root.durbin_h_tails": lambda v: v in (1, 2),
    "unit_root.reject_level": lambda v: 0.0 < v < 1.0,
    "unit_root.autocorrelation_level": lambda v: 0.0 < v < 1.0,
    "logging.log_level": lambda v: v in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
}

# Options whose default is None; values are coerced with these types
_OPTIONAL_TYPES = {
    "unit_root.max_lags": int,
    "unit_root.pp_lags": int,
    "logging.log_file": Path,
}


class ConfigManager:
    """
    Configuration manager for the Unit Root Toolbox.

    Attributes:
        _config: The current configuration object
        _initialized: Whether the configuration manager has been initialized
        _config_file: Path to the user configuration file
        _modified_keys: Options changed at runtime
    """

    def __init__(self) -> None:
        """Initialize the configuration manager with default settings."""
        self._config = UnitRootToolboxConfig()
        self._initialized = False
        self._config_file: Optional[Path] = None
        self._modified_keys: Set[str] = set()

    def initialize(self) -> None:
        """
        Initialize the configuration manager.

        This method:
        1. Locates the user configuration file
        2. Loads user configuration from file if available
        3. Applies environment variable overrides
        4. Sets up logging based on configuration
        """
        if self._initialized:
            return

        config_dir = Path(os.environ.get(USER_CONFIG_DIR_ENV, DEFAULT_USER_CONFIG_DIR))
        self._config_file = config_dir / DEFAULT_CONFIG_FILENAME

        self._load_user_config()
        self._apply_env_overrides()
        self._setup_logging()

        self._initialized = True
        logger.debug("Configuration manager initialized")

    def _load_user_config(self) -> None:
        """Load user configuration from file, if one exists."""
        if not self._config_file or not self._config_file.exists():
            logger.debug("No user configuration file found")
            return

        try:
            with open(self._config_file, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load user configuration: {e}")
            return

        for section, options in user_config.items():
            if not isinstance(options, dict):
                logger.warning(f"Ignoring malformed configuration section: {section}")
                continue
            for option, value in options.items():
                try:
                    self._set_value(section, option, value)
                except ConfigurationError as e:
                    logger.warning(f"Ignoring configuration value {section}.{option}: {e.message}")
        logger.debug(f"Loaded user configuration from {self._config_file}")

    def _apply_env_overrides(self) -> None:
        """Apply ``UNITROOT_<SECTION>_<OPTION>`` environment overrides."""
        sections = self.get_sections()
        for env_var, value in os.environ.items():
            if not env_var.startswith(CONFIG_ENV_PREFIX) or env_var == USER_CONFIG_DIR_ENV:
                continue

            key = env_var[len(CONFIG_ENV_PREFIX):].lower()
            # Section names may themselves contain underscores
            section = next((s for s in sections if key.startswith(s + "_")), None)
            if section is None:
                continue
            option = key[len(section) + 1:]
            if not self.has_option(section, option):
                continue

            try:
                self._set_value(section, option, value)
                logger.debug(f"Applied environment override: {env_var}={value}")
            except ConfigurationError as e:
                logger.warning(f"Failed to apply environment override {env_var}: {e.message}")

    def _setup_logging(self) -> None:
        """Configure the package logger from the logging section."""
        root_logger = logging.getLogger("unitroot")
        settings = self._config.logging

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        root_logger.setLevel(getattr(logging, settings.log_level))
        formatter = logging.Formatter(fmt=settings.log_format, datefmt=settings.log_date_format)

        if settings.console_logging:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if settings.file_logging and settings.log_file:
            try:
                settings.log_file.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(settings.log_file)
                file_handler.setFormatter(formatter)
                root_logger.addHandler(file_handler)
            except OSError as e:
                logger.warning(f"Failed to set up file logging: {e}")

    def _coerce(self, section: str, option: str, value: Any) -> Any:
        """Convert value to the type of the option's default."""
        key = f"{section}.{option}"
        default = getattr(getattr(UnitRootToolboxConfig(), section), option)

        if value is None:
            if default is None:
                return None
            raise ConfigurationError(
                f"Configuration option {key} cannot be None",
                setting=key,
                issue="None not allowed"
            )

        if isinstance(value, str) and value.lower() == "none" and default is None:
            return None

        target = _OPTIONAL_TYPES.get(key, type(default))
        if target is bool:
            if isinstance(value, str):
                return value.lower() in ("true", "yes", "1", "y")
            return bool(value)
        if target is int and isinstance(value, float) and not value.is_integer():
            raise ValueError(f"expected an integer, got {value}")
        if target is str and option == "log_level":
            return str(value).upper()
        return target(value)

    def _set_value(self, section: str, option: str, value: Any) -> None:
        """Coerce, validate, and store a value."""
        key = f"{section}.{option}"
        if not self.has_section(section):
            raise ConfigurationError(
                f"Unknown configuration section: {section}",
                setting=key,
                value=value,
                issue="Section not found"
            )
        if not self.has_option(section, option):
            raise ConfigurationError(
                f"Unknown configuration option: {key}",
                setting=key,
                value=value,
                issue="Option not found"
            )

        try:
            typed_value = self._coerce(section, option, value)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"Failed to set configuration option: {key}",
                setting=key,
                value=value,
                issue=str(e)
            ) from e

        check = _CONSTRAINTS.get(key)
        if check is not None and not check(typed_value):
            raise ConfigurationError(
                f"Invalid value for configuration option {key}: {typed_value!r}",
                setting=key,
                value=typed_value,
                issue="Constraint violated"
            )

        setattr(getattr(self._config, section), option, typed_value)

    def get(self, section: str, option: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            section: The configuration section
            option: The configuration option
            default: Default value if the option is not found

        Returns:
            The configuration value, or the default if not found
        """
        if not self.has_option(section, option):
            return default
        return getattr(getattr(self._config, section), option)

    def set(self, section: str, option: str, value: Any) -> None:
        """
        Set a configuration value.

        Raises:
            ConfigurationError: If the section or option is not found, or the
                value violates the option's constraint
        """
        self._set_value(section, option, value)
        self._modified_keys.add(f"{section}.{option}")
        if section == "logging":
            self._setup_logging()
        logger.debug(f"Set configuration option: {section}.{option}={value}")

    def reset(self, section: Optional[str] = None, option: Optional[str] = None) -> None:
        """
        Reset configuration to default values.

        Args:
            section: The configuration section to reset, or None to reset all
            option: The option to reset, or None to reset the entire section

        Raises:
            ConfigurationError: If the section or option is not found
        """
        defaults = UnitRootToolboxConfig()

        if section is None:
            self._config = defaults
            self._modified_keys.clear()
            self._setup_logging()
            logger.debug("Reset all configuration options")
            return

        if not self.has_section(section):
            raise ConfigurationError(
                f"Unknown configuration section: {section}",
                setting=section,
                issue="Section not found"
            )

        if option is None:
            setattr(self._config, section, getattr(defaults, section))
            self._modified_keys = {k for k in self._modified_keys
                                   if not k.startswith(section + ".")}
        else:
            if not self.has_option(section, option):
                raise ConfigurationError(
                    f"Unknown configuration option: {section}.{option}",
                    setting=f"{section}.{option}",
                    issue="Option not found"
                )
            setattr(getattr(self._config, section), option,
                    getattr(getattr(defaults, section), option))
            self._modified_keys.discard(f"{section}.{option}")

        if section == "logging":
            self._setup_logging()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the configuration to a JSON-serializable dictionary."""
        result = asdict(self._config)
        for options in result.values():
            for option, value in options.items():
                if isinstance(value, Path):
                    options[option] = str(value)
        return result

    def save_user_config(self) -> None:
        """Write the current configuration to the user configuration file."""
        if self._config_file is None:
            self.initialize()
        assert self._config_file is not None
        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=4)
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration to {self._config_file}",
                setting="config_file",
                value=str(self._config_file),
                issue=str(e)
            ) from e
        logger.debug(f"Saved configuration to {self._config_file}")

    def get_modified_options(self) -> Dict[str, Any]:
        """Return the options changed at runtime and their current values."""
        result = {}
        for key in sorted(self._modified_keys):
            section, option = key.split(".", 1)
            result[key] = self.get(section, option)
        return result

    def has_section(self, section: str) -> bool:
        """Check whether a configuration section exists."""
        return section in self.get_sections()

    def has_option(self, section: str, option: str) -> bool:
        """Check whether a configuration option exists."""
        return self.has_section(section) and option in self.get_options(section)

    def get_sections(self) -> List[str]:
        """Return the names of all configuration sections."""
        return [f.name for f in fields(self._config)]

    def get_options(self, section: str) -> List[str]:
        """
        Return the option names of a section.

        Raises:
            ConfigurationError: If the section is not found
        """
        if section not in [f.name for f in fields(self._config)]:
            raise ConfigurationError(
                f"Unknown configuration section: {section}",
                setting=section,
                issue="Section not found"
            )
        return [f.name for f in fields(getattr(self._config, section))]

    def get_section(self, section: str) -> Any:
        """Return the dataclass holding a section."""
        if not self.has_section(section):
            raise ConfigurationError(
                f"Unknown configuration section: {section}",
                setting=section,
                issue="Section not found"
            )
        return getattr(self._config, section)

    def get_config_file(self) -> Optional[Path]:
        """Return the path of the user configuration file."""
        return self._config_file


# Create a singleton instance of the configuration manager
_config_manager = ConfigManager()


def initialize_config() -> None:
    """Initialize the configuration system."""
    _config_manager.initialize()


def get_config_manager() -> ConfigManager:
    """Return the configuration manager singleton, initializing it if needed."""
    if not _config_manager._initialized:
        initialize_config()
    return _config_manager


def get_config(section: str, option: str, default: Any = None) -> Any:
    """
    Get a configuration value.

    Args:
        section: The configuration section
        option: The configuration option
        default: Default value if the option is not found

    Returns:
        The configuration value, or the default if not found
    """
    return get_config_manager().get(section, option, default)


def set_config(section: str, option: str, value: Any) -> None:
    """
    Set a configuration value.

    Raises:
        ConfigurationError: If the section or option is not found
    """
    get_config_manager().set(section, option, value)


def reset_config(section: Optional[str] = None, option: Optional[str] = None) -> None:
    """Reset configuration to default values."""
    get_config_manager().reset(section, option)


def save_config() -> None:
    """Save the current configuration to the user configuration file."""
    get_config_manager().save_user_config()


def get_numerical_config() -> NumericalConfig:
    """Return the numerical configuration section."""
    return get_config_manager().get_section("numerical")


def get_unit_root_config() -> UnitRootConfig:
    """Return the unit root configuration section."""
    return get_config_manager().get_section("unit_root")


def get_logging_config() -> LoggingConfig:
    """Return the logging configuration section."""
    return get_config_manager().get_section("logging")

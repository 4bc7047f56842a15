"""
ESC/POS Command Encoder
=======================

(Краткое RU: Построение потока команд ESC/POS для чековых принтеров.)

Builds the binary command stream for thermal and impact receipt printers that
speak ESC/POS: text in 31 character tables, formatting, 1D barcodes, QR codes,
dithered raster images and paper cuts.

This package provides:
    - A chainable encoder facade (EscPosEncoder)
    - Codepage transcoding with fixed-width wrapping
    - Barcode validation with check digit completion (python-barcode)
    - QR capacity checking (qrcode)
    - Image resampling and four dithering algorithms (Pillow)

Basic usage:
    >>> from escpos_encoder import EscPosEncoder
    >>>
    >>> data = (
    ...     EscPosEncoder()
    ...     .initialize()
    ...     .codepage("cp437")
    ...     .align("center")
    ...     .size("double")
    ...     .line("RECEIPT")
    ...     .size("normal")
    ...     .barcode("012345678905", "upca", 60)
    ...     .qrcode("https://example.com")
    ...     .cut()
    ...     .encode()
    ... )

Configuration:
    >>> from escpos_encoder import EscPosEncoder, load_config
    >>> encoder = EscPosEncoder(load_config())

Logging is controlled with ESCPOS_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
CRITICAL) and, optionally, ESCPOS_LOG_FILE for a rotating log file.

Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Dict, Optional, Union

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "ESC/POS Encoder Development Team"
__description__ = "Command stream encoder for ESC/POS receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# PYTHON VERSION CHECK
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"escpos_encoder requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

_PACKAGE_LOGGER = "escpos_encoder"

_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler for WARNING and above
    - rotating file handler (10 MiB x 5) when ESCPOS_LOG_FILE is set
    - level from ESCPOS_LOG_LEVEL, INFO by default

    Idempotent: a logger that already has handlers is left alone.
    """
    log_level_str = os.environ.get("ESCPOS_LOG_LEVEL", "INFO").upper()
    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(_PACKAGE_LOGGER)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)
    root_logger.propagate = False

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("ESCPOS_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 MiB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Could not open log file %s: %s. Logging to stderr only.", log_file, e
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger namespaced under ``escpos_encoder``.

    Args:
        module_name: Usually ``__name__``.

    Example:
        >>> logger = get_logger("my_plugin")
        >>> logger.name
        'escpos_encoder.my_plugin'
    """
    if module_name == _PACKAGE_LOGGER or module_name.startswith(_PACKAGE_LOGGER + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_PACKAGE_LOGGER}.main")
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{module_name.lstrip('.')}")


_setup_logging()

# =============================================================================
# PUBLIC API IMPORTS
# =============================================================================

# Imported after the logging helpers so submodule loggers find the package
# logger configured.

from escpos_encoder.config import DEFAULT_CONFIG, EncoderConfig  # noqa: E402
from escpos_encoder.encoder import EscPosEncoder  # noqa: E402
from escpos_encoder.exceptions import (  # noqa: E402
    ConfigError,
    EncoderError,
    StateError,
    ValidationError,
)
from escpos_encoder.model import (  # noqa: E402
    Alignment,
    Bold,
    Codepage,
    CutType,
    DitherAlgorithm,
    PrintState,
    QRErrorLevel,
    QRModel,
    Symbology,
    TextSize,
    Underline,
)

# =============================================================================
# CONFIGURATION
# =============================================================================

_DEFAULT_CONFIG_FILE = "escpos_encoder.json"


def load_config(config_path: Optional[Union[str, Path]] = None) -> EncoderConfig:
    """
    Load the encoder configuration from a JSON file, or use the defaults.

    Lookup order: ``config_path``, the ESCPOS_CONFIG environment variable,
    ``escpos_encoder.json`` in the working directory. A missing, unreadable or
    invalid file never raises: the defaults are returned and a warning is
    logged.

    Example:
        >>> config = load_config()
        >>> config.fallback_char
        '?'
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = os.environ.get("ESCPOS_CONFIG") or _DEFAULT_CONFIG_FILE
    path = Path(config_path)

    if not path.exists():
        logger.info("Config file %s not found, using defaults", path)
        return DEFAULT_CONFIG

    try:
        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)
        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, got {type(user_config).__name__}"
            )
        config = EncoderConfig.from_mapping(user_config)
    except json.JSONDecodeError as e:
        logger.warning(
            "Could not parse %s: invalid JSON at line %d, column %d. Using defaults.",
            path,
            e.lineno,
            e.colno,
        )
        return DEFAULT_CONFIG
    except OSError as e:
        logger.warning("Could not read %s: %s. Using defaults.", path, e)
        return DEFAULT_CONFIG
    except (ValueError, TypeError, ConfigError) as e:
        logger.warning("Invalid configuration in %s: %s. Using defaults.", path, e)
        return DEFAULT_CONFIG

    logger.info("Configuration loaded from %s", path)
    logger.debug("Configuration: %s", config.to_dict())
    return config


def check_dependencies() -> Dict[str, bool]:
    """
    Report which third-party dependencies are importable.

    Returns:
        Mapping of distribution name to availability.
    """
    dependencies: Dict[str, bool] = {}

    try:
        import PIL  # noqa: F401

        dependencies["pillow"] = True
    except ImportError:
        dependencies["pillow"] = False

    try:
        import barcode  # noqa: F401

        dependencies["python-barcode"] = True
    except ImportError:
        dependencies["python-barcode"] = False

    try:
        import qrcode  # noqa: F401

        dependencies["qrcode"] = True
    except ImportError:
        dependencies["qrcode"] = False

    return dependencies


# =============================================================================
# PUBLIC API
# =============================================================================

__all__ = [
    # Version metadata
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    "check_dependencies",
    # Encoder
    "EscPosEncoder",
    "EncoderConfig",
    "DEFAULT_CONFIG",
    "PrintState",
    # Enums
    "Alignment",
    "Bold",
    "Codepage",
    "CutType",
    "DitherAlgorithm",
    "QRErrorLevel",
    "QRModel",
    "Symbology",
    "TextSize",
    "Underline",
    # Exceptions
    "EncoderError",
    "ConfigError",
    "StateError",
    "ValidationError",
]

_logger = get_logger(__name__)
_logger.debug("escpos_encoder v%s initialised (Python %s)", __version__, sys.version)

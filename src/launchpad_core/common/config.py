"""
Environment configuration for launchpad_core.

Values are read from the process environment after loading a ``.env`` file
with python-dotenv. Every setting falls back to the parameters of the
deployed launch contract, so an empty environment yields the production curve.

Environment Variables:
    CURVE_INITIAL_PRICE: price per token at zero supply
    CURVE_MAX_SUPPLY: absolute token supply ceiling
    CURVE_BONDING_PERCENT: percent of max supply sold through the curve
    CURVE_PRICE_STEP_SIZE: divisor controlling curve steepness
    CURVE_CREATOR_MAX_BUY_PERCENT: creator buy cap, percent of the curve allocation
    CURVE_FEE_PERCENT: fee deducted from sell proceeds, in percent
    TRADE_SLIPPAGE: fraction used for the minimum-tokens-out floor (0.01 = 1%)
    API_HOST / API_PORT / API_DEBUG: HTTP API bind settings
    LOG_LEVEL: logging level name
"""
import logging
import os
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

from launchpad_core.common.errors import ConfigurationError
from launchpad_core.common.model import BondingCurveConfig

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_INITIAL_PRICE = "0.0001533"
DEFAULT_MAX_SUPPLY = "1000000000"
DEFAULT_BONDING_PERCENT = "70"
DEFAULT_PRICE_STEP_SIZE = "100000000"
DEFAULT_CREATOR_MAX_BUY_PERCENT = "20"
DEFAULT_FEE_PERCENT = "1"
DEFAULT_TRADE_SLIPPAGE = "0.01"

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 5000
DEFAULT_LOG_LEVEL = "INFO"


def _get_env_decimal(key: str, default: str, min_val: Optional[Decimal] = None,
                     max_val: Optional[Decimal] = None) -> Decimal:
    """Get environment variable as Decimal with validation."""
    raw = os.getenv(key, default)
    try:
        value = Decimal(raw.strip())
    except (InvalidOperation, AttributeError):
        raise ConfigurationError(f"Environment variable {key} must be a valid number")
    if not value.is_finite():
        raise ConfigurationError(f"Environment variable {key} must be a finite number")
    if min_val is not None and value < min_val:
        raise ConfigurationError(f"Environment variable {key} must be >= {min_val}")
    if max_val is not None and value > max_val:
        raise ConfigurationError(f"Environment variable {key} must be <= {max_val}")
    return value


def _get_env_int(key: str, default: int, min_val: Optional[int] = None, max_val: Optional[int] = None) -> int:
    """Get environment variable as integer with validation."""
    try:
        value = int(os.getenv(key, str(default)))
    except ValueError:
        raise ConfigurationError(f"Environment variable {key} must be a valid integer")
    if min_val is not None and value < min_val:
        raise ConfigurationError(f"Environment variable {key} must be >= {min_val}")
    if max_val is not None and value > max_val:
        raise ConfigurationError(f"Environment variable {key} must be <= {max_val}")
    return value


def _get_env_bool(key: str, default: bool) -> bool:
    raw = os.getenv(key)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_curve_config() -> BondingCurveConfig:
    """
    Build a BondingCurveConfig from the environment.

    :return: BondingCurveConfig
    :raises ConfigurationError: if a value is unparseable or out of range
    """
    hundred = Decimal("100")
    zero = Decimal("0")
    try:
        config = BondingCurveConfig(
            initial_price=_get_env_decimal("CURVE_INITIAL_PRICE", DEFAULT_INITIAL_PRICE, min_val=zero),
            max_supply=_get_env_decimal("CURVE_MAX_SUPPLY", DEFAULT_MAX_SUPPLY, min_val=zero),
            bonding_curve_percent=_get_env_decimal(
                "CURVE_BONDING_PERCENT", DEFAULT_BONDING_PERCENT, min_val=zero, max_val=hundred
            ),
            price_step_size=_get_env_decimal("CURVE_PRICE_STEP_SIZE", DEFAULT_PRICE_STEP_SIZE, min_val=zero),
            creator_max_buy_percent=_get_env_decimal(
                "CURVE_CREATOR_MAX_BUY_PERCENT", DEFAULT_CREATOR_MAX_BUY_PERCENT, min_val=zero, max_val=hundred
            ),
            fee_percent=_get_env_decimal("CURVE_FEE_PERCENT", DEFAULT_FEE_PERCENT, min_val=zero, max_val=hundred),
        )
    except ValueError as e:
        raise ConfigurationError(f"Invalid bonding curve configuration: {e}") from e

    logger.debug("Loaded bonding curve config: %s", config)
    return config


def load_trade_slippage() -> Decimal:
    return _get_env_decimal("TRADE_SLIPPAGE", DEFAULT_TRADE_SLIPPAGE, min_val=Decimal("0"), max_val=Decimal("1"))


def load_api_settings() -> dict:
    return {
        "host": os.getenv("API_HOST", DEFAULT_API_HOST),
        "port": _get_env_int("API_PORT", DEFAULT_API_PORT, min_val=1, max_val=65535),
        "debug": _get_env_bool("API_DEBUG", False),
    }


def load_log_level() -> str:
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigurationError(f"Environment variable LOG_LEVEL has unknown level {level}")
    return level

import logging

from launchpad_core.common.config import load_api_settings, load_curve_config, load_log_level, load_trade_slippage
from launchpad_core.common.log import configure_logging
from launchpad_core.curves.single.quadratic import QuadraticBondingCurve
from launchpad_core.trading.quote import TradeQuoter
from launchpad_core.validation.quadratic_validator import QuadraticCurveValidator
from launchpad_core.webapi.webapi import create_app

logger = logging.getLogger(__name__)


def main():
    configure_logging(load_log_level())

    curve = QuadraticBondingCurve(load_curve_config())
    report = QuadraticCurveValidator.run_all_validations(curve)
    for warning in report["warnings"]:
        logger.warning(warning)
    if report["errors"]:
        for error in report["errors"]:
            logger.error(error)
        raise SystemExit(1)

    app = create_app(curve, TradeQuoter(curve, load_trade_slippage()))
    settings = load_api_settings()
    logger.info("Starting bonding curve API on %s:%s", settings["host"], settings["port"])
    app.run(host=settings["host"], port=settings["port"], debug=settings["debug"])


if __name__ == "__main__":
    main()

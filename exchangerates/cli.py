"""Command-line entry point starting the exchange rates HTTP API."""

from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import yaml

from .arithmetic import (
    DEFAULT_EXCHANGE_RATE_PRECISION,
    GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION,
    CurrencyExchangeArithmetic,
)
from .config import Config, load_config
from .crypto import CryptoExchangeRateService, default_crypto_exchange_rate_table
from .global_rates import GlobalExchangeRateService
from .openexchangerates import OpenExchangeRatesClient, OpenExchangeRatesConfig
from .queries import Application, CryptoExchangeRateHandler, GlobalExchangeRatesHandler
from .server import run_http_with_graceful_shutdown

logger = logging.getLogger(__name__)


def build_application(config: Config) -> Application:
    """Wire the query handlers from the configuration."""
    api = config.open_exchange_rates_api
    provider = OpenExchangeRatesClient(
        OpenExchangeRatesConfig(app_id=api.app_id, base_url=api.base_url)
    )
    return Application(
        global_exchange_rates_handler=GlobalExchangeRatesHandler(
            provider,
            GlobalExchangeRateService(
                CurrencyExchangeArithmetic(GLOBAL_CURRENCY_EXCHANGE_RATE_PRECISION)
            ),
        ),
        crypto_exchange_rate_handler=CryptoExchangeRateHandler(
            CryptoExchangeRateService(
                CurrencyExchangeArithmetic(DEFAULT_EXCHANGE_RATE_PRECISION),
                default_crypto_exchange_rate_table(),
            )
        ),
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the configuration and serve until interrupted."""
    parser = argparse.ArgumentParser(description="Exchange rates HTTP API.")
    parser.add_argument(
        "--config",
        "-config",
        default="../config.yaml",
        help="Path to the HTTP server config file.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("%s", config)

    done = run_http_with_graceful_shutdown(config.server, build_application(config))
    done.wait()
    return 0
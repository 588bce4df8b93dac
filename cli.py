"""
cli.py – Command-line entry point for the exchange-rates client.

Usage
-----
# Latest rates against the default base (USD)
    uv run python cli.py

# Latest JPY rates for two currencies
    uv run python cli.py --base JPY --symbols USD,EUR

# Historical range (dates in compact yyyyMMdd form)
    uv run python cli.py --base EUR --symbols GBP --start-date 20200101 --end-date 20200131

# Show the supported currencies
    uv run python cli.py --list-currencies

The raw JSON body is printed to stdout, logs go to stderr.

Exit codes
----------
    0  API answered with a 2xx status
    1  API answered with an error status
    2  invalid parameters (nothing was sent)
    3  the request could not be completed
"""

import argparse
import logging
import sys

from exchange_rates import (
    Currency,
    ExchangeRatesClient,
    InvalidParameterError,
    RatesRequestBuilder,
    RequestFailedError,
)

logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_HTTP_ERROR = 1
EXIT_INVALID_PARAMETERS = 2
EXIT_REQUEST_FAILED = 3


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s – %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def builder_from_args(args: argparse.Namespace) -> RatesRequestBuilder:
    builder = RatesRequestBuilder()
    if args.base:
        builder = builder.with_base_currency(args.base)
    if args.symbols:
        builder = builder.with_symbol_currencies(args.symbols)
    if args.start_date:
        builder = builder.with_start_date(args.start_date)
    if args.end_date:
        builder = builder.with_end_date(args.end_date)
    return builder


def run(args: argparse.Namespace) -> int:
    if args.list_currencies:
        for currency in Currency:
            print(f"{currency.code:>2}  {currency.tag}  {currency.name}")
        return EXIT_OK

    try:
        request = builder_from_args(args).build()
    except InvalidParameterError as exc:
        logger.error("Invalid parameters: %s", exc)
        return EXIT_INVALID_PARAMETERS

    client = ExchangeRatesClient(base_url=args.api_url) if args.api_url else ExchangeRatesClient()

    try:
        response = client.send(request)
    except RequestFailedError as exc:
        logger.error("%s", exc)
        return EXIT_REQUEST_FAILED

    print(response.body)

    if not response.ok:
        logger.warning("API returned HTTP %d", response.status_code)
        return EXIT_HTTP_ERROR
    return EXIT_OK


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch latest or historical exchange rates and print the raw JSON response."
    )
    parser.add_argument("--base", help="Base currency tag (default: USD)")
    parser.add_argument("--symbols", help="Comma-separated target currency tags, e.g. JPY,EUR")
    parser.add_argument("--start-date", help="Start of the range in yyyyMMdd format")
    parser.add_argument("--end-date", help="End of the range in yyyyMMdd format")
    parser.add_argument("--api-url", help="Override the API root URL")
    parser.add_argument("--list-currencies", action="store_true", help="List supported currencies and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())

"""
Command line entry point: ``sqlpeek <preset_name> <query>``.
"""
import argparse
import logging
import sys
from collections.abc import Sequence

from sqlpeek import __version__
from sqlpeek.config import CONFIG_ENV_VAR
from sqlpeek.exceptions import ReportError
from sqlpeek.query import run_report

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='sqlpeek',
        description='Run one query against a named connection preset and print a bounded report.',
    )
    parser.add_argument('preset_name', help='name of the preset in the configuration file')
    parser.add_argument('query', help='SQL to execute')
    parser.add_argument(
        '-c', '--config',
        help=f'preset configuration file (default: ${CONFIG_ENV_VAR} or the standard locations)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='log SQL and timings')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        output = run_report(args.preset_name, args.query, args.config)
    except ReportError as e:
        logger.debug(f'{type(e).__name__} for preset {args.preset_name}', exc_info=True)
        print(f'{type(e).__name__}: {e}', file=sys.stderr)
        return EXIT_FAILURE

    sys.stdout.write(output)
    return EXIT_SUCCESS


if __name__ == '__main__':
    sys.exit(main())

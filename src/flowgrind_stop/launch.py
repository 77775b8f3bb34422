import os
import sys
import argparse
from . import __version__
from . import logging
from .stopper import FlowStopper

from typing import List, Optional


default_progname = 'flowgrind-stop'

usage_text = '''\
Usage: {progname} [OPTION]... [ADDRESS]...
Stop all flows on the daemons running at the given addresses.

Mandatory arguments to long options are mandatory for short options too.
  -h, --help     display this help and exit
  -v, --version  print version information and exit
      --loglevel LEVEL  diagnostic logging level (DEBUG, INFO, WARNING, ERROR)

Example:
   {progname} localhost 127.2.3.4:5999 example.com
'''


class ArgumentParsingError(RuntimeError):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentParsingError(message)


def program_name(argv0: Optional[str]) -> str:
    """
    executable name without the path
    """
    if not argv0:
        return default_progname
    name = os.path.basename(argv0)
    if name in ('', '__main__.py'):
        return default_progname
    return name


def usage(progname: str):
    sys.stderr.write(usage_text.format(progname=progname))


def usage_hint(progname: str):
    sys.stderr.write(f"Try '{progname} -h' for more information\n")


def print_version(progname: str):
    sys.stderr.write(f'{progname} version: {__version__}\n')


def _create_parser(progname: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(progname, add_help=False,
                             description='Stop all flows on the daemons running at the given addresses.')
    # informational options are collected in command line order, first one wins
    parser.add_argument('-h', '--help', dest='info', action='append_const', const='help')
    parser.add_argument('-v', '--version', dest='info', action='append_const', const='version')
    parser.add_argument('--loglevel', type=str.upper, choices=('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'),
                        help='logging level, like DEBUG, INFO, WARNING, ERROR')
    parser.add_argument('addresses', nargs='*', metavar='ADDRESS', help='daemon address as HOST or HOST:PORT')
    return parser


def main(argv: List[str], progname: str = default_progname) -> int:
    parser = _create_parser(progname)
    try:
        opts = parser.parse_intermixed_args(argv)
    except ArgumentParsingError as e:
        sys.stderr.write(f'{progname}: {e}\n')
        usage_hint(progname)
        return 1

    if opts.info:
        if opts.info[0] == 'help':
            usage(progname)
        else:
            print_version(progname)
        return 0

    if opts.loglevel is not None:
        logging.set_default_loglevel(opts.loglevel)
    logger = logging.get_logger('main')
    logger.debug(f'stopping flows on {len(opts.addresses)} address(es)')

    FlowStopper().stop_all(opts.addresses)
    return 0


def console_entry_point():
    sys.exit(main(sys.argv[1:], program_name(sys.argv[0] if sys.argv else None)))


if __name__ == '__main__':
    console_entry_point()

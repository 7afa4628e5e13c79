"""Print a ticket from the command line.

Connection settings default to the ``RT_URL``, ``RT_USER`` and
``RT_PASSWORD`` environment variables.
"""

import argparse
import dataclasses
import datetime
import logging
import os
import sys
import typing

from .decoder import TIME_FORMAT
from .exceptions import RtError
from .records import Ticket
from .rest1 import Rt

logger = logging.getLogger(__name__)


def format_ticket(ticket: Ticket) -> typing.List[str]:
    lines = []
    for field in dataclasses.fields(ticket):
        value = getattr(ticket, field.name)
        if value is None:
            value = 'Not set'
        elif isinstance(value, datetime.datetime):
            value = value.strftime(TIME_FORMAT)
        lines.append(f'{field.name}: {value}')
    return lines


def main(argv: typing.Optional[typing.List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog='rtlite', description='Show a Request Tracker ticket.')
    p.add_argument('ticket_id', type=int, help='ID of ticket to show')
    p.add_argument('--url', default=os.environ.get('RT_URL'),
                   help='REST 1.0 base URL, e.g. https://rt.example.com/REST/1.0/ (env RT_URL)')
    p.add_argument('--user', default=os.environ.get('RT_USER'), help='RT login (env RT_USER)')
    p.add_argument('--password', default=os.environ.get('RT_PASSWORD'), help='RT password (env RT_PASSWORD)')
    p.add_argument('-v', '--verbose', action='store_true', help='Log requests and responses')
    args = p.parse_args(argv)

    missing = [name for name in ('url', 'user', 'password') if not getattr(args, name)]
    if missing:
        p.error(f'missing connection settings: {", ".join(missing)}')

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
        # urllib3 logs request lines with the query string, i.e. the password
        logging.getLogger('urllib3').setLevel(logging.INFO)

    tracker = Rt(args.url, args.user, args.password)
    try:
        ticket = tracker.get_ticket(args.ticket_id)
    except RtError as exc:
        logger.debug('Fetching ticket %s failed', args.ticket_id)
        sys.stderr.write(f'error: {exc}\n')
        return 1

    for line in format_ticket(ticket):
        sys.stdout.write(line + '\n')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

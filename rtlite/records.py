"""Record shapes returned by :py:class:`rtlite.rest1.Rt`.

Every record is a frozen dataclass. Fields left out of a response, or sent
as ``Not set``, keep their defaults.
"""

import dataclasses
import datetime
import re
import typing

from .decoder import record

ATTACHMENT_LIST_PATTERN = re.compile(r'[^0-9]*(\d+): (.+) \((?:([^()]+) / )?([^()]+)\),?$')
""" One entry of a numbered attachment list, e.g. ``12: report.pdf (application/pdf / 3.1k),``
or ``12: untitled (36b)`` as found in transactions. """


@record
@dataclasses.dataclass(frozen=True)
class Attachment:
    id: int = 0
    filename: str = ''
    description: str = ''
    content_type: str = ''
    content: str = ''


def parse_attachment_list(value: str) -> typing.Tuple[Attachment, ...]:
    """Parse RT's numbered attachment list, one entry per line."""
    attachments = []
    for line in value.split('\n'):
        if not line.strip():
            continue
        match = ATTACHMENT_LIST_PATTERN.match(line)
        if match is None:
            raise ValueError(f'unexpected attachment entry: {line!r}')
        attachments.append(Attachment(id=int(match.group(1)),
                                      filename=match.group(2),
                                      content_type=match.group(3) or ''))
    return tuple(attachments)


@record
@dataclasses.dataclass(frozen=True)
class Ticket:
    """ Ticket as shown by ``ticket/<id>/show``.

    ``id`` keeps RT's form ``ticket/<id>``. People fields (requestors, cc,
    admin_cc) are comma separated strings.
    """

    id: str = dataclasses.field(default='', metadata={'rt': 'id'})
    queue: str = ''
    owner: str = ''
    creator: str = ''
    subject: str = ''
    status: str = ''
    priority: int = 0
    initial_priority: int = 0
    final_priority: int = 0
    requestors: str = ''
    cc: str = ''
    admin_cc: str = ''
    created: typing.Optional[datetime.datetime] = None
    starts: typing.Optional[datetime.datetime] = None
    started: typing.Optional[datetime.datetime] = None
    due: typing.Optional[datetime.datetime] = None
    resolved: typing.Optional[datetime.datetime] = None
    told: typing.Optional[datetime.datetime] = None
    last_updated: typing.Optional[datetime.datetime] = None
    time_estimated: int = 0
    time_worked: int = 0
    time_left: int = 0

    @property
    def numerical_id(self) -> str:
        """Id without the ``ticket/`` prefix."""
        return self.id.rpartition('/')[2]


@record
@dataclasses.dataclass(frozen=True)
class TicketHistory:
    old_value: str = ''
    new_value: str = ''
    field: str = ''
    creator: str = ''
    created: typing.Optional[datetime.datetime] = None


@record
@dataclasses.dataclass(frozen=True)
class TicketTransaction:
    id: int = 0
    type: str = ''
    field: str = ''
    old_value: str = ''
    new_value: str = ''
    data: str = ''
    object: str = ''
    creator: str = ''
    created: typing.Optional[datetime.datetime] = None
    attachments: typing.Tuple[Attachment, ...] = dataclasses.field(
        default=(), metadata={'coerce': parse_attachment_list})


@record
@dataclasses.dataclass(frozen=True)
class TicketAttachment:
    id: int = 0
    filename: str = ''
    content: str = ''
    mime_type: str = ''
    creator: str = ''
    created: typing.Optional[datetime.datetime] = None
    last_updated: typing.Optional[datetime.datetime] = None


@record
@dataclasses.dataclass(frozen=True)
class TicketLink:
    type: str = ''
    id: int = 0


@record
@dataclasses.dataclass(frozen=True)
class TicketComment:
    id: int = 0
    creator: str = ''
    created: typing.Optional[datetime.datetime] = None
    content: str = ''
    is_private: bool = False


@record
@dataclasses.dataclass(frozen=True)
class TicketCustomField:
    id: int = 0
    name: str = ''
    value: str = ''


@record
@dataclasses.dataclass(frozen=True)
class TicketCustomFieldHistory:
    field: str = ''
    old: str = ''
    new: str = ''


@record
@dataclasses.dataclass(frozen=True)
class TicketCustomFieldValuesHistory:
    old_value: str = ''
    new_value: str = ''

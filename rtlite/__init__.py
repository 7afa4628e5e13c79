"""Read-only Python interface to the Request Tracker REST 1.0 :term:`API`."""

from .decoder import decode_many, decode_one, parse_fields, record
from .exceptions import AuthorizationError, CoercionError, DecodeError, InvalidTargetError, MalformedLineError, \
    NotFoundError, RtError, TransportError, UnexpectedMessageFormatError, UnexpectedResponseError
from .records import Attachment, Ticket, TicketAttachment, TicketComment, TicketCustomField, \
    TicketCustomFieldHistory, TicketCustomFieldValuesHistory, TicketHistory, TicketLink, TicketTransaction
from .rest1 import Rt

__version__ = '1.0.0'

__all__ = [
    'Attachment', 'AuthorizationError', 'CoercionError', 'DecodeError', 'InvalidTargetError',
    'MalformedLineError', 'NotFoundError', 'Rt', 'RtError', 'Ticket', 'TicketAttachment', 'TicketComment',
    'TicketCustomField', 'TicketCustomFieldHistory', 'TicketCustomFieldValuesHistory', 'TicketHistory',
    'TicketLink', 'TicketTransaction', 'TransportError', 'UnexpectedMessageFormatError',
    'UnexpectedResponseError', 'decode_many', 'decode_one', 'parse_fields', 'record',
]

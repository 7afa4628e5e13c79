"""
==========================================================
 Decoder for the Request Tracker REST 1.0 message payload
==========================================================

RT answers REST 1.0 requests with a status line, a blank line and a payload
of ``key: value`` lines::

    RT/4.4.3 200 Ok

    id: ticket/12
    Subject: Printer on fire
    Text: first line
          second line

Lines starting with whitespace continue the value of the previous key.
This module maps such payloads onto record shapes, i.e. frozen dataclasses
decorated with :py:func:`record`.
"""

import dataclasses
import datetime
import re
import typing

from .exceptions import CoercionError, InvalidTargetError, MalformedLineError

__license__ = """ Copyright (C) 2012 CZ.NIC, z.s.p.o.
    Copyright (c) 2015 Genome Research Ltd.
    Copyright (c) 2017 CERT Gouvernemental (GOVCERT.LU)

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.
"""
__docformat__ = "reStructuredText en"

TIME_FORMAT = '%a %b %d %H:%M:%S %Y'
""" Layout of timestamps, e.g. ``Mon Jan 2 15:04:05 2006``. Times are UTC. """

UNSET_VALUES = ('', 'Not set')
""" Values treated as absent; the field keeps its default. """

T = typing.TypeVar('T')
Coercer = typing.Callable[[str], typing.Any]
FieldMap = typing.Dict[str, typing.Tuple[str, Coercer]]

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_BOOL_VALUES = {'1': True, 'yes': True, 'true': True,
                '0': False, 'no': False, 'false': False}


def to_str(value: str) -> str:
    return value


def to_int(value: str) -> int:
    """Parse a base-10 integer; unlike :py:func:`int` no whitespace or underscores."""
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f'invalid literal for base-10 integer: {value!r}')
    return int(value)


def to_bool(value: str) -> bool:
    try:
        return _BOOL_VALUES[value.lower()]
    except KeyError:
        raise ValueError(f'invalid boolean literal: {value!r}') from None


def to_timestamp(value: str) -> datetime.datetime:
    return datetime.datetime.strptime(value, TIME_FORMAT).replace(tzinfo=datetime.timezone.utc)


_COERCERS = {
    str: to_str,
    int: to_int,
    bool: to_bool,
    datetime.datetime: to_timestamp,
}  # type: typing.Dict[typing.Any, Coercer]


def _coercer_for(hint: typing.Any) -> Coercer:
    if typing.get_origin(hint) is typing.Union:
        # Optional[X]
        args = [arg for arg in typing.get_args(hint) if arg is not type(None)]
        if len(args) == 1:
            hint = args[0]
    try:
        return _COERCERS[hint]
    except (KeyError, TypeError):
        raise TypeError(f'No coercer for field type {hint!r}, pass one as metadata "coerce".') from None


def record(cls: typing.Type[T]) -> typing.Type[T]:
    """ Register a dataclass as a record shape.

    The protocol key of each field is taken from ``metadata['rt']`` or, if
    missing, from the field name without underscores. Keys are matched
    case-insensitively, so ``initial_priority`` receives ``InitialPriority``.
    A field may bring its own coercer in ``metadata['coerce']``.

    Example::

        >>> @record
        ... @dataclasses.dataclass(frozen=True)
        ... class Link:
        ...     type: str = ''
        ...     id: int = 0

    :raises TypeError: If *cls* is not a dataclass or a field type has no coercer.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f'{cls!r} is not a dataclass.')
    hints = typing.get_type_hints(cls)
    fields = {}  # type: FieldMap
    for field in dataclasses.fields(cls):
        key = field.metadata.get('rt') or field.name.replace('_', '')
        coerce = field.metadata.get('coerce') or _coercer_for(hints[field.name])
        fields[key.lower()] = (field.name, coerce)
    cls.__rt_fields__ = fields  # type: ignore[attr-defined]
    return cls


def _field_map(shape: typing.Any) -> FieldMap:
    fields = getattr(shape, '__rt_fields__', None) if isinstance(shape, type) else None
    if fields is None:
        raise InvalidTargetError(f'Cannot decode into {shape!r}, not a record shape.')
    return typing.cast(FieldMap, fields)


def _scan(text: str) -> typing.Iterator[typing.Tuple[typing.Optional[str], str, bool]]:
    """ Split payload into ``(key, value, continued)`` triples.

    A whitespace prefixed line yields ``(None, stripped_line, True)`` to be
    appended to the last key, and then, if it has a colon, its own
    ``(key, value, True)`` split as well.
    """
    seen_key = False
    for line in text.split('\n'):
        if not line:
            continue
        continued = seen_key and line[0].isspace()
        if continued:
            yield None, line.strip(), True
        key, sep, value = line.partition(':')
        if not sep:
            if continued:
                continue
            raise MalformedLineError(f'Data has line without colon: {line}')
        if value.startswith(' '):
            value = value[1:]
        if not continued:
            seen_key = True
        yield key, value, continued


def parse_fields(text: str) -> typing.Dict[str, str]:
    """ Parse payload into an ordered dictionary of raw string values.

    :raises MalformedLineError: A line has no colon.
    """
    fields = {}  # type: typing.Dict[str, str]
    last_key = ''
    for key, value, continued in _scan(text):
        if key is None:
            fields[last_key] += '\n' + value
            continue
        fields[key] = value
        if not continued:
            last_key = key
    return fields


def _build(shape: typing.Type[T], fields: FieldMap, pairs: typing.Dict[str, str]) -> T:
    values = {}
    for key, value in pairs.items():
        if value in UNSET_VALUES:
            continue
        try:
            name, coerce = fields[key.lower()]
        except KeyError:
            continue
        try:
            values[name] = coerce(value)
        except ValueError as exc:
            raise CoercionError(f'Failed to decode {value!r} as {shape.__name__}.{name}: {exc}', exc) from exc
    return shape(**values)  # type: ignore[call-arg]


def decode_one(text: str, shape: typing.Type[T]) -> T:
    """ Decode a single record.

    :param text: Message payload (without the status line).
    :param shape: Record shape registered with :py:func:`record`.
    :returns: New instance of *shape*.
    :raises InvalidTargetError: *shape* is not a record shape.
    :raises MalformedLineError: A line has no colon.
    :raises CoercionError: A value does not fit its field type.
    """
    fields = _field_map(shape)
    return _build(shape, fields, parse_fields(text))


def _bucket_id(value: str) -> int:
    # ``ticket/12`` buckets as 12, anything to_int rejects as 0
    number = value.rpartition('/')[2]
    if not _INT_PATTERN.fullmatch(number):
        return 0
    return int(number)


def decode_many(text: str, shape: typing.Type[T]) -> typing.List[T]:
    """ Decode a list of records.

    Every ``id`` line starts a new bucket keyed by its numeric value; lines
    before the first ``id`` land in bucket 0. Blocks repeating an id value
    are merged into one record. Records are returned in order of first
    appearance of their id.

    :param text: Message payload (without the status line).
    :param shape: Record shape registered with :py:func:`record`.
    :returns: List of new *shape* instances.
    :raises InvalidTargetError: *shape* is not a record shape.
    :raises MalformedLineError: A line has no colon.
    :raises CoercionError: A value does not fit its field type.
    """
    fields = _field_map(shape)
    buckets = {}  # type: typing.Dict[int, typing.Dict[str, str]]
    current = 0
    last_key = ''
    for key, value, continued in _scan(text):
        if key is None:
            buckets[current][last_key] += '\n' + value
            continue
        if key == 'id' and not continued:
            current = _bucket_id(value)
        buckets.setdefault(current, {})[key] = value
        if not continued:
            last_key = key
    return [_build(shape, fields, pairs) for pairs in buckets.values()]

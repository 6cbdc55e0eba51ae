"""
Date scalar - datetimes on the wire as integer epoch milliseconds.

Both decode paths reject bad input with a ValueError: variables that
are not numbers, and inline literals that are not integers.
"""
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import NewType

import strawberry
from django.utils import timezone
from graphql.language import IntValueNode

EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)
ONE_MILLISECOND = timedelta(milliseconds=1)


def serialize_datetime(value) -> int:
    """Encode a datetime as epoch milliseconds."""
    if not isinstance(value, datetime):
        raise ValueError(f"Date cannot represent non-datetime value: {value!r}")
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return (value - EPOCH) // ONE_MILLISECOND


def parse_datetime_value(value) -> datetime:
    """Decode epoch milliseconds (from variables) into an aware UTC datetime."""
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Date cannot represent non-numeric value: {value!r}")
    return EPOCH + timedelta(milliseconds=value)


def parse_datetime_literal(ast, _variables=None) -> datetime:
    """Decode an inline query literal; only integer literals are accepted."""
    if not isinstance(ast, IntValueNode):
        raise ValueError(f"Date literal must be an integer, got {ast.kind}")
    return parse_datetime_value(int(ast.value))


Date = strawberry.scalar(
    NewType("Date", datetime),
    name="Date",
    description="Date and time as milliseconds since the Unix epoch.",
    serialize=serialize_datetime,
    parse_value=parse_datetime_value,
    parse_literal=parse_datetime_literal,
)

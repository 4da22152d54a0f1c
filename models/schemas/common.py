from datetime import date, datetime, timezone

from marshmallow import ValidationError, fields

# price is a 32-bit integer on the wire
MAX_PRICE = 2**31 - 1


def validate_not_blank(value: str) -> None:
    if value is None or not value.strip():
        raise ValidationError("must not be blank")


def validate_not_future(d: date) -> None:
    if d and d > date.today():
        raise ValidationError("must be a date in the past or in the present")


class UTCDateTime(fields.DateTime):
    """Dumps stored (naive UTC) timestamps with an explicit +00:00 offset."""

    def _serialize(self, value: datetime, attr, obj, **kwargs):
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return super()._serialize(value, attr, obj, **kwargs)

from marshmallow import EXCLUDE, Schema, fields, validate, validates

from models.schemas.common import UTCDateTime, validate_not_blank, validate_not_future


class AuthorWriteSchema(Schema):
    """Full-replacement payload shared by create and update."""

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=[validate_not_blank, validate.Length(max=128)])
    birth_date = fields.Date(required=True, data_key="birthDate")

    @validates("birth_date")
    def _validate_birth_date(self, value, **kwargs):
        validate_not_future(value)


class AuthorCreateSchema(AuthorWriteSchema):
    pass


class AuthorUpdateSchema(AuthorWriteSchema):
    pass


class AuthorOutSchema(Schema):
    id = fields.Integer()
    name = fields.String()
    birth_date = fields.Date(data_key="birthDate")
    created_at = UTCDateTime(data_key="createdAt")
    updated_at = UTCDateTime(data_key="updatedAt")

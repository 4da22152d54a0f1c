from marshmallow import EXCLUDE, Schema, fields, validate

from models.base_model import MAX_ID
from models.book import BookStatus
from models.schemas.common import MAX_PRICE, UTCDateTime, validate_not_blank


class BookWriteSchema(Schema):
    """Full-replacement payload shared by create and update."""

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=[validate_not_blank, validate.Length(max=255)])
    price = fields.Integer(
        required=True,
        strict=True,
        validate=[
            validate.Range(min=0, error="must be greater than or equal to 0"),
            validate.Range(max=MAX_PRICE, error="must be less than or equal to {max}"),
        ],
    )
    status = fields.Enum(BookStatus, required=True)
    author_ids = fields.List(
        fields.Integer(
            strict=True,
            validate=validate.Range(min=1, max=MAX_ID, error="must be a valid author id"),
        ),
        required=True,
        data_key="authorIds",
        validate=validate.Length(min=1, error="must not be empty"),
    )


class BookCreateSchema(BookWriteSchema):
    pass


class BookUpdateSchema(BookWriteSchema):
    pass


class BookStatusFilterSchema(Schema):
    """Query string for GET /authors/<id>/books."""

    class Meta:
        unknown = EXCLUDE

    status = fields.Enum(BookStatus, load_default=None)


class BookOutSchema(Schema):
    id = fields.Integer()
    title = fields.String()
    price = fields.Integer()
    status = fields.Enum(BookStatus)
    # Expose IDs of related authors
    author_ids = fields.List(fields.Integer(), data_key="authorIds")
    created_at = UTCDateTime(data_key="createdAt")
    updated_at = UTCDateTime(data_key="updatedAt")

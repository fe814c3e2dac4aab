from marshmallow import Schema, fields, validates, validate, ValidationError

from models.entities import PublicationStatus
from models.schemas.common import validate_text


class BookRegisterSchema(Schema):
    title = fields.String(required=True)
    # Upper bound is a domain rule (Book entity); only the format and sign are checked here
    price = fields.Integer(required=True, strict=True)
    author_ids = fields.List(
        fields.String(),
        required=True,
        data_key="authorIds",
        validate=validate.Length(min=1, error="At least one author is required."),
    )
    status = fields.Enum(PublicationStatus, required=True)

    @validates("title")
    def _validate_title(self, value, **kwargs):
        validate_text(value, "title")

    @validates("price")
    def _validate_price(self, value, **kwargs):
        if value is not None and value < 0:
            raise ValidationError("price must be >= 0.")


class BookUpdateSchema(BookRegisterSchema):
    # Full replacement (PUT): same fields and rules as registration
    pass


class BookOutSchema(Schema):
    id = fields.UUID()
    title = fields.String()
    price = fields.Integer()
    author_ids = fields.List(fields.UUID(), data_key="authorIds")
    status = fields.Enum(PublicationStatus)

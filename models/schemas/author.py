from marshmallow import Schema, fields, validates

from models.schemas.common import validate_text, validate_past


class AuthorRegisterSchema(Schema):
    name = fields.String(required=True)
    date_of_birth = fields.Date(required=True, data_key="dateOfBirth")

    @validates("name")
    def _validate_name(self, value, **kwargs):
        validate_text(value, "name")

    @validates("date_of_birth")
    def _validate_date_of_birth(self, value, **kwargs):
        validate_past(value)


class AuthorUpdateSchema(AuthorRegisterSchema):
    # Full replacement (PUT): same fields and rules as registration
    pass


class AuthorOutSchema(Schema):
    id = fields.UUID()
    name = fields.String()
    date_of_birth = fields.Date(data_key="dateOfBirth")

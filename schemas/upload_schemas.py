from marshmallow import Schema, fields, validates_schema, ValidationError, EXCLUDE

class DeleteImageSchema(Schema):
    """Body of the image delete proxy: a public id, a delivery URL, or both."""

    class Meta:
        unknown = EXCLUDE

    image_url = fields.String(data_key='imageUrl', allow_none=True, load_default=None)
    public_id = fields.String(data_key='publicId', allow_none=True, load_default=None)

    @validates_schema
    def require_target(self, data, **kwargs):
        if not (data.get('image_url') or '').strip() and not (data.get('public_id') or '').strip():
            raise ValidationError('Image URL or Public ID is required')

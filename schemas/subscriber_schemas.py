from marshmallow import Schema, fields, pre_load, EXCLUDE

class SubscribeSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True, error_messages={
        'required': 'Email is required',
        'null': 'Email is required',
        'invalid': 'Please provide a valid email address',
    })

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get('email'), str):
            data = dict(data, email=data['email'].strip().lower())
            if not data['email']:
                data.pop('email')
        return data

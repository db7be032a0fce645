from marshmallow import Schema, fields, validate, pre_load, EXCLUDE
from models.enums import NewsletterStatus, NewsletterTemplate

SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'

class NewsletterSchema(Schema):
    """Create/replace payload for a newsletter. Load with partial=True for edits."""

    class Meta:
        unknown = EXCLUDE

    title = fields.String(required=True, validate=validate.Length(
        min=3, max=200, error='Title must be between 3 and 200 characters long'),
        error_messages={'required': 'Newsletter title is required'})
    slug = fields.String(required=True, validate=[
        validate.Length(min=3, error='Slug must be at least 3 characters long'),
        validate.Regexp(SLUG_PATTERN, error='Slug must be lowercase with hyphens only'),
    ], error_messages={'required': 'Slug is required'})
    excerpt = fields.String(allow_none=True, validate=validate.Length(
        max=500, error='Excerpt cannot exceed 500 characters'))
    content_markdown = fields.String(required=True, data_key='contentMarkdown', validate=validate.Length(
        min=10, error='Content must be at least 10 characters long'),
        error_messages={'required': 'Newsletter content is required'})
    template = fields.Enum(NewsletterTemplate, by_value=True, load_default=NewsletterTemplate.DEFAULT)
    status = fields.Enum(NewsletterStatus, by_value=True, load_default=NewsletterStatus.DRAFT)
    cover_image = fields.Url(allow_none=True, data_key='coverImage', load_default=None)
    gallery = fields.List(fields.Url(), load_default=list)

    @pre_load
    def normalize(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        # "content" is accepted as an alias of contentMarkdown
        if 'contentMarkdown' not in data and 'content' in data:
            data['contentMarkdown'] = data.pop('content')
        for key in ('title', 'excerpt'):
            if isinstance(data.get(key), str):
                data[key] = data[key].strip()
        if isinstance(data.get('slug'), str):
            data['slug'] = data['slug'].strip().lower()
        if data.get('coverImage') == '':
            data['coverImage'] = None
        if data.get('excerpt') == '':
            data['excerpt'] = None
        if data.get('gallery') is None and 'gallery' in data:
            data['gallery'] = []
        return data

class NewsletterListQuerySchema(Schema):
    """Query-string parameters of the public listing."""

    class Meta:
        unknown = EXCLUDE

    page = fields.Integer(load_default=1, validate=validate.Range(min=1))
    limit = fields.Integer(load_default=10, validate=validate.Range(min=1, max=100))
    template = fields.Enum(NewsletterTemplate, by_value=True, load_default=None)

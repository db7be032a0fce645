from flask import Blueprint, request
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from auth.utils import admin_role_required
from controllers.newsletter_controller import NewsletterController
from common.response import error_response, validation_error_response
from schemas.newsletter_schemas import NewsletterSchema, NewsletterListQuerySchema

newsletter_public_bp = Blueprint('newsletter_public', __name__)
newsletter_admin_bp = Blueprint('newsletter_admin', __name__)

# ---------------------------------------------------------------------------
# Public routes
# ---------------------------------------------------------------------------

@newsletter_public_bp.route('', methods=['GET'])
def get_published_newsletters():
    """
    Get all published newsletters
    ---
    tags:
      - Newsletters
    parameters:
      - in: query
        name: page
        type: integer
        required: false
        default: 1
      - in: query
        name: limit
        type: integer
        required: false
        default: 10
        description: Page size, at most 100
      - in: query
        name: template
        type: string
        required: false
        enum: [default, event-recap, workshop, announcement]
    responses:
      200:
        description: Published newsletters, newest published first
      400:
        description: Invalid query parameters
    """
    try:
        params = NewsletterListQuerySchema().load(request.args)
    except ValidationError as e:
        return validation_error_response(e)
    return NewsletterController.list_published(**params)

@newsletter_public_bp.route('/<string:slug>', methods=['GET'])
def get_newsletter_by_slug(slug):
    """
    Get a single published newsletter by slug
    ---
    tags:
      - Newsletters
    parameters:
      - in: path
        name: slug
        type: string
        required: true
    responses:
      200:
        description: Newsletter found
      404:
        description: Newsletter not found or not published
    """
    return NewsletterController.get_published_by_slug(slug)

# ---------------------------------------------------------------------------
# Admin routes
# ---------------------------------------------------------------------------

@newsletter_admin_bp.route('', methods=['GET'])
@jwt_required()
@admin_role_required
def get_all_newsletters():
    """
    Get every newsletter, drafts included (admin only)
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    responses:
      200:
        description: All newsletters, newest created first
      401:
        description: Missing or invalid token
      403:
        description: Admin role required
    """
    return NewsletterController.list_all()

@newsletter_admin_bp.route('', methods=['POST'])
@jwt_required()
@admin_role_required
def create_newsletter():
    """
    Create a newsletter (admin only)
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required:
            - title
            - slug
            - contentMarkdown
          properties:
            title:
              type: string
              minLength: 3
              maxLength: 200
            slug:
              type: string
              pattern: '^[a-z0-9]+(?:-[a-z0-9]+)*$'
            excerpt:
              type: string
              maxLength: 500
            contentMarkdown:
              type: string
              minLength: 10
            template:
              type: string
              enum: [default, event-recap, workshop, announcement]
            status:
              type: string
              enum: [draft, published]
            coverImage:
              type: string
            gallery:
              type: array
              items:
                type: string
    responses:
      201:
        description: Newsletter created
      400:
        description: Validation error or slug already exists
      401:
        description: Missing or invalid token
      403:
        description: Admin role required
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response('Request body must be a JSON object', 400)
    try:
        data = NewsletterSchema().load(payload)
    except ValidationError as e:
        return validation_error_response(e)
    return NewsletterController.create(data)

@newsletter_admin_bp.route('/<int:newsletter_id>', methods=['GET'])
@jwt_required()
@admin_role_required
def get_newsletter(newsletter_id):
    return NewsletterController.get_by_id(newsletter_id)

@newsletter_admin_bp.route('/<int:newsletter_id>', methods=['PUT'])
@jwt_required()
@admin_role_required
def update_newsletter(newsletter_id):
    """
    Edit a newsletter (admin only)
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    parameters:
      - in: path
        name: newsletter_id
        type: integer
        required: true
      - in: body
        name: body
        description: Any newsletter fields; those present replace the stored values
        schema:
          type: object
    responses:
      200:
        description: Newsletter updated
      400:
        description: Validation error or slug already exists
      404:
        description: Newsletter not found
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return error_response('Request body must be a JSON object', 400)
    try:
        data = NewsletterSchema(partial=True).load(payload)
    except ValidationError as e:
        return validation_error_response(e)
    return NewsletterController.update(newsletter_id, data)

@newsletter_admin_bp.route('/<int:newsletter_id>', methods=['DELETE'])
@jwt_required()
@admin_role_required
def delete_newsletter(newsletter_id):
    """
    Delete a newsletter (admin only)
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    parameters:
      - in: path
        name: newsletter_id
        type: integer
        required: true
    responses:
      200:
        description: Newsletter deleted
      404:
        description: Newsletter not found
    """
    return NewsletterController.delete(newsletter_id)

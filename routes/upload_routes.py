from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required
from http import HTTPStatus
from marshmallow import ValidationError

from auth.utils import admin_role_required
from common.response import success_response, error_response, first_error_message
from schemas.upload_schemas import DeleteImageSchema
from services.cloudinary_service import PublicIdError, get_cloudinary_service

upload_bp = Blueprint('cloudinary_upload', __name__)
delete_bp = Blueprint('cloudinary_delete', __name__)

def is_image(file):
    return bool(file.mimetype) and file.mimetype.startswith('image/')

@upload_bp.route('', methods=['POST'])
@jwt_required()
@admin_role_required
def upload_image():
    """
    Upload an image to Cloudinary
    ---
    tags:
      - Upload
    security:
      - Bearer: []
    consumes:
      - multipart/form-data
    parameters:
      - in: formData
        name: image
        type: file
        required: true
        description: Image file to upload, at most 10MB
    responses:
      200:
        description: Image uploaded successfully
        schema:
          type: object
          properties:
            success:
              type: boolean
            imageUrl:
              type: string
              description: Cloudinary secure URL
            publicId:
              type: string
              description: Cloudinary public ID
      400:
        description: No file provided or not an image
      413:
        description: File larger than 10MB
      500:
        description: Upload failed after retries
    """
    if 'image' not in request.files:
        return error_response('No file uploaded', HTTPStatus.BAD_REQUEST)

    file = request.files['image']
    if file.filename == '':
        return error_response('No file selected', HTTPStatus.BAD_REQUEST)

    if not is_image(file):
        return error_response('Only image files are allowed!', HTTPStatus.BAD_REQUEST)

    result = get_cloudinary_service().upload_image(file.read())
    if not result.ok:
        current_app.logger.error(f"Cloudinary upload error: {result.error_message}")
        return error_response(result.error_message or 'Upload failed', HTTPStatus.INTERNAL_SERVER_ERROR)

    return success_response('Image uploaded successfully', status_code=HTTPStatus.OK, **result.value)

@upload_bp.route('', methods=['DELETE'])
@delete_bp.route('', methods=['DELETE'])
@jwt_required()
@admin_role_required
def delete_image():
    """
    Delete an image from Cloudinary by public id or URL
    ---
    tags:
      - Upload
    security:
      - Bearer: []
    parameters:
      - in: body
        name: body
        schema:
          type: object
          properties:
            imageUrl:
              type: string
            publicId:
              type: string
    responses:
      200:
        description: Image deleted successfully
      400:
        description: Neither imageUrl nor publicId given, or no public id in the URL
      500:
        description: Delete failed after retries
    """
    try:
        data = DeleteImageSchema().load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return error_response(first_error_message(e), HTTPStatus.BAD_REQUEST)

    result = get_cloudinary_service().delete_image(**data)
    if not result.ok:
        if isinstance(result.error, PublicIdError):
            return error_response(result.error_message, HTTPStatus.BAD_REQUEST)
        current_app.logger.error(f"Cloudinary delete error: {result.error_message}")
        return error_response(result.error_message or 'Delete failed', HTTPStatus.INTERNAL_SERVER_ERROR)

    return success_response('Image deleted successfully', status_code=HTTPStatus.OK)

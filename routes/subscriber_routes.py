from flask import Blueprint, request
from flask_jwt_extended import jwt_required
from marshmallow import ValidationError

from auth.utils import admin_role_required
from controllers.subscriber_controller import SubscriberController
from common.response import error_response, first_error_message
from schemas.subscriber_schemas import SubscribeSchema

subscriber_bp = Blueprint('subscribers', __name__)

@subscriber_bp.route('', methods=['POST'])
def subscribe():
    """
    Subscribe an email address to the newsletter
    ---
    tags:
      - Subscribers
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required:
            - email
          properties:
            email:
              type: string
              format: email
    responses:
      201:
        description: Subscribed
      400:
        description: Missing or malformed email
      409:
        description: Already subscribed (alreadySubscribed is true)
    """
    try:
        data = SubscribeSchema().load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return error_response(first_error_message(e), 400)
    return SubscriberController.subscribe(data['email'])

@subscriber_bp.route('/count', methods=['GET'])
def subscriber_count():
    """
    Number of active subscribers
    ---
    tags:
      - Subscribers
    responses:
      200:
        description: Active subscriber count
    """
    return SubscriberController.count_active()

@subscriber_bp.route('', methods=['GET'])
@jwt_required()
@admin_role_required
def list_subscribers():
    """
    List active subscribers, newest first (admin only)
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    responses:
      200:
        description: Active subscribers
      401:
        description: Missing or invalid token
      403:
        description: Admin role required
    """
    return SubscriberController.list_active()

@subscriber_bp.route('/<int:subscriber_id>', methods=['DELETE'])
@jwt_required()
@admin_role_required
def delete_subscriber(subscriber_id):
    return SubscriberController.delete(subscriber_id)

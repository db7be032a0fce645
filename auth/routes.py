from flask import Blueprint, request, jsonify
from flask_jwt_extended import jwt_required
from marshmallow import Schema, fields, validate, ValidationError, pre_load, EXCLUDE

from auth.controllers import signin_user, signup_user, get_current_user, list_users, delete_user
from auth.utils import admin_role_required, current_claims
from common.response import validation_error_response

# Schema definitions
class _EmailNormalizingSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    @pre_load
    def normalize_email(self, data, **kwargs):
        if isinstance(data, dict) and isinstance(data.get('email'), str):
            data = dict(data, email=data['email'].strip().lower())
        return data

class SigninSchema(_EmailNormalizingSchema):
    email = fields.Email(required=True, error_messages={'required': 'Email and password are required'})
    password = fields.String(required=True, error_messages={'required': 'Email and password are required'})

class SignupSchema(_EmailNormalizingSchema):
    name = fields.String(required=True, validate=validate.Length(min=2, error='Name must be at least 2 characters long'))
    email = fields.Email(required=True, error_messages={'invalid': 'Please provide a valid email'})
    password = fields.String(required=True, validate=validate.Length(min=6, error='Password must be at least 6 characters long'))

# Create auth blueprint; mounted at /auth and /api/auth
auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/signin', methods=['POST'])
@auth_bp.route('/login', methods=['POST'])
def signin():
    """
    Sign in as the admin or a reader.
    ---
    tags:
      - Authentication
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required:
            - email
            - password
          properties:
            email:
              type: string
              format: email
            password:
              type: string
    responses:
      200:
        description: Login successful, returns token, role and user
      400:
        description: Validation error
      401:
        description: Invalid credentials
    """
    try:
        data = SigninSchema().load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return validation_error_response(e)

    response, status_code = signin_user(data)
    return jsonify(response), status_code

@auth_bp.route('/signup', methods=['POST'])
@auth_bp.route('/register', methods=['POST'])
def signup():
    """
    Create a reader account.
    ---
    tags:
      - Authentication
    parameters:
      - in: body
        name: body
        schema:
          type: object
          required:
            - name
            - email
            - password
          properties:
            name:
              type: string
            email:
              type: string
              format: email
            password:
              type: string
              minLength: 6
    responses:
      201:
        description: Reader account created
      400:
        description: Validation error or email already registered
    """
    try:
        data = SignupSchema().load(request.get_json(silent=True) or {})
    except ValidationError as e:
        return validation_error_response(e)

    response, status_code = signup_user(data)
    return jsonify(response), status_code

@auth_bp.route('/verify', methods=['POST'])
@jwt_required()
def verify():
    """
    Check that the bearer token is valid.
    ---
    tags:
      - Authentication
    security:
      - Bearer: []
    responses:
      200:
        description: Token is valid
      401:
        description: Missing, invalid or expired token
    """
    claims = current_claims()
    return jsonify({
        "success": True,
        "role": claims['role'],
        "email": claims['email'],
        "message": "Token is valid",
    }), 200

@auth_bp.route('/logout', methods=['POST'])
def logout():
    # Tokens are stateless; the client discards it
    return jsonify({"success": True, "message": "Logged out successfully"}), 200

@auth_bp.route('/me', methods=['GET'])
@jwt_required()
def me():
    """
    Get current user information.
    ---
    tags:
      - User
    security:
      - Bearer: []
    responses:
      200:
        description: User information retrieved successfully
      401:
        description: Invalid or expired token
      404:
        description: User no longer exists
    """
    response, status_code = get_current_user(current_claims())
    return jsonify(response), status_code

@auth_bp.route('/users', methods=['GET'])
@jwt_required()
@admin_role_required
def get_users():
    """
    List all users (admin only).
    ---
    tags:
      - Admin
    security:
      - Bearer: []
    responses:
      200:
        description: Users without password hashes
      401:
        description: Missing or invalid token
      403:
        description: Admin role required
    """
    response, status_code = list_users()
    return jsonify(response), status_code

@auth_bp.route('/users/<int:user_id>', methods=['DELETE'])
@jwt_required()
@admin_role_required
def remove_user(user_id):
    response, status_code = delete_user(user_id)
    return jsonify(response), status_code

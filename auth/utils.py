from functools import wraps
from flask import current_app
from flask_jwt_extended import create_access_token, get_jwt, verify_jwt_in_request

from auth.models import UserRole
from common.response import error_response

def register_jwt_callbacks(jwt):
    """Map flask-jwt-extended failures onto the API error envelope."""

    @jwt.unauthorized_loader
    def missing_token_callback(reason):
        return error_response('No token provided. Please login first.', 401)

    @jwt.invalid_token_loader
    def invalid_token_callback(reason):
        current_app.logger.warning(f"Token verification error: {reason}")
        return error_response('Invalid token', 401)

    @jwt.expired_token_loader
    def expired_token_callback(jwt_header, jwt_payload):
        return error_response('Token has expired. Please login again.', 401)

def create_user_token(user):
    """Issue an access token for a user stored in the database."""
    additional_claims = {
        "role": user.role.value,
        "email": user.email,
        "userId": user.id,
    }
    return create_access_token(identity=str(user.id), additional_claims=additional_claims)

def create_admin_token(email):
    """Issue an access token for the configured admin account."""
    additional_claims = {"role": UserRole.ADMIN.value, "email": email}
    return create_access_token(identity=email, additional_claims=additional_claims)

def current_claims():
    """Decoded claims of the verified token: identity, role, email, userId."""
    claims = get_jwt()
    return {
        "identity": claims.get("sub"),
        "role": claims.get("role"),
        "email": claims.get("email"),
        "userId": claims.get("userId"),
    }

def role_required(required_roles, message="Insufficient permissions"):
    """Decorator to check if the token carries one of the required roles."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            # Verify JWT token
            verify_jwt_in_request()

            if get_jwt().get("role") not in required_roles:
                return error_response(message, 403)

            return fn(*args, **kwargs)
        return wrapper
    return decorator

def admin_role_required(fn):
    """Decorator for endpoints that require admin role."""
    return role_required([UserRole.ADMIN.value], "Access denied. Admin role required.")(fn)

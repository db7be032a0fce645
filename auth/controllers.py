from flask import current_app
from sqlalchemy.exc import IntegrityError

from common.database import db
from auth.models import User, UserRole
from auth.utils import create_admin_token, create_user_token

def _admin_profile(email):
    return {
        "id": None,
        "name": "Administrator",
        "email": email,
        "role": UserRole.ADMIN.value,
    }

def signin_user(data):
    """Sign in the configured admin or a stored user with email and password."""
    try:
        email = data['email']
        password = data['password']

        # Configured admin account first, no database lookup; disabled when unset
        admin_password = current_app.config.get('ADMIN_PASSWORD')
        if admin_password and email == current_app.config.get('ADMIN_EMAIL') and password == admin_password:
            return {
                "success": True,
                "message": "Admin login successful",
                "token": create_admin_token(email),
                "role": UserRole.ADMIN.value,
                "user": _admin_profile(email),
            }, 200

        user = User.get_by_email(email)
        if not user or not user.check_password(password):
            return {"success": False, "message": "Invalid email or password"}, 401

        return {
            "success": True,
            "message": f"{user.role.value.capitalize()} login successful",
            "token": create_user_token(user),
            "role": user.role.value,
            "user": user.serialize(),
        }, 200
    except Exception as e:
        current_app.logger.error(f"Sign in error: {str(e)}")
        return {"success": False, "message": "Sign in failed"}, 500

def signup_user(data):
    """Register a new reader account."""
    try:
        if data['email'] == current_app.config['ADMIN_EMAIL']:
            return {"success": False, "message": "This email is reserved"}, 400

        # Check if user already exists
        if User.get_by_email(data['email']):
            return {"success": False, "message": "Email already registered"}, 400

        user = User(
            name=data['name'],
            email=data['email'],
            role=UserRole.READER
        )
        user.set_password(data['password'])
        user.save()

        return {
            "success": True,
            "message": "Reader account created successfully",
            "token": create_user_token(user),
            "role": user.role.value,
            "user": user.serialize(),
        }, 201
    except IntegrityError:
        # unique index caught a concurrent signup for the same email
        db.session.rollback()
        return {"success": False, "message": "Email already registered"}, 400
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Sign up error: {str(e)}")
        return {"success": False, "message": "Sign up failed"}, 500

def get_current_user(claims):
    """Profile of the account behind the verified token."""
    try:
        if claims.get('userId') is None:
            if claims.get('role') == UserRole.ADMIN.value:
                return {"success": True, "user": _admin_profile(claims.get('email'))}, 200
            return {"success": False, "message": "User not found"}, 404

        user = User.get_by_id(claims['userId'])
        if not user:
            return {"success": False, "message": "User not found"}, 404
        return {"success": True, "user": user.serialize()}, 200
    except Exception as e:
        current_app.logger.error(f"Get user error: {str(e)}")
        return {"success": False, "message": "Failed to get user information"}, 500

def list_users():
    """All stored users, newest first."""
    try:
        users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
        return {
            "success": True,
            "count": len(users),
            "data": [user.serialize() for user in users],
        }, 200
    except Exception as e:
        current_app.logger.error(f"Error fetching users: {str(e)}")
        return {"success": False, "message": "Failed to fetch users"}, 500

def delete_user(user_id):
    try:
        user = User.get_by_id(user_id)
        if not user:
            return {"success": False, "message": "User not found"}, 404
        user.delete()
        return {"success": True, "message": "User deleted successfully"}, 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error deleting user {user_id}: {str(e)}")
        return {"success": False, "message": "Failed to delete user"}, 500

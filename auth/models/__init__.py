from .models import User, UserRole

__all__ = ['User', 'UserRole']

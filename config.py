import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Base configuration shared across environments."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_key_not_for_production')
    DEBUG = False
    TESTING = False
    PORT = int(os.getenv('PORT', '5000'))

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI', 'sqlite:///newsletter.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt_dev_key_not_for_production')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_TOKEN_LOCATION = ['headers']

    # Admin account, checked before the users table on sign-in
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', 'admin@gdgoc.com').lower()
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD', 'admin123456')

    # Cloudinary
    CLOUDINARY_CLOUD_NAME = os.getenv('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.getenv('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.getenv('CLOUDINARY_API_SECRET')
    CLOUDINARY_FOLDER = os.getenv('CLOUDINARY_FOLDER', 'gdgoc-newsletter')
    UPLOAD_RETRY_ATTEMPTS = 3
    UPLOAD_RETRY_DELAY = 1.0  # seconds
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB upload limit

    # CORS
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv('CORS_ORIGINS', 'http://localhost:3000,http://127.0.0.1:3000').split(',')
        if origin.strip()
    ]

class DevelopmentConfig(Config):
    """Configuration for development environment."""
    DEBUG = True

class ProductionConfig(Config):
    """Configuration for production environment."""
    SECRET_KEY = os.getenv('SECRET_KEY')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URI')
    # No default admin login; unset means only stored admins can sign in
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL', '').strip().lower() or None
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD') or None
    DEBUG = False

class TestingConfig(Config):
    """Configuration used by the test suite."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    ADMIN_EMAIL = 'admin@test.dev'
    ADMIN_PASSWORD = 'admin-password'
    CLOUDINARY_FOLDER = 'gdgoc-newsletter'
    UPLOAD_RETRY_DELAY = 0

# Environment mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Return the config class for the given name or FLASK_ENV."""
    config_name = config_name or os.getenv('FLASK_ENV', 'default')
    return config.get(config_name, config['default'])

import sys
import logging
from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_migrate import Migrate
from flasgger import Swagger
from sqlalchemy import text
from werkzeug.exceptions import HTTPException

from config import get_config
from common.database import db
from auth.routes import auth_bp
from auth.utils import register_jwt_callbacks
from models import *  # Import all models
from routes.newsletter_routes import newsletter_public_bp, newsletter_admin_bp
from routes.subscriber_routes import subscriber_bp
from routes.upload_routes import upload_bp, delete_bp
from services.cloudinary_service import CloudinaryService


def create_app(config_name=None, cloudinary_service=None):
    """Application factory."""
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    # Image host client, built once and shared by the upload routes
    app.extensions['cloudinary_service'] = cloudinary_service or CloudinaryService.from_app(app)

    # Configure Swagger
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec',
                "route": '/apispec.json',
                "rule_filter": lambda rule: True,
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/api/docs/"
    }

    swagger_template = {
        "swagger": "2.0",
        "info": {
            "title": "GDG Newsletter API",
            "description": "Newsletter publishing, subscriptions and admin API",
            "version": "1.0.0"
        },
        "securityDefinitions": {
            "Bearer": {
                "type": "apiKey",
                "name": "Authorization",
                "in": "header",
                "description": "JWT Authorization header using the Bearer scheme. Example: \"Authorization: Bearer {token}\""
            }
        }
    }

    Swagger(app, config=swagger_config, template=swagger_template)

    CORS(app,
         origins=app.config['CORS_ORIGINS'],
         supports_credentials=True,
         allow_headers=["Content-Type", "Authorization"],
         methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
         max_age=3600)  # Cache preflight requests for 1 hour

    # Initialize extensions
    db.init_app(app)
    jwt = JWTManager(app)
    register_jwt_callbacks(jwt)
    Migrate(app, db)

    # Register blueprints
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(auth_bp, url_prefix='/api/auth', name='api_auth')
    app.register_blueprint(newsletter_public_bp, url_prefix='/api/newsletters')
    app.register_blueprint(newsletter_admin_bp, url_prefix='/admin/newsletters')
    app.register_blueprint(subscriber_bp, url_prefix='/api/subscribers')
    app.register_blueprint(upload_bp, url_prefix='/api/cloudinary-upload')
    app.register_blueprint(delete_bp, url_prefix='/api/cloudinary-delete')

    @app.after_request
    def log_failed_requests(response):
        if response.status_code >= 500:
            app.logger.error(f"{request.method} {request.path} -> {response.status_code}")
        elif response.status_code >= 400:
            app.logger.info(f"{request.method} {request.path} -> {response.status_code}")
        return response

    @app.route('/health')
    def health():
        return jsonify({"status": "Server running"})

    # Error handlers
    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"success": False, "message": "Route not found"}), 404

    @app.errorhandler(413)
    def payload_too_large(error):
        return jsonify({"success": False, "message": "File too large. Maximum size is 10MB"}), 413

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({"success": False, "message": error.description}), error.code

    @app.errorhandler(Exception)
    def handle_error(error):
        db.session.rollback()
        app.logger.exception(f"Unhandled error on {request.method} {request.path}: {error}")
        return jsonify({"success": False, "message": "Internal server error"}), 500

    return app


def init_database(app):
    """Check the database is reachable and create missing tables."""
    with app.app_context():
        db.session.execute(text('SELECT 1'))
        db.create_all()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    app = create_app()
    try:
        init_database(app)
    except Exception as e:
        app.logger.critical(f"Database connection error: {e}")
        sys.exit(1)
    app.logger.info("Database connected successfully")
    app.run(host='0.0.0.0', port=app.config['PORT'])

import logging

from flask import Flask
from flasgger import Swagger
from flask_cors import CORS

from .config import get_config
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Book Manager API",
        "version": "1.0.0",
        "description": "REST API for managing books and their authors.",
    },
    "basePath": "/",  # Blueprints are mounted under /api/v1
    "schemes": ["http"],
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def create_app(config_name: str | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    Each call rebinds the shared storage to the configured database,
    so tests get an isolated database per app.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))

    logging.getLogger().setLevel(app.config["LOG_LEVEL"])

    storage.configure(app.config["DATABASE_URL"], echo=app.config["SQLALCHEMY_ECHO"])
    storage.reload()

    # Cross-Origin Resource Sharing: enable for dev, configurable for prod
    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Register global error handlers that return the uniform error envelope
    register_error_handlers(app)

    from .health import bp as health_bp
    from .authors import bp as authors_bp
    from .books import bp as books_bp

    app.register_blueprint(health_bp, url_prefix="/api/v1")
    app.register_blueprint(authors_bp, url_prefix="/api/v1")
    app.register_blueprint(books_bp, url_prefix="/api/v1")

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        # This calls scoped_session.remove(), preventing connection leaks
        storage.close()

    @app.route("/")
    def root():
        return {
            "message": "Welcome to Book Manager API",
            "docs": "/apidocs/",
            "health": "/api/v1/health",
        }, 200

    return app

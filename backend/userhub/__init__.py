"""Application factory and blueprint registration."""
from __future__ import annotations

from flask import Flask
from flask_cors import CORS
from loguru import logger

from .api.health.routes import bp as health_bp
from .api.users.routes import StoreFactory, build_blueprint
from .config import BaseConfig
from .db.migrate import migrate
from .db.repositories.user_repo import UserRepository, UserStore
from .db.session import db
from .docs.routes import bp as docs_bp
from .errors import register_error_handlers
from .logging_config import setup_logging


def sqlalchemy_store() -> UserStore:
    assert db.Session is not None, "DB session is not initialized"
    return UserRepository(db.Session())


def create_app(config: BaseConfig | None = None, store_factory: StoreFactory | None = None) -> Flask:
    """Create and configure the Flask application."""
    config = config or BaseConfig()
    setup_logging(config.LOG_LEVEL)

    app = Flask(__name__)
    app.config.from_object(config)
    CORS(app, resources={r"/*": {"origins": config.cors_origins}})

    # Init extensions
    db.init_app(app)
    if config.AUTO_MIGRATE:
        migrate(db.engine)

    # Register blueprints
    app.register_blueprint(health_bp, url_prefix="/health")
    app.register_blueprint(build_blueprint(store_factory or sqlalchemy_store), url_prefix="/users")
    app.register_blueprint(docs_bp)

    # Global error handlers
    register_error_handlers(app)
    logger.info("userhub ready (database: {})", db.engine.url.render_as_string(hide_password=True))
    return app

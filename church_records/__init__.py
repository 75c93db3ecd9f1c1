from flask import Flask, jsonify
from flask_cors import CORS
from dotenv import load_dotenv
import os
import logging

from church_records.extensions import db, configure_sqlite_engine
from church_records.exceptions import ChurchRecordsError, StorageError

# Load environment variables
load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ["true", "1", "t", "yes"]


def create_schema_app(test_config=None):
    """App with the database configured but no routes and no schema check.

    Used by the migration script, which must open stores that are behind.
    """
    app = Flask(__name__)

    # Configure logging
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=log_level)
    app.logger.setLevel(log_level)

    # Configure database
    app.config["SQLALCHEMY_DATABASE_URI"] = os.getenv(
        "DATABASE_URL", "sqlite:///church_fund_records.db"
    )
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["SCHEMA_AUTO_UPGRADE"] = _env_flag("SCHEMA_AUTO_UPGRADE", "true")

    if test_config:
        app.config.update(test_config)

    db.init_app(app)

    with app.app_context():
        configure_sqlite_engine(db.engine)

    return app


def create_app(test_config=None):
    app = create_schema_app(test_config)

    # Entity operations are only served on a fully migrated store
    with app.app_context():
        from church_records.migrations import SchemaManager

        manager = SchemaManager(db.engine)
        if app.config["SCHEMA_AUTO_UPGRADE"]:
            app.logger.info(f"Upgrading schema: {manager.status()}")
            manager.upgrade()

        status = manager.status()
        if status["current_version"] != status["head_version"]:
            app.logger.error(f"Refusing to start on an unmigrated store: {status}")
            raise StorageError(
                f"Store is at schema version {status['current_version']}, "
                f"expected {status['head_version']}; run scripts/migrate_database.py"
            )
        app.logger.info(f"Schema is at version {status['current_version']}")

    # Register blueprints
    from church_records.routes.crud_routes import (
        church_bp,
        member_bp,
        fund_type_bp,
        fund_bp,
    )
    from church_records.routes.command_routes import command_bp

    app.register_blueprint(church_bp)
    app.register_blueprint(member_bp)
    app.register_blueprint(fund_type_bp)
    app.register_blueprint(fund_bp)
    app.register_blueprint(command_bp, url_prefix="/api")

    @app.errorhandler(ChurchRecordsError)
    def handle_records_error(e):
        return jsonify(e.to_dict()), e.status_code

    # Set up CORS
    cors_origins = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:1420,tauri://localhost,http://tauri.localhost",
    ).split(",")
    app.logger.info(f"Initializing CORS with origins: {cors_origins}")

    CORS(
        app,
        resources={
            r"/api/*": {"origins": cors_origins},
        },
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept"],
        expose_headers=["Content-Type"],
    )

    return app

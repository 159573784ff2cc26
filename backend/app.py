from flask import Flask, jsonify
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from pymongo.errors import PyMongoError

from backend.utils.auth import init_jwt


def create_app(config_overrides=None, mongo_client=None):
    app = Flask(__name__)
    app.config.from_object("backend.config.Config")
    if config_overrides:
        app.config.from_mapping(config_overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Core extensions
    CORS(app, origins=[app.config["CORS_ORIGIN"]], supports_credentials=True)
    init_jwt(JWTManager(app))

    if app.config["JWT_SECRET_KEY"] == "change-this-jwt-secret" and not app.config["TESTING"]:
        app.logger.warning("JWT_SECRET_KEY is not configured; using the insecure default.")

    from backend.utils.db import init_app as init_db, ping
    from backend.utils.errors import register_error_handlers

    init_db(app, client=mongo_client)
    register_error_handlers(app)

    # Register blueprints
    from backend.routes.auth_routes import auth_bp
    from backend.routes.task_routes import tasks_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(tasks_bp, url_prefix="/tasks")

    @app.get("/")
    def index():
        return jsonify("Task Server....."), 200

    @app.get("/health")
    def health():
        try:
            ping()
        except PyMongoError as exc:
            app.logger.error("MongoDB ping failed: %s", exc)
            return jsonify(status="degraded", database="unreachable"), 503
        return jsonify(status="ok", database="connected"), 200

    return app


if __name__ == "__main__":
    # Direct run support: python -m backend.app
    app = create_app()
    app.run(
        host=app.config["HOST"],
        port=app.config["PORT"],
        debug=app.config["DEBUG"],
    )

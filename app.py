from flask import Flask, request
from sqlalchemy.engine import make_url

from config import Config
from extensions import db, cors
from routes import contact_bp, health_bp
from utils.api_response import send_error
from utils.errors import GENERIC_ERROR_MESSAGE, get_status_code
import models  # Register models before create_all


def register_error_handlers(app):
    @app.errorhandler(Exception)
    def handle_error(e):
        status_code = get_status_code(e)
        if status_code >= 500:
            # Cause stays in the server log; clients get a generic message
            db.session.rollback()
            app.logger.exception(f"[FAIL] Error processing {request.method} {request.path}: {e}")
            return send_error("Request failed", GENERIC_ERROR_MESSAGE, status_code)

        return send_error("Request failed", getattr(e, "description", None) or str(e), status_code)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.json.sort_keys = False

    db.init_app(app)
    cors.init_app(app, origins=app.config["CORS_ORIGINS"])

    @app.before_request
    def log_request_info():
        """Log incoming JSON requests for debugging."""
        if request.method in ["POST", "PUT", "PATCH"] and request.is_json:
            app.logger.debug(f"[DEBUG] {request.path} Body: {request.get_json(silent=True)}")

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(contact_bp, url_prefix="/api")
    register_error_handlers(app)

    with app.app_context():
        db.create_all()

    url = make_url(app.config["SQLALCHEMY_DATABASE_URI"])
    app.logger.info(f"[OK] Database ready: {url.render_as_string(hide_password=True)}")
    return app


app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=app.config["API_PORT"], debug=app.config["ENVIRONMENT"] == "development")

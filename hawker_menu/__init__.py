from flask import Flask
from flask_cors import CORS
from .config.settings import get_config_class

def create_app(config_class=None):
    """Application factory pattern"""
    config_class = config_class or get_config_class()

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    config_class.init_app(app)

    # Register blueprints
    from .routes.analysis import analysis_bp
    from .routes.extract import extract_bp
    from .routes.chat import chat_bp
    from .routes.health import health_bp

    app.register_blueprint(analysis_bp)
    app.register_blueprint(extract_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(health_bp)

    return app

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Config:
    """Base configuration class"""

    # Flask settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    MAX_CONTENT_LENGTH = 8 * 1024 * 1024  # hard cap per request

    # Upload settings (Gemini inline image parts should stay small)
    MAX_IMAGE_BYTES = 4 * 1024 * 1024
    ALLOWED_MIME_TYPES = {"image/png", "image/jpeg"}

    # Google Cloud settings
    GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
    GOOGLE_CLOUD_PROJECT = os.getenv("GOOGLE_CLOUD_PROJECT")
    GOOGLE_CLOUD_LOCATION = os.getenv("GOOGLE_CLOUD_LOCATION", "global")

    # Model settings
    MENU_VISION_MODEL = os.getenv("MENU_VISION_MODEL", "gemini-2.5-flash")
    MENU_CHAT_MODEL = os.getenv("MENU_CHAT_MODEL", "gemini-2.5-flash")

    # Error payloads carry debug details unless running in production
    IS_PRODUCTION = False

    @staticmethod
    def init_app(app):
        """Initialize app with configuration"""
        app.json.ensure_ascii = False

class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True

class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    IS_PRODUCTION = True

class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config_class(name: str = None):
    """Resolve a config class from a name or the APP_ENV variable"""
    return config.get(name or os.getenv("APP_ENV", "default"), DevelopmentConfig)

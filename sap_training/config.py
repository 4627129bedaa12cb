import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Storage backend: 'json' (flat files) or 'sql' (hosted database)
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'json')
    DATA_FOLDER = os.environ.get('DATA_FOLDER') or os.path.join(basedir, 'data')

    # Database - SQLite locally, DATABASE_URL (Postgres) when deployed
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{os.path.join(basedir, "instance", "sap_training.db")}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_AUTO_CREATE = True

    # Upload Configuration
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or os.path.join(basedir, 'uploads')
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024  # 10MB max request size
    MATERIAL_MIME_TYPES = {'application/pdf'}
    FEEDBACK_IMAGE_MAX_SIZE = 5 * 1024 * 1024
    FEEDBACK_DEFAULT_STATUS = os.environ.get('FEEDBACK_DEFAULT_STATUS', 'approved')

    # Mail Configuration
    MAIL_SERVER = os.environ.get('MAIL_SERVER', 'smtp.gmail.com')
    MAIL_PORT = int(os.environ.get('MAIL_PORT', 587))
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS', 'True').lower() == 'true'
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')
    MAIL_DEFAULT_SENDER = os.environ.get('MAIL_USERNAME')
    NOTIFY_EMAIL = os.environ.get('NOTIFY_EMAIL')

    # SNS notifications (optional)
    AWS_REGION = os.environ.get('AWS_REGION', 'ap-south-1')
    SNS_TOPIC_ARN = os.environ.get('SNS_TOPIC_ARN')

    # Admin login - static credentials, no session is issued
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME', 'admin')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin123')
    ADMIN_PASSWORD_HASH = os.environ.get('ADMIN_PASSWORD_HASH')

    # Details used by the chat assistant
    SITE_NAME = 'Shashank SAP Training'
    SUPPORT_PHONES = ['+91 98765 43210', '+91 98765 43211']
    SUPPORT_EMAIL = 'info@shashanksaptraining.com'
    SITE_LOCATION = 'Hyderabad, Telangana'
    OFFICE_HOURS = 'Mon-Sat: 9 AM - 8 PM'

    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production (serverless) configuration."""
    DEBUG = False
    STORAGE_BACKEND = os.environ.get('STORAGE_BACKEND', 'sql')
    # Only /tmp is writable on serverless hosts; files do not survive cold starts
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', '/tmp/uploads')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    MAIL_USERNAME = None
    NOTIFY_EMAIL = None
    SNS_TOPIC_ARN = None
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'
    ADMIN_PASSWORD_HASH = None


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

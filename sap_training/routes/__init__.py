"""Routes package - register all blueprints."""

from flask import Flask


def register_blueprints(app: Flask):
    """Register all blueprints with the application."""
    from .main import main_bp
    from .contact import contact_bp
    from .chat import chat_bp
    from .feedback import feedback_bp
    from .materials import materials_bp
    from .admin import admin_bp

    app.register_blueprint(main_bp, url_prefix='/api')
    app.register_blueprint(contact_bp, url_prefix='/api')
    app.register_blueprint(chat_bp, url_prefix='/api/chat')
    app.register_blueprint(feedback_bp, url_prefix='/api')
    app.register_blueprint(materials_bp, url_prefix='/api/materials')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')

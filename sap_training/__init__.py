"""Flask application factory."""

import os
from flask import Flask, jsonify
from .config import config
from .extensions import db, migrate, mail, cors
from .storage import init_storage
from .utils.files import format_size


def create_app(config_name=None, test_config=None):
    """Create and configure the Flask application."""
    if config_name is None:
        config_name = os.environ.get('FLASK_CONFIG', 'development')

    app = Flask(__name__)
    app.config.from_object(config[config_name])
    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    mail.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config.get('CORS_ORIGINS', '*')}})

    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    init_storage(app)

    # Register blueprints
    from .routes import register_blueprints
    register_blueprints(app)

    # Error handlers
    @app.errorhandler(404)
    def not_found_error(error):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        return jsonify({'success': False, 'message': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def too_large_error(error):
        return jsonify({
            'success': False,
            'message': f"File too large. Maximum upload size is {format_size(app.config['MAX_CONTENT_LENGTH'])}"
        }), 413

    @app.errorhandler(500)
    def internal_error(error):
        if app.config['STORAGE_BACKEND'] == 'sql':
            db.session.rollback()
        return jsonify({'success': False, 'message': 'An error occurred. Please try again later.'}), 500

    return app

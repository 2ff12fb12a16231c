from flask import Flask, render_template
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import markdown
import logging

load_dotenv()

csrf = CSRFProtect()


def create_app(test_config=None):
    # Validate required environment variables
    required_vars = ['SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var) and not (test_config and test_config.get(var)):
            raise ValueError(f"Required environment variable {var} is not set")

    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from tuitility.routes.main import main_bp
    from tuitility.routes.tools import tools_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(tools_bp)

    from tuitility import commands
    commands.init_app(app)

    # Register markdown filter for tool content sections
    @app.template_filter('markdown')
    def markdown_filter(text):
        return markdown.markdown(text, extensions=['fenced_code', 'tables'])

    @app.context_processor
    def inject_site():
        return {'site_name': app.config.get('SITE_NAME', 'Tuitility')}

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(413)
    def too_large(e):
        limit = app.config['MAX_DOCUMENT_BYTES'] // (1024 * 1024)
        return render_template('error.html', title="File too large",
                               message=f"Uploads are limited to {limit} MB."), 413

    @app.errorhandler(500)
    def server_error(e):
        return render_template('error.html', title="Something went wrong",
                               message="Please try again in a moment."), 500

    return app

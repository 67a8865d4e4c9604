#!/usr/bin/env python3
"""
Watchlist web application
"""
import logging

from flask import Flask, jsonify

from config import Config
from watchlist_manager import create_service
from watchlist_manager.api import bp as watchlist_bp
from watchlist_manager.notify import AlertBoard

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure logging"""
    handlers = [logging.StreamHandler()]
    if Config.LOG_FILE:
        handlers.append(logging.FileHandler(Config.LOG_FILE))
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def create_app(service=None, alerts=None) -> Flask:
    app = Flask(__name__)

    alerts = alerts or AlertBoard(timeout=Config.ALERT_TIMEOUT)
    app.extensions['watchlist_alerts'] = alerts

    if service is None:
        service = create_service(notify=alerts)
    service.init_app(app)

    app.register_blueprint(watchlist_bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'success': False, 'message': 'Not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        return jsonify({'success': False, 'message': 'Internal server error'}), 500

    return app


if __name__ == '__main__':
    setup_logging()
    app = create_app()
    logger.info("Starting watchlist web application")
    logger.info("Storage backend: %s", Config.WATCHLIST_BACKEND)
    logger.info("Address: http://%s:%s", Config.HOST, Config.PORT)

    app.run(debug=Config.DEBUG, host=Config.HOST, port=Config.PORT)

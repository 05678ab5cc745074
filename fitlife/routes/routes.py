from datetime import datetime, timezone

from flask import current_app, jsonify


def register_routes(app):

    @app.route('/')
    def home():
        return jsonify({
            'message': f"Welcome to {current_app.config['APP_NAME']}",
            'version': current_app.config['APP_VERSION'],
            'endpoints': {
                'status': '/api/status',
                'profile': '/api/health/profile',
                'logs': '/api/logs',
                'recommendations': '/api/recommendations',
                'analytics': '/api/analytics',
                'challenges': '/api/challenges'
            }
        }), 200

    @app.route('/api/status')
    def status():
        return jsonify({
            'status': 'ok',
            'app': current_app.config['APP_NAME'],
            'timestamp': datetime.now(timezone.utc).isoformat()
        }), 200

# SAP Training site backend
# Local development uses the JSON-file backend (FLASK_CONFIG=development);
# the serverless deployment sets FLASK_CONFIG=production and DATABASE_URL.

import os
from sap_training import create_app

app = create_app()

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 3000))
    app.logger.info(f"Server running on: http://localhost:{port}")
    app.logger.info(f"API health check: http://localhost:{port}/api/health")
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', False))

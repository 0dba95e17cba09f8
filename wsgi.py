"""WSGI entry point for the property planner application."""

import os
import sys

from property_planner import create_app

app = create_app()

if __name__ == "__main__":
    port = 5000

    # PORT is set by most hosting platforms
    if "PORT" in os.environ:
        port = int(os.environ["PORT"])

    if len(sys.argv) > 2 and sys.argv[1] == "--port":
        port = int(sys.argv[2])

    debug = os.environ.get("FLASK_ENV", "development") == "development"
    app.run(debug=debug, host="0.0.0.0", port=port)

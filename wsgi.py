"""WSGI entry point for the FIRE projection API."""

from fireplan.app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=5000, debug=app.config["DEBUG"])

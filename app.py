"""Run the offboarding API with Flask's development server.

Production deployments point a WSGI server at ``app:app`` instead.
"""
import importlib

from config import get_settings_module

from src.offboarding_system.offboarding_system.main import create_app

app = create_app()


if __name__ == "__main__":
    settings = importlib.import_module(get_settings_module())
    app.run(host="0.0.0.0", port=int(getattr(settings, "PORT", 3601)), debug=bool(getattr(settings, "DEBUG", False)))

"""WSGI entry point, e.g. ``gunicorn main:app`` from this directory."""
from __future__ import annotations

from userhub import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host="0.0.0.0", port=8080)

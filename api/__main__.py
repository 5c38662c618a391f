"""Serve the API with ``python -m api``."""

from api.main import run

run()

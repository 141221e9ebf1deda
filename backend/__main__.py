"""Run the service with ``python -m backend``."""

from backend.main import run

run()

"""Entry point for ``python -m canvas_studio``."""

from .cli import app

if __name__ == "__main__":
    app()

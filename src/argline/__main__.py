"""
Entry point for running the CLI as a module.

This allows the package to be executed with: python -m argline
"""

from argline.cli import app

if __name__ == "__main__":
    app()

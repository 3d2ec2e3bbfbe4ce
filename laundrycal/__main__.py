"""
Convenience entry point for running laundrycal directly.

Usage: python -m laundrycal [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()

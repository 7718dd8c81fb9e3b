"""
Entry point for running the drill trainer as a module.

Usage:
    python -m drill <name>
    python -m drill --help
"""
from drill.cli.drill_cli import run

if __name__ == "__main__":
    run()

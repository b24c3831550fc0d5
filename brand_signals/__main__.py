"""
Entry point for running brand-signals as a module.

Enables execution via:
    python -m brand_signals [command] [options]

This is equivalent to running the installed CLI:
    brand-signals [command] [options]

Examples:
    python -m brand_signals --help
    python -m brand_signals analyze -c examples/analyzer.yaml -r examples/response.md
    python -m brand_signals validate --config examples/analyzer.yaml
"""

from brand_signals.cli import app

if __name__ == "__main__":
    app()

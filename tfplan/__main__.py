"""
Punto de entrada: python -m tfplan

Delega en la misma app que el script `tfplan` (tfplan.cli.app).
"""

from tfplan.cli.app import app

if __name__ == "__main__":
    app()

"""
tfplan - Presentación legible de planes de Terraform (texto, interactivo, HTML).
"""

__version__ = "0.1.0"

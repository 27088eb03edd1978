"""Tests de tfplan."""

"""Conversion of surfaces into PyVista datasets for preview rendering."""

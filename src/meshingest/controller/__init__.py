"""Orchestration of the ingestion pipeline (read -> decode -> normalize -> lump)."""

"""Observability – logging for the dispatch core."""

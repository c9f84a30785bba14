"""Testing helpers for code built on bootstrap_core."""

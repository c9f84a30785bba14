"""Application layer – command/query dispatch."""

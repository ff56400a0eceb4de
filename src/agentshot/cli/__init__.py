"""Command-line interface for agentshot."""

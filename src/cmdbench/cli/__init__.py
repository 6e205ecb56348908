"""Command line interface for cmdbench."""

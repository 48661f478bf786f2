"""CLI commands for prj."""

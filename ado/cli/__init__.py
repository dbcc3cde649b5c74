"""Command-line interface: argument parsing, dispatch, and the click entry point."""

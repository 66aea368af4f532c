"""Command-line entry point that serves the browser over HTTP."""

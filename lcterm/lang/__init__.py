"""Error handling and the command-line driver (sessions and the interactive shell)."""

"""CLI core: entry point, theme, async bridge and error handling."""

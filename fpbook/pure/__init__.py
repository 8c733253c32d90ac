"""Pure functions from the getting-started exercises."""

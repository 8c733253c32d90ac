"""Property-based tests for fpbook."""

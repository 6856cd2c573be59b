"""Cross-cutting infrastructure shared by features and the CLI."""

"""CLI tools for clean-scaffold."""

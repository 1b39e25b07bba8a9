"""Command-line entry points: ``terraform-assess`` and ``terraform-generate``."""

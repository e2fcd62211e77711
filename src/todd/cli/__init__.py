"""Todd command-line interface."""

"""thd command-line interface."""

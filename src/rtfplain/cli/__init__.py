"""rtfplain command line interface."""

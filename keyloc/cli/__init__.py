"""keyloc command line interface."""

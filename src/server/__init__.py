"""HTTP front end for macrowiki."""

"""Command line front end for the release cache."""

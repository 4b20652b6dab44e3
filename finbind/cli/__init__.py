"""Command-line front end for finbind."""

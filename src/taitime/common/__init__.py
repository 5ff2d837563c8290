"""Contains the configuration, logging, exceptions, and file helpers used across all other packages."""

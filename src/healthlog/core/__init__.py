"""Core plumbing: configuration, exceptions, logging, file helpers and the CLI."""

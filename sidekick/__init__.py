"""Sidekick status - reports whether a project is a registered Side workspace."""

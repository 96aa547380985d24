"""Parsing of user input into commands."""

from hubhealth.parser.registry import CommandRegistry, get_command_registry

__all__ = ["CommandRegistry", "get_command_registry"]

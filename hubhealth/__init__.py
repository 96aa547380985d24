"""HubHealth: a command-line patient and appointment manager for clinics."""

__version__ = "0.1.0"

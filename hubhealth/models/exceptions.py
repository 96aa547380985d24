"""Exceptions raised across HubHealth."""


class HubHealthError(Exception):
    """Base class for all HubHealth errors."""


class ParseError(HubHealthError):
    """User input could not be understood."""


class CommandError(HubHealthError):
    """A well-formed command could not be carried out."""


class DataLoadingError(HubHealthError):
    """A data or configuration file exists but could not be loaded."""


class DuplicatePatientError(HubHealthError):
    """The operation would result in two patients with the same identity."""

    def __init__(self):
        super().__init__("Operation would result in duplicate patients")


class PatientNotFoundError(HubHealthError):
    """The operation could not find the specified patient."""


class DuplicateAppointmentError(HubHealthError):
    """The patient already has an appointment at that start time."""

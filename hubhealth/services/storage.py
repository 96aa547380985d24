"""JSON file storage for patient data and user preferences."""

from pathlib import Path
from typing import Protocol

from hubhealth.models.exceptions import DataLoadingError
from hubhealth.models.json_adapted import JsonSerializablePatientBook
from hubhealth.models.patient_book import PatientBook
from hubhealth.models.prefs import UserPrefs
from hubhealth.utils.config import read_json_model, save_json_model
from hubhealth.utils.logging import get_logger

logger = get_logger(__name__)


class PatientBookStorage(Protocol):
    """Interface for reading and writing the patient book."""

    @property
    def patient_book_file_path(self) -> Path: ...

    def read_patient_book(self) -> PatientBook | None:
        """Read the patient book.

        Returns:
            The stored patient book, or None if nothing has been stored yet

        Raises:
            DataLoadingError: If the stored data is unreadable or invalid
        """
        ...

    def save_patient_book(self, book: PatientBook) -> None:
        """Write the patient book.

        Raises:
            OSError: If the file cannot be written
        """
        ...


class UserPrefsStorage(Protocol):
    """Interface for reading and writing user preferences."""

    @property
    def user_prefs_file_path(self) -> Path: ...

    def read_user_prefs(self) -> UserPrefs | None: ...

    def save_user_prefs(self, prefs: UserPrefs) -> None: ...


class Storage(PatientBookStorage, UserPrefsStorage, Protocol):
    """Combined storage interface used by the application."""


class JsonPatientBookStorage:
    """Stores the patient book as a JSON file."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    @property
    def patient_book_file_path(self) -> Path:
        return self.file_path

    def read_patient_book(self) -> PatientBook | None:
        logger.debug(f"Attempting to read patient data from file: {self.file_path}")

        serialized = read_json_model(self.file_path, JsonSerializablePatientBook)
        if serialized is None:
            return None

        try:
            return serialized.to_model()
        except ValueError as e:
            logger.warning(f"Illegal values found in {self.file_path}: {e}")
            raise DataLoadingError(f"Illegal values found in {self.file_path}: {e}") from e

    def save_patient_book(self, book: PatientBook) -> None:
        logger.debug(f"Saving {len(book)} patients to {self.file_path}")
        save_json_model(self.file_path, JsonSerializablePatientBook.from_model(book))


class JsonUserPrefsStorage:
    """Stores user preferences as a JSON file."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    @property
    def user_prefs_file_path(self) -> Path:
        return self.file_path

    def read_user_prefs(self) -> UserPrefs | None:
        return read_json_model(self.file_path, UserPrefs)

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        save_json_model(self.file_path, prefs)


class StorageManager:
    """Default ``Storage`` implementation delegating to the JSON stores."""

    def __init__(self, patient_book_storage: PatientBookStorage, user_prefs_storage: UserPrefsStorage):
        self.patient_book_storage = patient_book_storage
        self.user_prefs_storage = user_prefs_storage

    @property
    def patient_book_file_path(self) -> Path:
        return self.patient_book_storage.patient_book_file_path

    def read_patient_book(self) -> PatientBook | None:
        return self.patient_book_storage.read_patient_book()

    def save_patient_book(self, book: PatientBook) -> None:
        self.patient_book_storage.save_patient_book(book)

    @property
    def user_prefs_file_path(self) -> Path:
        return self.user_prefs_storage.user_prefs_file_path

    def read_user_prefs(self) -> UserPrefs | None:
        return self.user_prefs_storage.read_user_prefs()

    def save_user_prefs(self, prefs: UserPrefs) -> None:
        self.user_prefs_storage.save_user_prefs(prefs)

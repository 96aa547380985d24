"""Application start-up and shut-down."""

from pathlib import Path

from hubhealth import __version__
from hubhealth.models.exceptions import DataLoadingError
from hubhealth.models.patient_book import PatientBook
from hubhealth.models.prefs import UserPrefs
from hubhealth.models.sample_data import get_sample_patient_book
from hubhealth.services.logic import Logic, LogicManager
from hubhealth.services.model import Model, ModelManager
from hubhealth.services.storage import (
    JsonPatientBookStorage,
    JsonUserPrefsStorage,
    Storage,
    StorageManager,
)
from hubhealth.utils.config import Config, load_config
from hubhealth.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


class MainApp:
    """Wires configuration, storage, model and logic together."""

    def __init__(self):
        self.config: Config | None = None
        self.storage: Storage | None = None
        self.model: Model | None = None
        self.logic: Logic | None = None

    def init(self, config_path: Path | None = None) -> Logic:
        """Initialize every component in dependency order.

        Args:
            config_path: Config file to use instead of ``config.json``

        Returns:
            The logic component for the user interface to drive
        """
        self.config = load_config(config_path)
        setup_logging(self.config.log_config())
        logger.info(f"=============================[ Initializing HubHealth {__version__} ]===========================")

        user_prefs = self._init_prefs(JsonUserPrefsStorage(self.config.user_prefs_file_path))
        self.storage = StorageManager(
            JsonPatientBookStorage(user_prefs.patient_book_file_path),
            JsonUserPrefsStorage(self.config.user_prefs_file_path),
        )
        self.model = self._init_model(self.storage, user_prefs)
        self.logic = LogicManager(self.model, self.storage)
        return self.logic

    def _init_prefs(self, prefs_storage: JsonUserPrefsStorage) -> UserPrefs:
        """Load user prefs, falling back to defaults when missing or unreadable."""
        logger.info(f"Using preference file: {prefs_storage.user_prefs_file_path}")

        try:
            prefs = prefs_storage.read_user_prefs()
            if prefs is None:
                logger.info(f"Creating new preference file {prefs_storage.user_prefs_file_path}")
                prefs = UserPrefs()
        except DataLoadingError:
            logger.warning(
                f"Preference file at {prefs_storage.user_prefs_file_path} could not be loaded. "
                "Using default preferences."
            )
            prefs = UserPrefs()

        try:
            prefs_storage.save_user_prefs(prefs)
        except OSError as e:
            logger.warning(f"Failed to save preference file: {e}")

        return prefs

    def _init_model(self, storage: Storage, user_prefs: UserPrefs) -> Model:
        """Build the model from stored data.

        A missing data file starts HubHealth with sample patients; a data
        file that cannot be loaded starts it with no patients.
        """
        logger.info(f"Using data file: {storage.patient_book_file_path}")

        try:
            book = storage.read_patient_book()
            if book is None:
                logger.info(
                    f"Creating a new data file {storage.patient_book_file_path} populated with sample patients."
                )
                book = get_sample_patient_book()
        except DataLoadingError:
            logger.warning(
                f"Data file at {storage.patient_book_file_path} could not be loaded. "
                "Will be starting with an empty patient list."
            )
            book = PatientBook()

        return ModelManager(book, user_prefs)

    def stop(self) -> None:
        """Save user prefs on the way out. Failures are logged, not raised."""
        logger.info("============================ [ Stopping HubHealth ] =============================")
        if self.storage is None or self.model is None:
            return

        try:
            self.storage.save_user_prefs(self.model.user_prefs)
        except OSError as e:
            logger.error(f"Failed to save preferences: {e}", exc_info=True)

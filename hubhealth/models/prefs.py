"""User preference models."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_PATIENT_BOOK_FILE = Path("data") / "HubHealth.json"


class UserPrefs(BaseModel):
    """User preferences persisted between runs."""

    model_config = ConfigDict(validate_assignment=True)

    patient_book_file_path: Path = DEFAULT_PATIENT_BOOK_FILE

"""User account model."""

from dataclasses import dataclass
from enum import Enum

from .base import Record


class PcosType(str, Enum):
    """PCOS phenotype the user reports."""

    INSULIN_RESISTANT = "insulin_resistant"
    INFLAMMATORY = "inflammatory"
    ADRENAL = "adrenal"
    POST_PILL = "post_pill"
    UNKNOWN = "unknown"


@dataclass
class User(Record):
    """A registered user and their app preferences."""

    username: str
    email: str
    password: str
    name: str | None = None
    date_of_birth: str | None = None  # ISO calendar day
    height: float | None = None  # in cm
    weight: float | None = None  # in kg
    has_pcos: bool = False
    pcos_type: PcosType | None = None
    language: str = "en"
    dark_mode: bool = False
    fitness_integration: bool = False
    id: int | None = None

    def __post_init__(self):
        if isinstance(self.pcos_type, str):
            self.pcos_type = PcosType(self.pcos_type)

    def to_public_dict(self) -> dict:
        """Serialize without the password, for API responses."""
        data = self.to_dict()
        data.pop("password", None)
        return data

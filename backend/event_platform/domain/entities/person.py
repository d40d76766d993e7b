"""Domain entity: a natural person behind a user account or a speaker profile."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from .lifecycle import LifecycleEntity


class PersonType(str, Enum):
    """Why the person record exists."""

    USER_PERSON = "user_person"
    SPEAKER_PERSON = "speaker_person"


@dataclass
class Person(LifecycleEntity):
    """A person; ``email`` is unique among non-deleted persons when present."""

    first_name: str
    last_name: str
    type: PersonType
    email: str | None = None
    phone: str | None = None
    date_of_birth: date | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

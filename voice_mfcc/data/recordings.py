"""
Subject metadata and the names derived from it.

Every prompt a subject records is named
``{name}_{age}_{gender}_phrase{n}``; the audio is written as ``<base>.wav``
and its MFCCs are stored under ``<base>_mfcc``.
"""

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    """Gender options offered to subjects (labels as shown in the form)."""
    MALE = 'Laki-laki'
    FEMALE = 'Perempuan'
    OTHER = 'Lainnya'

    @classmethod
    def parse(cls, value) -> 'Gender':
        """Accept a Gender, its label, or its member name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        for member in cls:
            if value == member.value or str(value).upper() == member.name:
                return member
        raise ValueError(f"Unknown gender: {value!r}")


@dataclass(frozen=True)
class Demographics:
    """Container for a subject's metadata."""
    name: str
    age: int
    gender: Gender

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("name must not be empty")
        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age <= 0:
            raise ValueError(f"age must be a positive integer, got {self.age!r}")
        object.__setattr__(self, 'gender', Gender.parse(self.gender))


def recording_basename(demographics: Demographics, phrase_number: int) -> str:
    """Base name for one recorded prompt; phrase numbers start at 1."""
    if phrase_number < 1:
        raise ValueError(f"phrase_number starts at 1, got {phrase_number}")
    d = demographics
    return f"{d.name}_{d.age}_{d.gender.value}_phrase{phrase_number}"


def audio_filename(demographics: Demographics, phrase_number: int) -> str:
    return recording_basename(demographics, phrase_number) + '.wav'


def feature_key(demographics: Demographics, phrase_number: int) -> str:
    """Key under which a prompt's MFCCs are persisted."""
    return recording_basename(demographics, phrase_number) + '_mfcc'

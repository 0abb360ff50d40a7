"""SelfCoding — let a value encode itself and decode instances of itself.

Pure delegation to :class:`~dirjson.services.coding.FileCoordinator`
with the target bound to the class, so behaviour can never drift from
calling the coordinator directly.
"""

from __future__ import annotations

from typing import ClassVar, Self

from dirjson.config.settings import DirJsonSettings
from dirjson.domain.directories import Directory
from dirjson.domain.errors import CodingError
from dirjson.services.coding import FileCoordinator, Location


class SelfCoding:
    """Mixin for pydantic models, dataclasses and other validatable types.

    Usage::

        @dataclass
        class Profile(SelfCoding):
            name: str
            number: int

        Profile("Andrew Benson", 42).encode_file("profile.json")
        profile = Profile.decode_file("profile.json")
    """

    coding_settings: ClassVar[DirJsonSettings | None] = None

    @classmethod
    def _coordinator(cls) -> FileCoordinator:
        return FileCoordinator(cls.coding_settings)

    def encode_to(self, location: Location) -> CodingError | None:
        return self._coordinator().encode(self, location, as_type=type(self))

    def encode_file(
        self,
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
    ) -> CodingError | None:
        return self._coordinator().encode_file(self, filename, directory, as_type=type(self))

    @classmethod
    def decode_from(cls, location: Location) -> Self | None:
        return cls._coordinator().decode_or_none(cls, location)

    @classmethod
    def decode_file(
        cls,
        filename: str,
        directory: Directory | str = Directory.DOCUMENTS,
    ) -> Self | None:
        return cls._coordinator().decode_file_or_none(cls, filename, directory)

"""Events a host launcher delivers to the menu mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, Union


@dataclass(frozen=True)
class Cancel:
    selected: int | None = None


@dataclass(frozen=True)
class Ok:
    selected: int


@dataclass(frozen=True)
class Complete:
    selected: int | None = None


@dataclass(frozen=True)
class CustomInput:
    selected: int | None = None


@dataclass(frozen=True)
class DeleteEntry:
    selected: int


@dataclass(frozen=True)
class CustomCommand:
    number: int
    selected: int | None = None


Event: TypeAlias = Union[Cancel, Ok, Complete, CustomInput, DeleteEntry, CustomCommand]

"""Skill domain entity."""

from dataclasses import dataclass


@dataclass
class Skill:
    """Organization-wide skill catalog entry."""

    id: int
    name: str
    description: str | None = None

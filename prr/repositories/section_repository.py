"""
Section Repository - PRR Platform
prr/repositories/section_repository.py
"""

from typing import List

from prr.models.catalog import Section, SectionCreate
from prr.repositories.base import BaseRepository


class SectionRepository(BaseRepository[Section]):
    """Repository for questionnaire sections."""

    ENTITY_NAME = "Section"

    def create(self, data: SectionCreate) -> Section:
        return self.insert(Section(name=data.name, description=data.description))

    def list_all(self) -> List[Section]:
        return sorted(self.all(), key=lambda s: s.name.lower())

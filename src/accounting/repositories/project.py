"""Repository for Project entity (company-scoped)."""

from src.accounting.models import Project
from src.accounting.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

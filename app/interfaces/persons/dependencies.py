"""
Dependency injection for the persons bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the persons context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.persons.create_person import CreatePersonUseCase
from app.application.persons.get_person import GetPersonUseCase
from app.application.persons.get_persons_by_color import GetPersonsByColorUseCase
from app.application.persons.import_persons import ImportPersonsUseCase
from app.application.persons.list_persons import ListPersonsUseCase
from app.core.config import settings
from app.domain.persons.ports import PersonRepository
from app.infrastructure.persons.database import create_db_engine
from app.infrastructure.persons.person_repository import SqlPersonRepositoryAdapter


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_db_engine(settings.database_url, echo=settings.database_echo)


def get_person_repository() -> PersonRepository:
    """Build the person repository adapter."""
    return SqlPersonRepositoryAdapter(engine=get_db_engine())


def get_create_person_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> CreatePersonUseCase:
    """Build CreatePersonUseCase with its infrastructure dependencies."""
    return CreatePersonUseCase(person_repo=person_repo)


def get_person_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> GetPersonUseCase:
    """Build GetPersonUseCase with its infrastructure dependencies."""
    return GetPersonUseCase(person_repo=person_repo)


def get_persons_by_color_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> GetPersonsByColorUseCase:
    """Build GetPersonsByColorUseCase with its infrastructure dependencies."""
    return GetPersonsByColorUseCase(person_repo=person_repo)


def get_list_persons_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> ListPersonsUseCase:
    """Build ListPersonsUseCase with its infrastructure dependencies."""
    return ListPersonsUseCase(person_repo=person_repo, max_limit=settings.max_page_limit)


def get_import_persons_use_case(
    person_repo: PersonRepository = Depends(get_person_repository),
) -> ImportPersonsUseCase:
    """Build ImportPersonsUseCase with its infrastructure dependencies."""
    return ImportPersonsUseCase(
        person_repo=person_repo,
        max_bytes=settings.max_upload_size_bytes,
    )

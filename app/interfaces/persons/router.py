"""
FastAPI router for the persons bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, File, Path, Query, Request, UploadFile, status

from app.application.persons.create_person import CreatePersonUseCase
from app.application.persons.dtos import (
    CreatePersonCommand,
    GetPersonQuery,
    GetPersonsByColorQuery,
    ImportPersonsCommand,
    ImportPersonsResult,
    ListPersonsQuery,
    PersonResult,
)
from app.application.persons.get_person import GetPersonUseCase
from app.application.persons.get_persons_by_color import GetPersonsByColorUseCase
from app.application.persons.import_persons import ImportPersonsUseCase
from app.application.persons.list_persons import MAX_OFFSET, ListPersonsUseCase
from app.core.config import settings
from app.interfaces.persons.dependencies import (
    get_create_person_use_case,
    get_import_persons_use_case,
    get_list_persons_use_case,
    get_person_use_case,
    get_persons_by_color_use_case,
)
from app.interfaces.persons.schemas import (
    ErrorResponse,
    ImportLineItem,
    ImportPersonsResponse,
    PersonCreateRequest,
    PersonResponse,
)
from app.shared.security.rate_limiting import limiter

router = APIRouter(tags=["persons"])


def _to_response(result: PersonResult) -> PersonResponse:
    return PersonResponse(
        id=result.id,
        first_name=result.first_name,
        last_name=result.last_name,
        address=result.address,
        color=result.color,
    )


def _to_import_response(result: ImportPersonsResult) -> ImportPersonsResponse:
    return ImportPersonsResponse(
        imported=result.imported,
        skipped=result.skipped,
        lines=[
            ImportLineItem(
                line_number=line.line_number,
                status=line.status.value,
                reason=line.reason,
                person=_to_response(line.person) if line.person else None,
            )
            for line in result.lines
        ],
    )


@router.get(
    "/persons",
    response_model=list[PersonResponse],
    responses={400: {"model": ErrorResponse}},
    summary="List persons",
    description="Return a page of persons ordered by id.",
)
def list_persons(
    offset: int = Query(0, ge=0, le=MAX_OFFSET, description="Number of persons to skip"),
    limit: int = Query(
        settings.default_page_limit,
        ge=1,
        le=settings.max_page_limit,
        description="Maximum number of persons to return",
    ),
    use_case: ListPersonsUseCase = Depends(get_list_persons_use_case),
) -> list[PersonResponse]:
    """List persons page by page."""
    results = use_case.execute(ListPersonsQuery(offset=offset, limit=limit))
    return [_to_response(r) for r in results]


@router.get(
    "/person/{person_id}",
    response_model=PersonResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get a person",
    description="Return the person with the given id.",
)
def get_person(
    person_id: int = Path(..., description="Person id"),
    use_case: GetPersonUseCase = Depends(get_person_use_case),
) -> PersonResponse:
    """Get a single person by id."""
    result = use_case.execute(GetPersonQuery(person_id=person_id))
    return _to_response(result)


@router.post(
    "/person",
    response_model=PersonResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a person",
    description="Store a new person. Fails with 409 if the same name and address exist.",
)
def create_person(
    request: PersonCreateRequest,
    use_case: CreatePersonUseCase = Depends(get_create_person_use_case),
) -> PersonResponse:
    """Create a person."""
    command = CreatePersonCommand(
        first_name=request.first_name,
        last_name=request.last_name,
        address=request.address,
        color=str(request.color),
    )
    result = use_case.execute(command)
    return _to_response(result)


@router.get(
    "/person/color/{color_name}",
    response_model=list[PersonResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Get persons by color",
    description="Return every person whose favourite color matches.",
)
def get_persons_by_color(
    color_name: str = Path(..., description="Color label, English alias or code"),
    use_case: GetPersonsByColorUseCase = Depends(get_persons_by_color_use_case),
) -> list[PersonResponse]:
    """Get persons by favourite color."""
    results = use_case.execute(GetPersonsByColorQuery(color=color_name))
    return [_to_response(r) for r in results]


@router.post(
    "/import",
    response_model=ImportPersonsResponse,
    responses={400: {"model": ErrorResponse}, 429: {"model": ErrorResponse}},
    summary="Import persons from CSV",
    description=(
        "Bulk import a CSV file with columns firstName,lastName,address,color. "
        "Invalid or duplicate lines are skipped and reported per line."
    ),
)
@limiter.limit(settings.rate_limit_heavy)
def import_persons(
    request: Request,
    file: UploadFile = File(..., description="CSV file"),
    use_case: ImportPersonsUseCase = Depends(get_import_persons_use_case),
) -> ImportPersonsResponse:
    """Import persons from an uploaded CSV file."""
    # one byte past the cap so the use case can detect oversized uploads
    content = file.file.read(settings.max_upload_size_bytes + 1)
    result = use_case.execute(
        ImportPersonsCommand(content=content, filename=file.filename)
    )
    return _to_import_response(result)

"""Project investment endpoints - company-scoped list, create and update.

Query strings and bodies are checked by the investment validation
contracts; a failed contract answers 400 with every offending field.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Request, status

from src.accounting.api.dependencies import DBSession, ProjectsReader, ProjectsWriter
from src.accounting.schemas.investment import (
    InvestmentListResponse,
    InvestmentResponse,
    InvestmentTotals,
    ProjectInvestmentRead,
    ProjectRef,
    validate_investment_create,
    validate_investment_filters,
    validate_investment_update,
)
from src.accounting.services.investment_service import (
    InvestmentNotFoundError,
    InvestmentService,
    ProjectNotFoundError,
)

router = APIRouter(prefix="/projects", tags=["investments"])

_PROJECT_KEYS = ("projectId", "project_id")


def _with_path_project(payload: Any, project_id: str) -> Any:
    """The project in the URL wins over one in the payload."""
    if not isinstance(payload, dict):
        return payload
    merged = {key: value for key, value in payload.items() if key not in _PROJECT_KEYS}
    merged["projectId"] = project_id
    return merged


@router.get(
    "/{project_id}/investments",
    response_model=InvestmentListResponse,
    summary="List investments",
    description="List a project's investments, newest first, with totals for the filtered set.",
    responses={
        200: {"description": "Page of investments"},
        400: {"description": "Invalid filters"},
        404: {"description": "Project not found"},
    },
)
async def list_investments(
    project_id: str,
    request: Request,
    session: DBSession,
    auth: ProjectsReader,
) -> InvestmentListResponse:
    filters = validate_investment_filters(
        _with_path_project(dict(request.query_params), project_id)
    ).unwrap()

    try:
        result = await InvestmentService(session, auth).list_investments(project_id, filters)
    except ProjectNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        ) from e

    return InvestmentListResponse(
        project=ProjectRef.model_validate(result.project),
        data=[ProjectInvestmentRead.model_validate(item) for item in result.items],
        pagination=result.pagination,
        totals=InvestmentTotals(total=result.total_amount),
    )


@router.post(
    "/{project_id}/investments",
    response_model=InvestmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create investment",
    responses={
        201: {"description": "Investment created"},
        400: {"description": "Invalid body, or project not found in your company"},
    },
)
async def create_investment(
    project_id: str,
    body: Annotated[Any, Body()],
    session: DBSession,
    auth: ProjectsWriter,
) -> InvestmentResponse:
    data = validate_investment_create(_with_path_project(body, project_id)).unwrap()

    try:
        investment = await InvestmentService(session, auth).create_investment(data)
    except ProjectNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Project not found or does not belong to your company",
        ) from e

    return InvestmentResponse(data=ProjectInvestmentRead.model_validate(investment))


@router.patch(
    "/{project_id}/investments/{investment_id}",
    response_model=InvestmentResponse,
    summary="Update investment",
    description="Partially update an investment; only supplied fields change.",
    responses={
        200: {"description": "Investment updated"},
        400: {"description": "Invalid body, or target project not in your company"},
        404: {"description": "Investment not found"},
    },
)
async def update_investment(
    project_id: str,
    investment_id: str,
    body: Annotated[Any, Body()],
    session: DBSession,
    auth: ProjectsWriter,
) -> InvestmentResponse:
    data = validate_investment_update(body).unwrap()

    try:
        investment = await InvestmentService(session, auth).update_investment(
            project_id, investment_id, data
        )
    except InvestmentNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Investment not found",
        ) from e
    except ProjectNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Project not found or does not belong to your company",
        ) from e

    return InvestmentResponse(data=ProjectInvestmentRead.model_validate(investment))

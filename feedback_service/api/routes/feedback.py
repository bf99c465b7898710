from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from feedback_service.api.error import ClientError, ServerError
from feedback_service.api.utils.role_auth import require_role
from feedback_service.app.services.unit_of_work import UnitOfWork
from feedback_service.app.use_cases.feedback import (
    ActiveTemplate,
    CreateTemplateCommand,
    CreateTemplateResponse,
    CreateTemplateUseCase,
    DeleteTemplateResponse,
    DeleteTemplateUseCase,
    FeedbackResponseDetail,
    FeedbackResponseInfo,
    ListActiveTemplatesUseCase,
    ListMyResponsesUseCase,
    ListResponsesUseCase,
    ListTemplatesUseCase,
    SubmitFeedbackCommand,
    SubmitFeedbackResponse,
    SubmitFeedbackUseCase,
    TemplateSummary,
)
from feedback_service.depends import AuthenticatedUser, get_current_user, get_unit_of_work
from feedback_service.domain.entities import UserRole

router = APIRouter(prefix="/feedback", tags=["Feedback"])


class CreateTemplateRequest(BaseModel):
    title: Optional[str] = Field(None, max_length=255)
    question: Optional[str] = None
    questions: Optional[List[str]] = None


@router.post(
    "/templates", status_code=status.HTTP_201_CREATED, response_model=CreateTemplateResponse
)
async def create_template(
    request: CreateTemplateRequest,
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Feedback Template (ADMIN only)

    Raises:
        - 400 Bad Request: Title or question(s) missing
    """
    command = CreateTemplateCommand(
        title=request.title, question=request.question, questions=request.questions
    )
    result = await CreateTemplateUseCase(uow).execute(command)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TEMPLATE":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("/templates", status_code=status.HTTP_200_OK, response_model=List[TemplateSummary])
async def list_templates(
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListTemplatesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.delete(
    "/templates/{template_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteTemplateResponse,
)
async def delete_template(
    template_id: UUID,
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Feedback Template (ADMIN only)

    Raises:
        - 404 Not Found: No such template
    """
    result = await DeleteTemplateUseCase(uow).execute(template_id)

    if result.is_err():
        error = result.error
        if error.code == "TEMPLATE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/responses", status_code=status.HTTP_200_OK, response_model=List[FeedbackResponseDetail]
)
async def list_responses(
    current_user: AuthenticatedUser = Depends(require_role(UserRole.ADMIN)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListResponsesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


@router.get("/active", status_code=status.HTTP_200_OK, response_model=List[ActiveTemplate])
async def list_active_templates(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListActiveTemplatesUseCase(uow).execute()
    if result.is_err():
        raise ServerError(result.error)
    return result.value


class SubmitFeedbackRequest(BaseModel):
    template_id: Optional[str] = None
    answer: Optional[str] = None
    answers: Optional[List[Optional[str]]] = None
    rating: Optional[int] = Field(None, ge=1, le=5)


@router.post(
    "/submit", status_code=status.HTTP_201_CREATED, response_model=SubmitFeedbackResponse
)
async def submit_feedback(
    request: SubmitFeedbackRequest,
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Feedback

    Raises:
        - 400 Bad Request: Template ID or answer missing, or template inactive
        - 404 Not Found: No such template
    """
    command = SubmitFeedbackCommand(
        template_id=request.template_id,
        answer=request.answer,
        answers=request.answers,
        rating=request.rating,
    )
    result = await SubmitFeedbackUseCase(uow).execute(current_user.id, command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_RESPONSE", "TEMPLATE_INACTIVE"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TEMPLATE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/my-responses", status_code=status.HTTP_200_OK, response_model=List[FeedbackResponseInfo]
)
async def list_my_responses(
    current_user: AuthenticatedUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListMyResponsesUseCase(uow).execute(current_user.id)
    if result.is_err():
        raise ServerError(result.error)
    return result.value

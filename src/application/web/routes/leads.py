"""
Прием заявок с форм сайта.
"""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ....domain.entities.lead import LeadSubmission
from ....domain.services.lead_submission import LeadSubmissionService
from ..dependencies import get_lead_service

router = APIRouter(prefix="/api/leads", tags=["leads"])


class LeadRequest(BaseModel):
    """
    Заявка с формы сайта.
    Длина и формат полей не ограничиваются, обязательность имени и телефона проверяет сервис.
    """
    name: Optional[str] = Field(None, description="Имя клиента")
    phone: Optional[str] = Field(None, description="Телефон в свободном формате")
    work_type: Optional[str] = Field(None, alias="workType")
    comment: Optional[str] = None
    source_url: Optional[str] = Field(None, alias="sourceUrl")
    form_name: Optional[str] = Field(None, alias="formName")
    service_name: Optional[str] = Field(None, alias="serviceName")

    class Config:
        populate_by_name = True

    def to_entity(self) -> LeadSubmission:
        return LeadSubmission(
            name=self.name or "",
            phone=self.phone or "",
            work_type=self.work_type,
            comment=self.comment,
            source_url=self.source_url,
            form_name=self.form_name,
            service_name=self.service_name,
        )


@router.post("")
async def submit_lead(
    lead_request: LeadRequest,
    lead_service: LeadSubmissionService = Depends(get_lead_service)
):
    """
    Отправка заявки в Telegram.
    Ответ всегда HTTP 200: {success} или {success: false, error, code}.
    """
    result = await lead_service.submit(lead_request.to_entity())
    return result.to_dict()

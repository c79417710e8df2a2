"""
MedFlow — Knowledge Routes

Endpoints для довідкових даних і прямого матчингу:
- Довідник спеціалістів
- Швидкий вибір симптомів
- Діагностика за списком симптомів (без воркфлоу)
"""

import time
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from medflow.knowledge import (
    COMMON_SYMPTOMS,
    MedicalAIService,
    get_specialist_info,
    list_specialists,
)
from medflow.schemas import SpecialistInfo

from ..dependencies import get_service
from ..models import DiagnoseRequest, DiagnoseResponse, SpecialistListResponse

router = APIRouter(tags=["Knowledge"])


@router.get("/specialists", response_model=SpecialistListResponse)
async def specialists() -> SpecialistListResponse:
    """Всі спеціалісти в порядку довідника"""
    items = list_specialists()
    return SpecialistListResponse(specialists=items, total=len(items))


@router.get("/specialists/{specialist_type}", response_model=SpecialistInfo)
async def specialist_detail(specialist_type: str) -> SpecialistInfo:
    try:
        return get_specialist_info(specialist_type)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Specialist '{specialist_type}' not found"
        )


@router.get("/symptoms/common", response_model=List[str])
async def common_symptoms() -> List[str]:
    """Симптоми для кнопок швидкого вибору"""
    return list(COMMON_SYMPTOMS)


@router.post("/diagnose", response_model=DiagnoseResponse)
async def diagnose(
    request: DiagnoseRequest,
    service: MedicalAIService = Depends(get_service)
) -> DiagnoseResponse:
    """
    Матчинг без проходу майстра.

    Приклад:
    ```json
    {"symptoms": ["headache", "fever"]}
    ```

    Невідомі симптоми ігноруються; порожній список дає порожній результат.
    """
    start_time = time.time()

    result = service.matcher.match(request.symptoms)

    return DiagnoseResponse(
        symptoms=request.symptoms,
        result=result,
        processing_time_ms=(time.time() - start_time) * 1000
    )

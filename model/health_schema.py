from datetime import datetime
from typing import List, Optional

from model.base_schema import CamelModel


class HealthDocumentOut(CamelModel):
    id: int
    filename: str
    path: str
    upload_date: Optional[datetime] = None
    description: Optional[str] = None


class HealthConditionOut(CamelModel):
    id: int
    user_id: Optional[int] = None
    diabetes: bool
    hypertension: bool
    asthma: bool
    heart_disease: bool
    arthritis: bool
    chronic_kidney_disease: bool
    thyroid_disorders: bool
    documents: List[HealthDocumentOut] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class HealthConditionRequest(CamelModel):
    diabetes: Optional[bool] = None
    hypertension: Optional[bool] = None
    asthma: Optional[bool] = None
    heart_disease: Optional[bool] = None
    arthritis: Optional[bool] = None
    chronic_kidney_disease: Optional[bool] = None
    thyroid_disorders: Optional[bool] = None

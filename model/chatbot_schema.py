from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from model.base_schema import CamelModel


class ChatMessage(CamelModel):
    role: Literal["system", "user", "assistant"]
    content: str


class ChatRequest(CamelModel):
    message: str = Field(min_length=1)
    conversation_id: Optional[str] = None


class ConversationOut(CamelModel):
    id: str
    user_id: Optional[int] = None
    messages: List[ChatMessage] = []
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

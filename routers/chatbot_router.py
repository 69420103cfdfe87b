from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from Controller import chatbot_controller
from core.auth_utils import get_current_user
from database import get_db
from model.chatbot_schema import ChatRequest
from model.user_model import Users

router = APIRouter(prefix="/api/chatbot", tags=["Chatbot"])


@router.post("")
async def chat(request: ChatRequest, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return await chatbot_controller.chat(db, user, request)


@router.get("/conversations")
def list_conversations(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return chatbot_controller.list_conversations(db, user)


@router.get("/conversations/{conversation_id}")
def get_conversation(conversation_id: str, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return chatbot_controller.get_conversation(db, user, conversation_id)


@router.delete("/conversations/{conversation_id}")
def delete_conversation(conversation_id: str, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return chatbot_controller.delete_conversation(db, user, conversation_id)

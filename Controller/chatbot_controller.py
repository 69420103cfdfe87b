import logging
import uuid

import httpx
from fastapi import HTTPException
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from core import config
from model.chatbot_schema import ChatRequest, ConversationOut
from model.conversation_model import Conversation
from model.user_model import Users

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a medical assistant for patients. Provide accurate, educational health information. "
    "Do not diagnose, but help patients understand medical concepts, healthy habits, and when they "
    "should consult a healthcare professional. Always clarify you are an AI assistant and not a doctor."
)
HISTORY_LIMIT = 20
MAX_TOKENS = 800
TEMPERATURE = 0.7


async def request_completion(messages: list) -> str:
    """POST the chat to the completions API and return the assistant text."""
    async with httpx.AsyncClient(timeout=config.CHATBOT_TIMEOUT) as client:
        response = await client.post(
            config.CHATBOT_API_URL,
            json={
                "model": config.CHATBOT_MODEL,
                "messages": messages,
                "max_tokens": MAX_TOKENS,
                "temperature": TEMPERATURE,
            },
            headers={"Authorization": f"Bearer {config.OPENROUTER_API_KEY}"},
        )
        response.raise_for_status()
        return response.json()["choices"][0]["message"]["content"]


def _own_conversation(db: Session, user: Users, conversation_id: str):
    if not conversation_id:
        return None
    return (
        db.query(Conversation)
        .filter(
            Conversation.id == conversation_id,
            Conversation.user_id == user.id,
            Conversation.is_active.is_(True),
        )
        .first()
    )


def build_messages(user: Users, history: list, message: str) -> list:
    system = f"{SYSTEM_PROMPT} The user's name is {user.name} and their role is {user.role}."
    return [{"role": "system", "content": system}, *history[-HISTORY_LIMIT:], {"role": "user", "content": message}]


def _load_history(db: Session, user: Users, conversation_id):
    conversation = _own_conversation(db, user, conversation_id)
    return conversation, list(conversation.messages) if conversation else []


def _save_turn(db: Session, user: Users, conversation, history: list, message: str, reply: str) -> str:
    if conversation is None:
        conversation = Conversation(id=uuid.uuid4().hex, user_id=user.id, messages=[])
        db.add(conversation)
    # reassign so the JSON column is flagged dirty
    conversation.messages = history + [
        {"role": "user", "content": message},
        {"role": "assistant", "content": reply},
    ]
    db.commit()
    return conversation.id


async def chat(db: Session, user: Users, request: ChatRequest):
    message = request.message.strip()
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    # the session is synchronous, keep it off the event loop
    conversation, history = await run_in_threadpool(_load_history, db, user, request.conversation_id)

    try:
        reply = await request_completion(build_messages(user, history, message))
    except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError) as e:
        logger.error("Chatbot error for user %s: %s", user.id, e)
        raise HTTPException(status_code=500, detail="Error communicating with the chatbot service")

    conversation_id = await run_in_threadpool(_save_turn, db, user, conversation, history, message, reply)
    return {"success": True, "data": {"message": reply, "conversationId": conversation_id}}


def list_conversations(db: Session, user: Users):
    conversations = (
        db.query(Conversation)
        .filter(Conversation.user_id == user.id, Conversation.is_active.is_(True))
        .order_by(Conversation.updated_at.desc())
        .all()
    )
    return {"success": True, "conversations": [ConversationOut.serialize(c) for c in conversations]}


def get_conversation(db: Session, user: Users, conversation_id: str):
    conversation = _own_conversation(db, user, conversation_id)
    if not conversation:
        raise HTTPException(status_code=404, detail="Conversation not found")
    return {"success": True, "conversation": ConversationOut.serialize(conversation)}


def delete_conversation(db: Session, user: Users, conversation_id: str):
    conversation = _own_conversation(db, user, conversation_id)
    if not conversation:
        raise HTTPException(status_code=404, detail="Conversation not found")
    conversation.is_active = False
    db.commit()
    return {"success": True, "message": "Conversation deleted successfully"}

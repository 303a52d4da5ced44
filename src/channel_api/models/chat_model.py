from datetime import datetime, timezone

from pydantic import BaseModel


class ChatRequest(BaseModel):
    email: str | None = None
    question: str | None = None


def chat_record(user_email: str, question: str, answer: str, created_at: datetime | None = None) -> dict:
    return {
        "userEmail": user_email,
        "question": question,
        "answer": answer,
        "createdAt": created_at or datetime.now(timezone.utc),
    }

from pydantic import BaseModel


class QuoteResponse(BaseModel):
    """Модель ответа с цитатой."""

    content: str
    author: str


# Последнее звено цепочки: отдаётся, если оба провайдера недоступны
DEFAULT_QUOTE = QuoteResponse(
    content="The only way to do great work is to love what you do.",
    author="Steve Jobs",
)

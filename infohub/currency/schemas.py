from pydantic import BaseModel, ConfigDict, Field


class ConversionResponse(BaseModel):
    """Результат конвертации: converted = amount * rate."""

    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="from", min_length=3, max_length=3)
    to_currency: str = Field(..., alias="to", min_length=3, max_length=3)
    rate: float = Field(..., gt=0)
    amount: float = Field(..., ge=0)
    converted: float

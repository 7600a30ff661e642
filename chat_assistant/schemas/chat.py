from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Empty strings are forwarded to the backend unchanged.
    message: str = Field(..., description="User message for the assistant.")


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Text generated by the active backend.")


class ErrorResponse(BaseModel):
    """
    Body returned with HTTP 500 for every chat failure.

    There is no structured error code; the message text is the only signal.
    """

    error: str = Field(..., description="Human-readable diagnostic.")

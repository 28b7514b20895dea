"""Health check schemas."""

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str
    environment: str
    products: int = 0
    categories: int = 0
    orders: int = 0
    sections: int = 0

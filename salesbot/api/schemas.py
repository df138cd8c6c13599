"""
Request models for the HTTP API.
Fields are optional so missing values reach the facade validation.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Request(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True, populate_by_name=True)


class RecommendRequest(_Request):
    query: Optional[str] = None


class LeadRequest(_Request):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None


class CartAddRequest(_Request):
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    product_id: Optional[str] = Field(default=None, alias="productId")
    qty: Any = None


class CheckoutRequest(_Request):
    items: Optional[list[dict[str, Any]]] = None
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    success_url: Optional[str] = Field(default=None, alias="successUrl")
    cancel_url: Optional[str] = Field(default=None, alias="cancelUrl")


class ChatRequest(_Request):
    session_id: Optional[str] = Field(default=None, alias="sessionId")
    text: Optional[str] = None

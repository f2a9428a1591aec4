"""Request and response bodies for the HTTP API.

Request models forbid unknown fields so malformed bodies are rejected before
they reach a service.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from src.shop.core.models.cart import CartAction, CartItemView
from src.shop.entities._base import STORE_INT_MAX, STORE_INT_MIN
from src.shop.entities.account import Account, AccountRole
from src.shop.entities.product import Product


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


# accounts


class RegisterRequest(RequestModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=1)


class LoginRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AccountPublic(BaseModel):
    id: str
    name: str
    email: str
    role: AccountRole

    @classmethod
    def from_account(cls, account: Account) -> "AccountPublic":
        return cls(id=account.id, name=account.name, email=account.email, role=account.role)


class AccountCreatedResponse(BaseModel):
    message: str
    user: AccountPublic


class LoginResponse(BaseModel):
    message: str
    user: AccountPublic


# catalog


class ProductCreateRequest(RequestModel):
    name: str = Field(min_length=1)
    description: str | None = None
    price: float = Field(ge=0)
    image: str | None = None
    stock: int = Field(default=0, ge=0, le=STORE_INT_MAX, strict=True)
    category: str | None = None


class ProductUpdateRequest(RequestModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    price: float | None = Field(default=None, ge=0)
    image: str | None = None
    stock: int | None = Field(default=None, ge=0, le=STORE_INT_MAX, strict=True)
    category: str | None = None


class StockUpdateRequest(RequestModel):
    stock: int = Field(ge=STORE_INT_MIN, le=STORE_INT_MAX, strict=True)


class ProductResponse(CamelModel):
    id: str
    name: str
    description: str | None = None
    price: float
    image: str | None = None
    stock: int
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls.model_validate(product.model_dump())


class ProductDeletedResponse(CamelModel):
    message: str
    removed_cart_lines: int


# cart


class CartDeltaRequest(CamelModel):
    user_id: str
    product_id: str
    quantity_change: int = Field(ge=STORE_INT_MIN, le=STORE_INT_MAX, strict=True)


class CartMutationResponse(CamelModel):
    message: str
    action: CartAction
    user_id: str
    product_id: str
    quantity: int
    removed_quantity: int | None = None


class CartResponse(CamelModel):
    user_id: str
    items: list[CartItemView]
    total_items: int
    total_price: float


class CartClearedResponse(CamelModel):
    message: str
    removed_count: int


class CartLineRemovedResponse(CamelModel):
    message: str
    removed_quantity: int

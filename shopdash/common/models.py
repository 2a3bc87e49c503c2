"""
Pydantic models for remote resources and request validation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Rating(BaseModel):
    rate: float = 0.0
    count: int = 0


class ProductInput(BaseModel):
    title: str
    price: float = Field(ge=0)
    description: str = ""
    image: str = ""
    category: str = ""


class Product(ProductInput):
    id: int
    rating: Rating | None = None


class UserName(BaseModel):
    firstname: str = ""
    lastname: str = ""


class Geolocation(BaseModel):
    lat: str = ""
    long: str = ""


class Address(BaseModel):
    city: str = ""
    street: str = ""
    number: int | None = None
    zipcode: str = ""
    geolocation: Geolocation | None = None


class User(BaseModel):
    """Profile fields only; credentials sent by the API are dropped."""

    model_config = ConfigDict(extra="ignore")

    id: int
    email: str = ""
    username: str = ""
    name: UserName | None = None
    phone: str | None = None
    address: Address | None = None

    @property
    def display_name(self) -> str:
        if self.name and (self.name.firstname or self.name.lastname):
            return f"{self.name.firstname} {self.name.lastname}".strip()
        return self.username


class Principal(BaseModel):
    name: str


class LoginRequest(BaseModel):
    username: str = ""
    password: str = ""


class CatalogItem(BaseModel):
    """Static catalog entry shown without contacting the remote API."""

    name: str
    price: float = Field(ge=0)
    image_url: str
    description: str
    in_stock: bool
    quantity: int = Field(ge=0)
    product_color: str
    discount: int = Field(default=0, ge=0, le=100)

    @property
    def discounted_price(self) -> float:
        return round(self.price * (100 - self.discount) / 100, 2)


class ClientConfig(BaseModel):
    api_url: str | None = None
    products_resource: str | None = None
    users_resource: str | None = None
    log_level: int | None = None
    login_path: str | None = None

# storefront/domain/schemas.py
from datetime import datetime
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, EmailStr, Field

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wspolna koperta odpowiedzi: {success, message, data}."""

    success: bool = True
    message: str = ""
    data: Optional[T] = None


# =====================================================
# AUTH
# =====================================================
class RegisterIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str


class AdminRegisterIn(RegisterIn):
    role: Optional[str] = None


class LoginIn(BaseModel):
    email: EmailStr
    password: str


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    is_admin: bool

    model_config = ConfigDict(from_attributes=True)


class AdminOut(BaseModel):
    id: str
    name: str
    email: str
    role: str

    model_config = ConfigDict(from_attributes=True)


class UserAuthOut(BaseModel):
    user: UserOut
    token: str


class AdminAuthOut(BaseModel):
    admin: AdminOut
    token: str


# =====================================================
# PRODUCTS
# =====================================================
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    image: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    stock: int = Field(0, ge=0)


class ProductUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)


class ProductOut(BaseModel):
    id: str
    name: str
    description: str
    price: float
    image: str
    category: str
    brand: str
    stock: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LabelOut(BaseModel):
    name: str
    label: str


class CatalogOut(BaseModel):
    brands: List[LabelOut]
    categories: List[LabelOut]


class CategoryIn(BaseModel):
    category: str
    label: Optional[str] = None


class BrandIn(BaseModel):
    brand: str
    label: Optional[str] = None


# =====================================================
# CART
# =====================================================
class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: str = Field(..., alias="productId", min_length=1)
    quantity: int = Field(..., gt=0, strict=True, description="Ilosc (musi byc > 0)")

    model_config = ConfigDict(populate_by_name=True)


class CartLineOut(BaseModel):
    product: ProductOut
    quantity: int
    subtotal: float


class CartOut(BaseModel):
    items: List[CartLineOut]
    total: float


# =====================================================
# ORDERS
# =====================================================
class OrderCreate(BaseModel):
    payment_method: Literal["paystack", "whatsapp"] = Field("whatsapp", alias="paymentMethod")

    model_config = ConfigDict(populate_by_name=True)


class OrderUserOut(BaseModel):
    id: str
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class OrderItemOut(BaseModel):
    product_id: str
    name: str
    unit_price: float
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: str
    user_id: str
    user: Optional[OrderUserOut] = None
    status: str
    payment_method: str
    total_price: float
    items: List[OrderItemOut]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderPage(BaseModel):
    items: List[OrderOut]
    page: int
    limit: int
    total: int
    pages: int


class OrderStatusIn(BaseModel):
    status: str = Field(..., min_length=1)


# =====================================================
# CARS
# =====================================================
class CarCreate(BaseModel):
    name: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    description: str = ""
    images: List[str] = []
    contact_type: Literal["whatsapp", "instagram"] = Field("whatsapp", alias="contactType")
    contact_link: str = Field(..., alias="contactLink", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class CarUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1)
    brand: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    images: Optional[List[str]] = None
    contact_type: Optional[Literal["whatsapp", "instagram"]] = Field(None, alias="contactType")
    contact_link: Optional[str] = Field(None, alias="contactLink", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class CarOut(BaseModel):
    id: str
    name: str
    brand: str
    price: float
    description: str
    images: List[str]
    contact_type: str
    contact_link: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

"""Pydantic DTOs for the PaymentMethod feature."""

from pydantic import Field

from event_platform.domain.entities import PaymentMethodType

from .common import CamelModel, EntityResponse

PAYMENT_METHOD_SORT_FIELDS = frozenset({
    "createdAt",
    "updatedAt",
    "name",
    "displayOrder",
    "type",
})
PAYMENT_METHOD_DEFAULT_LIMIT = 20


class BankAccountSchema(CamelModel):
    bank_name: str = Field(..., min_length=2, max_length=100)
    account_number: str = Field(..., min_length=4, max_length=40)
    account_type: str = Field(..., min_length=2, max_length=40)
    account_holder: str | None = Field(None, max_length=150)
    identification_number: str | None = Field(None, max_length=30)
    interbank_code: str | None = Field(None, max_length=40)


class PaymentSettingsSchema(CamelModel):
    requires_verification: bool = True
    auto_confirm: bool = False
    verification_timeout_hours: int = Field(24, ge=1, le=720)
    allow_voucher: bool = True
    allowed_voucher_types: list[str] = Field(
        default_factory=lambda: ["image/jpeg", "image/png", "application/pdf"]
    )
    max_voucher_size: int = Field(5 * 1024 * 1024, ge=1)


class PaymentMethodCreate(CamelModel):
    """Schema for creating a payment method. No ``companyId`` means a global method."""

    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    type: PaymentMethodType
    company_id: str | None = None
    bank_account: BankAccountSchema | None = None
    settings: PaymentSettingsSchema = Field(default_factory=PaymentSettingsSchema)
    instructions: str | None = Field(None, max_length=2000)
    is_active: bool = True
    display_order: int = Field(0, ge=0)


class PaymentMethodUpdate(CamelModel):
    """Schema for updating a payment method — all fields optional."""

    name: str | None = Field(None, min_length=2, max_length=100)
    description: str | None = Field(None, min_length=1, max_length=500)
    type: PaymentMethodType | None = None
    company_id: str | None = None
    bank_account: BankAccountSchema | None = None
    settings: PaymentSettingsSchema | None = None
    instructions: str | None = Field(None, max_length=2000)
    is_active: bool | None = None
    display_order: int | None = Field(None, ge=0)


class PaymentMethodResponse(EntityResponse):
    name: str
    description: str
    type: PaymentMethodType
    company_id: str | None = None
    bank_account: BankAccountSchema | None = None
    settings: PaymentSettingsSchema
    logo: str | None = None
    instructions: str | None = None
    is_active: bool
    display_order: int
    created_by: str | None = None
    updated_by: str | None = None

"""Domain entity: a way of paying for an order, global or company-specific."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .lifecycle import LifecycleEntity


class PaymentMethodType(str, Enum):
    BANK_TRANSFER = "bank_transfer"
    CULQI = "culqi"
    YAPE = "yape"
    PLIN = "plin"
    CASH = "cash"
    DEPOSIT = "deposit"


def default_payment_settings() -> dict[str, Any]:
    return {
        "requires_verification": True,
        "auto_confirm": False,
        "verification_timeout_hours": 24,
        "allow_voucher": True,
        "allowed_voucher_types": ["image/jpeg", "image/png", "application/pdf"],
        "max_voucher_size": 5 * 1024 * 1024,
    }


@dataclass
class PaymentMethod(LifecycleEntity):
    """A payment method. ``company_id`` None means a global platform method.

    ``is_active`` is an availability switch for checkout, independent of the
    soft-delete lifecycle.
    """

    name: str
    description: str
    type: PaymentMethodType
    company_id: str | None = None
    bank_account: dict[str, Any] | None = None
    settings: dict[str, Any] = field(default_factory=default_payment_settings)
    logo: str | None = None
    instructions: str | None = None
    is_active: bool = True
    display_order: int = 0
    created_by: str | None = None
    updated_by: str | None = None

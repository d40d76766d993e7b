from .lifecycle import LifecycleMixin, live_unique_index
from .person import PersonModel
from .company import CompanyModel
from .user import UserModel
from .speaker import SpeakerModel
from .payment_method import PaymentMethodModel

__all__ = [
    "LifecycleMixin",
    "live_unique_index",
    "PersonModel",
    "CompanyModel",
    "UserModel",
    "SpeakerModel",
    "PaymentMethodModel",
]

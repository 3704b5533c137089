from .checkout_rules import CheckoutRuleEngine
from .movement_service import MovementService
from .rental_service import RentalService

__all__ = [
    "CheckoutRuleEngine",
    "MovementService",
    "RentalService",
]

"""
Checkout adjustment rules.

There are two rental categories with different rules:

GARAGE (business customers):
  - checkout at least 4 hours before the planned start -> end moves 4 hours earlier (4-minus rule)
  - checkout at least 2 hours before the planned start -> end moves 2 hours earlier (2-minus rule)
  The business description also mentions 2-plus/4-plus rules for late checkouts;
  those are not wired. Add them to GARAGE_CHECKOUT_RULES in priority order.

PRIVATE (individual customers):
  - early checkout -> end moves earlier by (start.hour - checkout.hour) hours.
    Only the hour-of-day fields are compared, not the elapsed time, so a
    checkout on the previous day or at 09:59 for a 10:30 start behaves
    according to the hour fields alone.

Favorite customers are exempt from every rule above.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from dailyrental.models.rental import Rental
from dailyrental.utils.constants import RentalCategory

FOUR_HOURS = timedelta(hours=4)
TWO_HOURS = timedelta(hours=2)

PRIVATE_RULE = "private-hours"


# ------------------------- predicates -------------------------
def is_early(rental: Rental, checkout_at: datetime) -> bool:
    return checkout_at < rental.start


def is_not_favorite_customer(rental: Rental, checkout_at: datetime) -> bool:
    return not rental.customer.is_favorite


def is_private_rental(rental: Rental) -> bool:
    return rental.category == RentalCategory.PRIVATE


def four_minus_rule_applies(rental: Rental, checkout_at: datetime) -> bool:
    return rental.start - checkout_at >= FOUR_HOURS


def two_minus_rule_applies(rental: Rental, checkout_at: datetime) -> bool:
    return rental.start - checkout_at >= TWO_HOURS


def adjustment_applies(rental: Rental, checkout_at: datetime) -> bool:
    """An end adjustment is only considered for early checkouts of non-favorites."""
    return is_early(rental, checkout_at) and is_not_favorite_customer(rental, checkout_at)


# ------------------------- garage rule list -------------------------
@dataclass(frozen=True)
class GarageRule:
    """A fixed shift of the planned end, used when `applies` matches first."""
    name: str
    applies: Callable[[Rental, datetime], bool]
    shift: timedelta


# Evaluated top to bottom; the first match wins.
GARAGE_CHECKOUT_RULES: tuple[GarageRule, ...] = (
    GarageRule("4-minus", four_minus_rule_applies, -FOUR_HOURS),
    GarageRule("2-minus", two_minus_rule_applies, -TWO_HOURS),
)


@dataclass(frozen=True)
class Adjustment:
    """Outcome of evaluating a checkout: the rule that fired (if any) and the new end."""
    rule: Optional[str]
    end: datetime

    @property
    def applied(self) -> bool:
        return self.rule is not None


# ============================ Engine ============================
class CheckoutRuleEngine:
    """
    Pure decision logic for checkout-time end adjustments.
    `evaluate` never touches the rental; `apply` writes the new end back.
    """

    def __init__(self, garage_rules: Sequence[GarageRule] = GARAGE_CHECKOUT_RULES):
        self.garage_rules = tuple(garage_rules)

    def evaluate(self, rental: Rental, checkout_at: datetime) -> Adjustment:
        if not adjustment_applies(rental, checkout_at):
            return Adjustment(rule=None, end=rental.end)

        if is_private_rental(rental):
            hour_delta = rental.start.hour - checkout_at.hour
            if hour_delta == 0:
                return Adjustment(rule=None, end=rental.end)
            return Adjustment(rule=PRIVATE_RULE, end=rental.end - timedelta(hours=hour_delta))

        for rule in self.garage_rules:
            if rule.applies(rental, checkout_at):
                return Adjustment(rule=rule.name, end=rental.end + rule.shift)
        return Adjustment(rule=None, end=rental.end)

    def new_end(self, rental: Rental, checkout_at: datetime) -> datetime:
        """Return the (possibly unchanged) planned end for this checkout."""
        return self.evaluate(rental, checkout_at).end

    def apply(self, rental: Rental, checkout_at: datetime) -> Adjustment:
        adjustment = self.evaluate(rental, checkout_at)
        rental.end = adjustment.end
        return adjustment

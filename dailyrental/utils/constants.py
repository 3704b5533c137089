# dailyrental/utils/constants.py

"""
Global constants for rental categories and movement states.
These constants are imported by both models and services.
"""


class RentalCategory:
    GARAGE = "garage"
    PRIVATE = "private"


class MovementState:
    CHECKED_OUT = "checked_out"
    CHECKED_IN = "checked_in"


ALLOWED_CATEGORIES = {RentalCategory.GARAGE, RentalCategory.PRIVATE}

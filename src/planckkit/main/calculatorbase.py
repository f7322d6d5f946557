from abc import ABC, abstractmethod
import math
from astropy import units as u
from planckkit.defines.constants import CONSTANTS, PhysicalConstants
from planckkit.defines.settings import NumericSettings
from planckkit.utils.blackbody import DEFAULT_NUMERIC_SETTINGS

MICROMETER = (1.0 * u.um).to(u.m).value

class CalculatorBase(ABC):
    """
    An abstract base class for the adapters that sit between user input and
    the numerical core.

    The core functions never raise; they turn bad numbers into zeros. The
    adapters are where user-entered values are checked, so that a front end can
    show a message instead of a silently zero result.
    """
    def __init__(self, constants: PhysicalConstants = CONSTANTS, settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS):
        self.constants = constants
        self.settings = settings

    @staticmethod
    def parse_positive(value, name: str) -> float:
        """
        Converts a user-entered value (string or number) to a finite, positive float.

        Raises:
            ValueError: If the value is not a number, not finite or not positive.
        """
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be a number, got {value!r}") from None
        if not math.isfinite(number):
            raise ValueError(f"{name} must be finite, got {value!r}")
        if number <= 0:
            raise ValueError(f"{name} must be positive, got {value!r}")
        return number

    @abstractmethod
    def calculate(self, *args, **kwargs):
        """
        Validates the input and forwards it to the numerical core.
        """
        pass

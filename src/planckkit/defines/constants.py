from dataclasses import dataclass
from scipy.constants import h, c, k, sigma, physical_constants

@dataclass(frozen=True)
class PhysicalConstants():
    """
    The fixed set of CODATA constants used by the blackbody calculations.
    All values are in SI units.
    """
    planck: float = h
    speed_of_light: float = c
    boltzmann: float = k
    wien_displacement: float = physical_constants['Wien wavelength displacement law constant'][0]
    stefan_boltzmann: float = sigma

    @property
    def first_radiation(self) -> float:
        """2hc^2, the numerator of Planck's law per unit wavelength and steradian."""
        return 2.0 * self.planck * self.speed_of_light**2

    @property
    def second_radiation(self) -> float:
        """hc/k, in metre kelvin."""
        return self.planck * self.speed_of_light / self.boltzmann

CONSTANTS = PhysicalConstants()

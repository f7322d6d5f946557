from dataclasses import dataclass
from astropy import units as u

@dataclass(frozen=True)
class NumericSettings():
    """
    Tunable guards for the Planck evaluation.

    overflow_exponent: exponents above this value give zero radiance. exp(700)
    is close to the float64 limit, so the true radiance there is negligible.
    """
    overflow_exponent: float = 700.0

@dataclass(frozen=True)
class PlotSettings():
    """
    Presentation choices for sampled curves and the logarithmic radiance axis.

    decades: dynamic range of the log axis below the global maximum.
    log_epsilon: added inside every log10 to keep zero finite.
    radiance_floor: lower bound of the global maximum, so the log axis is
                    never built on zero.
    wavelength_unit: the wavelength unit radiance is expressed per when
                     displayed (e.g. 'um' gives W/m^2/um/sr).
    """
    decades: int = 5
    log_epsilon: float = 1e-100
    radiance_floor: float = 1e-10
    wavelength_unit: str = 'um'

    @property
    def display_unit(self) -> u.UnitBase:
        return u.W / u.m**2 / u.Unit(self.wavelength_unit) / u.sr

    @property
    def display_scale(self) -> float:
        """Factor taking W/m^3/sr to the display unit."""
        return (1.0 * u.W / u.m**3 / u.sr).to(self.display_unit).value

    @property
    def wavelength_scale(self) -> float:
        """Factor taking metres to the display wavelength unit."""
        return (1.0 * u.m).to(u.Unit(self.wavelength_unit)).value

DEFAULT_PLOT_SETTINGS = PlotSettings()

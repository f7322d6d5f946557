import numpy as np
from planckkit.datatypes.spectral import IntegrationRequest, IntegrationResult
from planckkit.defines.constants import CONSTANTS, PhysicalConstants
from planckkit.defines.settings import NumericSettings
from planckkit.utils.blackbody import DEFAULT_NUMERIC_SETTINGS, spectral_radiance, total_radiance

def integrate_band(temperature_k: float, wavelength_min_m: float, wavelength_max_m: float, step_count: int = 1000,
                   constants: PhysicalConstants = CONSTANTS, settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> float:
    """
    Integrates Planck's Law over a wavelength band with the composite trapezoidal rule.

    The band is split into step_count equal subintervals. Subinterval areas are
    accumulated from the shortest wavelength upwards into a single float, so the
    result is reproducible bit for bit.

    Args:
        temperature_k (float): Temperature of the blackbody in Kelvin.
        wavelength_min_m (float): Lower edge of the band in meters.
        wavelength_max_m (float): Upper edge of the band in meters.
        step_count (int, optional): Number of subintervals.

    Returns:
        float: Band radiance in W/m^2/sr. Zero if the temperature is not
               positive, the band is empty or step_count < 1.
    """
    if not temperature_k > 0 or not wavelength_min_m < wavelength_max_m or step_count < 1:
        return 0.0

    step = (wavelength_max_m - wavelength_min_m) / step_count
    nodes = wavelength_min_m + np.arange(step_count + 1) * step
    radiance = spectral_radiance(nodes, temperature_k, constants=constants, settings=settings).tolist()

    # np.sum uses pairwise summation; a plain loop keeps the order ascending.
    band_radiance = 0.0
    for left, right in zip(radiance[:-1], radiance[1:]):
        band_radiance += (left + right) / 2.0 * step
    return band_radiance

def emittance(band_radiance: float) -> float:
    """Hemispherical emittance (W/m^2) of a Lambertian emitter with the given radiance."""
    return band_radiance * np.pi

def integrate(request: IntegrationRequest, constants: PhysicalConstants = CONSTANTS,
              settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> IntegrationResult:
    band_radiance = integrate_band(
        temperature_k=request.temperature,
        wavelength_min_m=request.wavelength_min,
        wavelength_max_m=request.wavelength_max,
        step_count=request.step_count,
        constants=constants,
        settings=settings
    )
    return IntegrationResult(band_radiance=band_radiance)

def band_fraction(temperature_k: float, wavelength_min_m: float, wavelength_max_m: float, step_count: int = 1000,
                  constants: PhysicalConstants = CONSTANTS, settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> float:
    """
    Fraction of the total blackbody radiance (sigma*T^4/pi) that falls inside the band.
    """
    total = total_radiance(temperature_k, constants=constants)
    if total == 0:
        return 0.0
    band = integrate_band(temperature_k, wavelength_min_m, wavelength_max_m, step_count,
                          constants=constants, settings=settings)
    return band / total

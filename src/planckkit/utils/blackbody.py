import numpy as np
from planckkit.defines.constants import CONSTANTS, PhysicalConstants
from planckkit.defines.settings import NumericSettings

DEFAULT_NUMERIC_SETTINGS = NumericSettings()

def spectral_radiance(wavelength_m, temperature_k, constants: PhysicalConstants = CONSTANTS,
                      settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS):
    """
    Calculates the spectral radiance of a blackbody using Planck's Law.

    Wavelength and temperature broadcast against each other like any numpy
    operands. Points with a non-positive wavelength or temperature, or whose
    exponent would overflow, are given a radiance of exactly zero.

    Args:
        wavelength_m (float or np.ndarray): Wavelength(s) in meters.
        temperature_k (float or np.ndarray): Temperature(s) in Kelvin.

    Returns:
        float or np.ndarray: Spectral radiance in W/m^2/m/sr (W/m^3/sr). A
                             float is returned when both inputs are scalars.
    """
    wavelength, temperature = np.broadcast_arrays(
        np.asarray(wavelength_m, dtype=float),
        np.asarray(temperature_k, dtype=float)
    )
    radiance = np.zeros(wavelength.shape)

    # NaN compares False here, so it lands in the zero branch as well.
    valid = (wavelength > 0) & (temperature > 0)

    with np.errstate(over='ignore', under='ignore', divide='ignore'):
        # The product can underflow to zero, which makes the exponent infinite.
        exponent = np.full(wavelength.shape, np.inf)
        exponent[valid] = constants.second_radiation / (wavelength[valid] * temperature[valid])

        # Beyond the threshold exp(exponent) is out of float64 range.
        mask = valid & (exponent <= settings.overflow_exponent)

        # expm1 keeps precision where the exponent approaches zero
        # (long wavelengths, high temperatures).
        denominator = np.expm1(exponent[mask])
        numerator = constants.first_radiation / wavelength[mask]**5

        nonzero = denominator != 0
        values = np.zeros_like(denominator)
        values[nonzero] = numerator[nonzero] / denominator[nonzero]
    radiance[mask] = values

    if radiance.ndim == 0:
        return float(radiance)
    return radiance

def evaluate_radiance(wavelength_m: float, temperature_k: float, constants: PhysicalConstants = CONSTANTS,
                      settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> float:
    """Planck's Law at a single wavelength (m) and temperature (K), in W/m^3/sr."""
    return float(spectral_radiance(wavelength_m, temperature_k, constants=constants, settings=settings))

def wien_peak_wavelength(temperature_k: float, constants: PhysicalConstants = CONSTANTS) -> float:
    """
    Wavelength of maximum spectral radiance (Wien's displacement law), in meters.
    Returns 0 for non-positive temperatures.
    """
    if not temperature_k > 0:
        return 0.0
    return constants.wien_displacement / temperature_k

def total_radiance(temperature_k: float, constants: PhysicalConstants = CONSTANTS) -> float:
    """
    Radiance integrated over all wavelengths, sigma*T^4/pi, in W/m^2/sr.
    Returns 0 for non-positive temperatures.
    """
    if not temperature_k > 0:
        return 0.0
    return constants.stefan_boltzmann * temperature_k**4 / np.pi

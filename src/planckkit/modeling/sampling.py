import warnings
from typing import Iterable
import numpy as np
from planckkit.datatypes.spectral import Curve, PlotWindow, SampledCurves
from planckkit.defines.constants import CONSTANTS, PhysicalConstants
from planckkit.defines.settings import DEFAULT_PLOT_SETTINGS, NumericSettings, PlotSettings
from planckkit.utils.blackbody import DEFAULT_NUMERIC_SETTINGS, spectral_radiance, wien_peak_wavelength

def sample_curve(temperature_k: float, window: PlotWindow, plot_settings: PlotSettings = DEFAULT_PLOT_SETTINGS,
                 constants: PhysicalConstants = CONSTANTS, settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> Curve:
    """
    Samples Planck's Law for one temperature across the window.

    Radiance is expressed per plot_settings.wavelength_unit of wavelength.
    A non-positive temperature gives a flat zero curve with a peak wavelength of 0.
    """
    wavelengths = window.wavelengths()
    radiances = spectral_radiance(wavelengths, temperature_k, constants=constants, settings=settings)
    radiances = radiances * plot_settings.display_scale

    return Curve(
        temperature=temperature_k,
        wavelengths=wavelengths,
        radiances=radiances,
        peak_wavelength=wien_peak_wavelength(temperature_k, constants=constants),
        max_radiance=float(radiances.max()) if radiances.size else 0.0,
        radiance_unit=plot_settings.display_unit.to_string()
    )

def sample_curves(temperatures_k: Iterable[float], window_min_m: float, window_max_m: float, point_count: int,
                  plot_settings: PlotSettings = DEFAULT_PLOT_SETTINGS, constants: PhysicalConstants = CONSTANTS,
                  settings: NumericSettings = DEFAULT_NUMERIC_SETTINGS) -> SampledCurves:
    """
    Samples one blackbody curve per temperature over a shared wavelength window.

    Args:
        temperatures_k (Iterable[float]): Temperatures in Kelvin. The output keeps their order.
        window_min_m (float): Shortest wavelength of the window in meters.
        window_max_m (float): Longest wavelength of the window in meters.
        point_count (int): Number of steps; each curve gets point_count + 1 samples.
        plot_settings (PlotSettings, optional): Display unit and log-axis floor.

    Returns:
        SampledCurves: The curves and the global maximum radiance, floored at
                       plot_settings.radiance_floor so it can anchor a log axis.
                       Unpacks as (curves, global_max_radiance).
    """
    window = PlotWindow(wavelength_min=window_min_m, wavelength_max=window_max_m, sample_count=point_count)
    if window.is_degenerate:
        warnings.warn(f'Degenerate plot window {window}, returning curves without samples')

    curves = tuple(
        sample_curve(temperature, window, plot_settings=plot_settings, constants=constants, settings=settings)
        for temperature in temperatures_k
    )
    global_max_radiance = max([curve.max_radiance for curve in curves] + [plot_settings.radiance_floor])
    return SampledCurves(window=window, curves=curves, global_max_radiance=global_max_radiance)

def log_position(radiance, global_max_radiance: float, plot_settings: PlotSettings = DEFAULT_PLOT_SETTINGS):
    """
    Maps radiance onto a logarithmic axis, 0 at the floor and 1 at the global maximum.

    The axis spans plot_settings.decades orders of magnitude below the global
    maximum; anything fainter, and any non-positive radiance, sits at 0.

    Returns:
        float or np.ndarray: Positions in [0, 1], a float for scalar input.
    """
    eps = plot_settings.log_epsilon
    values = np.asarray(radiance, dtype=float)

    with np.errstate(invalid='ignore', divide='ignore'):
        floor = np.log10(global_max_radiance * 10.0**-plot_settings.decades + eps)
        ceiling = np.log10(global_max_radiance + eps)
    if not ceiling > floor:
        positions = np.zeros(values.shape)
    else:
        positive = values > 0
        logs = np.log10(np.where(positive, values, 0.0) + eps)
        positions = np.where(positive, np.clip((logs - floor) / (ceiling - floor), 0.0, 1.0), 0.0)

    if positions.ndim == 0:
        return float(positions)
    return positions

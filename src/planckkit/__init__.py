from planckkit.utils.blackbody import evaluate_radiance, spectral_radiance, wien_peak_wavelength, total_radiance
from planckkit.modeling.integration import integrate_band, emittance, integrate, band_fraction
from planckkit.modeling.sampling import sample_curves, log_position

__all__ = [
    'evaluate_radiance',
    'spectral_radiance',
    'wien_peak_wavelength',
    'total_radiance',
    'integrate_band',
    'emittance',
    'integrate',
    'band_fraction',
    'sample_curves',
    'log_position',
]

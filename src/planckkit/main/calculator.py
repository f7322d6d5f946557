from dataclasses import dataclass
import numpy as np
from planckkit.datatypes.spectral import IntegrationRequest, SampledCurves
from planckkit.defines.settings import PlotSettings
from planckkit.main.calculatorbase import CalculatorBase, MICROMETER
from planckkit.modeling.integration import band_fraction, integrate
from planckkit.modeling.sampling import DEFAULT_PLOT_SETTINGS, log_position, sample_curves
from planckkit.utils.blackbody import wien_peak_wavelength

@dataclass(frozen=True)
class BandReport():
    """What a presentation layer shows for one temperature and wavelength band."""
    temperature_k: float
    wavelength_min_m: float
    wavelength_max_m: float
    band_radiance: float
    band_emittance: float
    band_fraction: float
    peak_wavelength_m: float

class BandCalculator(CalculatorBase):
    """
    Computes band radiance and emittance for user-entered values.
    Wavelengths are entered in micrometers.
    """
    def __init__(self, step_count: int = 1000, **kwargs):
        super().__init__(**kwargs)
        if step_count < 1:
            raise ValueError(f"step_count must be at least 1, got {step_count}")
        self.step_count = step_count

    def calculate(self, temperature, wavelength_min_um, wavelength_max_um) -> BandReport:
        temperature_k = self.parse_positive(temperature, 'Temperature')
        wavelength_min_m = self.parse_positive(wavelength_min_um, 'Minimum wavelength') * MICROMETER
        wavelength_max_m = self.parse_positive(wavelength_max_um, 'Maximum wavelength') * MICROMETER
        if not wavelength_min_m < wavelength_max_m:
            raise ValueError("Minimum wavelength must be smaller than maximum wavelength")

        request = IntegrationRequest(temperature_k, wavelength_min_m, wavelength_max_m, self.step_count)
        result = integrate(request, constants=self.constants, settings=self.settings)
        fraction = band_fraction(temperature_k, wavelength_min_m, wavelength_max_m, self.step_count,
                                 constants=self.constants, settings=self.settings)

        return BandReport(
            temperature_k=temperature_k,
            wavelength_min_m=wavelength_min_m,
            wavelength_max_m=wavelength_max_m,
            band_radiance=result.band_radiance,
            band_emittance=result.band_emittance,
            band_fraction=fraction,
            peak_wavelength_m=wien_peak_wavelength(temperature_k, constants=self.constants)
        )

class ChartCalculator(CalculatorBase):
    """
    Produces the data a charting layer needs for a fixed set of temperatures
    and a fixed wavelength window (in micrometers).
    """
    def __init__(self, temperatures, window_min_um=0.1, window_max_um=3.0, point_count=500,
                 plot_settings: PlotSettings = DEFAULT_PLOT_SETTINGS, **kwargs):
        super().__init__(**kwargs)
        self.temperatures = [self.parse_positive(t, 'Temperature') for t in temperatures]
        self.window_min_m = self.parse_positive(window_min_um, 'Window minimum') * MICROMETER
        self.window_max_m = self.parse_positive(window_max_um, 'Window maximum') * MICROMETER
        if not self.window_min_m < self.window_max_m:
            raise ValueError("Window minimum must be smaller than window maximum")
        if point_count < 1:
            raise ValueError(f"point_count must be at least 1, got {point_count}")
        self.point_count = point_count
        self.plot_settings = plot_settings

    def calculate(self) -> SampledCurves:
        return sample_curves(
            self.temperatures,
            self.window_min_m,
            self.window_max_m,
            self.point_count,
            plot_settings=self.plot_settings,
            constants=self.constants,
            settings=self.settings
        )

    def get_log_positions(self, sampled: SampledCurves | None = None) -> list[np.ndarray]:
        """
        Log-axis positions in [0, 1] for every curve, scaled to the shared global maximum.
        """
        sampled = sampled if sampled is not None else self.calculate()
        return [
            log_position(curve.radiances, sampled.global_max_radiance, plot_settings=self.plot_settings)
            for curve in sampled.curves
        ]

import pytest
import numpy as np

from planckkit.defines.settings import PlotSettings
from planckkit.main.calculator import BandCalculator, ChartCalculator
from planckkit.modeling.sampling import sample_curves

MICROMETER = 1e-6

@pytest.fixture
def plot_settings() -> PlotSettings:
    """Fixture for the default plot settings (radiance per micrometer)."""
    return PlotSettings()

@pytest.fixture
def chart_temperatures() -> list[float]:
    """Fixture to provide a fixed, unsorted list of temperatures in Kelvin."""
    return [5000.0, 3000.0, 6000.0, 4000.0]

@pytest.fixture
def sampled_curves(chart_temperatures: list[float], plot_settings: PlotSettings):
    """Fixture for curves sampled over 0.1-3 um with 500 steps."""
    return sample_curves(chart_temperatures, 0.1 * MICROMETER, 3.0 * MICROMETER, 500, plot_settings=plot_settings)

@pytest.fixture
def band_calculator() -> BandCalculator:
    """Fixture to create a BandCalculator with the default step count."""
    return BandCalculator()

@pytest.fixture
def chart_calculator(chart_temperatures: list[float]) -> ChartCalculator:
    """Fixture to create a ChartCalculator over the visible and near-infrared window."""
    return ChartCalculator(chart_temperatures, window_min_um=0.1, window_max_um=3.0, point_count=500)

@pytest.fixture
def wavelength_grid() -> np.ndarray:
    """Fixture to provide a dense wavelength grid from 10 nm to 100 um, in meters."""
    return np.linspace(0.01, 100, 20000) * MICROMETER

import pytest
import numpy as np
from planckkit.main.calculator import BandCalculator, BandReport, ChartCalculator
from planckkit.modeling.integration import integrate_band
from planckkit.datatypes.spectral import SampledCurves

def test_band_calculator_accepts_strings(band_calculator):
    """
    Tests that user-entered strings are parsed and forwarded to the core.
    """
    report = band_calculator.calculate(' 1000 ', '1', '10')
    assert isinstance(report, BandReport)
    assert report.temperature_k == 1000.0
    np.testing.assert_allclose(report.wavelength_min_m, 1e-6)
    np.testing.assert_allclose(report.wavelength_max_m, 1e-5)

    expected = integrate_band(1000.0, report.wavelength_min_m, report.wavelength_max_m)
    assert report.band_radiance == expected
    assert report.band_emittance == expected * np.pi
    assert 0 < report.band_fraction < 1
    np.testing.assert_allclose(report.peak_wavelength_m, 2.897771955e-6, rtol=1e-9)

@pytest.mark.parametrize("temperature, wl_min, wl_max, message", [
    ('abc', '1', '10', 'Temperature must be a number'),
    ('-5', '1', '10', 'Temperature must be positive'),
    ('0', '1', '10', 'Temperature must be positive'),
    ('inf', '1', '10', 'Temperature must be finite'),
    ('1000', '', '10', 'Minimum wavelength must be a number'),
    ('1000', '10', '1', 'Minimum wavelength must be smaller'),
    ('1000', '5', '5', 'Minimum wavelength must be smaller'),
    (None, '1', '10', 'Temperature must be a number'),
])
def test_band_calculator_rejects_invalid_input(band_calculator, temperature, wl_min, wl_max, message):
    with pytest.raises(ValueError, match=message):
        band_calculator.calculate(temperature, wl_min, wl_max)

def test_band_calculator_step_count():
    with pytest.raises(ValueError, match='step_count'):
        BandCalculator(step_count=0)

    coarse = BandCalculator(step_count=10).calculate(1000, 1, 10)
    assert coarse.band_radiance == integrate_band(1000.0, coarse.wavelength_min_m, coarse.wavelength_max_m, step_count=10)

def test_chart_calculator(chart_calculator, chart_temperatures):
    sampled = chart_calculator.calculate()
    assert isinstance(sampled, SampledCurves)
    assert sampled.temperatures == chart_temperatures
    assert all(len(curve) == 501 for curve in sampled.curves)

def test_chart_calculator_log_positions(chart_calculator, chart_temperatures):
    """
    Tests that log positions are produced per curve and stay inside [0, 1].
    """
    positions = chart_calculator.get_log_positions()
    assert len(positions) == len(chart_temperatures)
    for curve_positions in positions:
        assert curve_positions.shape == (501,)
        assert np.all((curve_positions >= 0) & (curve_positions <= 1))

    # Only the brightest curve reaches the top of the axis
    assert max(p.max() for p in positions) == pytest.approx(1.0)

@pytest.mark.parametrize("kwargs, message", [
    ({'temperatures': [5000, -1]}, 'Temperature must be positive'),
    ({'temperatures': [5000], 'window_min_um': 3.0, 'window_max_um': 0.1}, 'Window minimum must be smaller'),
    ({'temperatures': [5000], 'point_count': 0}, 'point_count'),
])
def test_chart_calculator_rejects_invalid_configuration(kwargs, message):
    with pytest.raises(ValueError, match=message):
        ChartCalculator(**kwargs)

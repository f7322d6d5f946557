from dataclasses import dataclass
from typing import Iterator
import numpy as np
import xarray as xr

@dataclass(frozen=True)
class SpectralSample():
    """A single evaluation of Planck's Law."""
    wavelength: float
    temperature: float
    radiance: float

@dataclass(frozen=True)
class IntegrationRequest():
    """
    A wavelength band to integrate over. Wavelengths are in meters, the
    temperature in Kelvin.
    """
    temperature: float
    wavelength_min: float
    wavelength_max: float
    step_count: int = 1000

@dataclass(frozen=True)
class IntegrationResult():
    band_radiance: float

    @property
    def band_emittance(self) -> float:
        """Hemispherical emittance of a Lambertian emitter, W/m^2."""
        return self.band_radiance * np.pi

@dataclass(frozen=True)
class PlotWindow():
    """The shared wavelength domain (meters) all curves of one plot are sampled over."""
    wavelength_min: float
    wavelength_max: float
    sample_count: int

    @property
    def is_degenerate(self) -> bool:
        return not (self.wavelength_min < self.wavelength_max) or self.sample_count < 1

    def wavelengths(self) -> np.ndarray:
        """
        The sample_count + 1 evenly spaced wavelengths from min to max inclusive,
        or an empty array for a degenerate window.
        """
        if self.is_degenerate:
            return np.empty(0)
        step = (self.wavelength_max - self.wavelength_min) / self.sample_count
        return self.wavelength_min + np.arange(self.sample_count + 1) * step

@dataclass(frozen=True, eq=False)
class Curve():
    """
    One sampled blackbody curve.

    wavelengths are in meters, radiances in the display unit given by
    `radiance_unit`. peak_wavelength comes from Wien's law, max_radiance is the
    largest sampled radiance in the window.
    """
    temperature: float
    wavelengths: np.ndarray
    radiances: np.ndarray
    peak_wavelength: float
    max_radiance: float
    radiance_unit: str

    def __len__(self) -> int:
        return len(self.wavelengths)

    @property
    def samples(self) -> Iterator[SpectralSample]:
        for wavelength, radiance in zip(self.wavelengths, self.radiances):
            yield SpectralSample(float(wavelength), self.temperature, float(radiance))

    def to_dataarray(self) -> xr.DataArray:
        data_array = xr.DataArray(
            data=self.radiances,
            coords={'wavelength': self.wavelengths},
            dims=['wavelength'],
            name='radiance',
            attrs={
                'units': self.radiance_unit,
                'temperature_k': self.temperature,
                'peak_wavelength_m': self.peak_wavelength,
            }
        )
        data_array.wavelength.attrs['units'] = 'm'
        return data_array

@dataclass(frozen=True, eq=False)
class SampledCurves():
    """
    The output of one sampling call: the curves in the order their
    temperatures were given, and the maximum radiance across all of them.
    Unpacks as (curves, global_max_radiance).
    """
    window: PlotWindow
    curves: tuple[Curve, ...]
    global_max_radiance: float

    def __iter__(self):
        return iter((self.curves, self.global_max_radiance))

    @property
    def temperatures(self) -> list[float]:
        return [curve.temperature for curve in self.curves]

    @property
    def peak_wavelengths(self) -> list[float]:
        return [curve.peak_wavelength for curve in self.curves]

    def to_dataset(self) -> xr.Dataset:
        """Stacks the curves into a (temperature, wavelength) Dataset."""
        radiance_unit = self.curves[0].radiance_unit if self.curves else ''
        wavelengths = self.window.wavelengths()
        dataset = xr.Dataset(
            data_vars={
                'radiance': (('temperature', 'wavelength'),
                             np.array([curve.radiances for curve in self.curves]).reshape(len(self.curves), len(wavelengths)),
                             {'units': radiance_unit}),
                'peak_wavelength': (('temperature',), np.array(self.peak_wavelengths, dtype=float), {'units': 'm'}),
                'max_radiance': (('temperature',), np.array([c.max_radiance for c in self.curves], dtype=float),
                                 {'units': radiance_unit}),
            },
            coords={
                'temperature': np.array(self.temperatures, dtype=float),
                'wavelength': wavelengths,
            },
            attrs={'global_max_radiance': self.global_max_radiance}
        )
        dataset.temperature.attrs['units'] = 'K'
        dataset.wavelength.attrs['units'] = 'm'
        return dataset

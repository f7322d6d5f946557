import re
from pathlib import Path
import numpy as np
import xarray as xr
from planckkit.datatypes.spectral import Curve
from planckkit.defines.settings import DEFAULT_PLOT_SETTINGS, PlotSettings

def _temperature_label(temperature: float) -> str:
    # repr round-trips; whole temperatures drop the trailing .0
    temperature = float(temperature)
    if temperature.is_integer():
        return str(int(temperature))
    return repr(temperature)

def save_curve(curve: Curve, savepath: Path, plot_settings: PlotSettings = DEFAULT_PLOT_SETTINGS) -> Path:
    """
    Writes a sampled curve as a 2-column txt file named blackbody_T{temperature}.txt.
    Column 1: wavelength in plot_settings.wavelength_unit
    Column 2: radiance in the curve's display unit

    A curve without samples is written as a header-only file.
    """
    wavelengths = curve.wavelengths * plot_settings.wavelength_scale
    data = np.column_stack((wavelengths, curve.radiances))
    header_text = f'wavelength[{plot_settings.wavelength_unit}]    radiance[{curve.radiance_unit}]'

    filepath = Path(savepath) / f'blackbody_T{_temperature_label(curve.temperature)}.txt'
    np.savetxt(filepath, data, delimiter='\t', fmt='%.8e', header=header_text)
    print(f'File saved as {filepath}')
    return filepath

def read_curve(filepath: Path) -> xr.DataArray:
    '''
    Reads a curve written by save_curve into a DataArray.
    Column 1: wavelength
    Column 2: radiance
    A header-only file gives an empty DataArray.
    '''
    with open(filepath) as file:
        lines = file.readlines()
    header = lines[0] if lines and lines[0].lstrip().startswith('#') else ''
    has_data = any(line.strip() and not line.lstrip().startswith('#') for line in lines)

    if has_data:
        raw_data = np.loadtxt(filepath, comments='#', ndmin=2)
        if raw_data.shape[1] != 2:
            raise ValueError("File must have two columns: wavelength, radiance")
    else:
        raw_data = np.empty((0, 2))

    units = re.findall(r'\[([^\]]*)\]', header)
    wavelength_unit, radiance_unit = (units + ['', ''])[:2]

    data_array = xr.DataArray(
        data=raw_data[:, 1],
        coords={'wavelength': raw_data[:, 0]},
        dims=['wavelength'],
        name='radiance',
        attrs={'units': radiance_unit}
    )
    data_array.wavelength.attrs['units'] = wavelength_unit
    return data_array

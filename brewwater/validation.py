import math
from numbers import Real
from .exceptions import InvalidInput
from .profile import IONS, WaterProfile


def _check_number(field, value):
    # bool is a Real, but True liters of water is almost certainly a typo
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInput(field, 'must be a number')
    if not math.isfinite(value):
        raise InvalidInput(field, 'must be finite')


def validate_volume(volume):
    """Volume must be a finite, strictly positive number of liters."""
    _check_number('volume', volume)
    if volume <= 0:
        raise InvalidInput('volume', 'must be positive')
    return float(volume)


def validate_profile(profile, name):
    """Check a water profile for physically meaningful values.

    Parameters
    ----------
     profile : WaterProfile or dict
        Mineral content in ppm. Dictionaries are converted using
        WaterProfile.from_dict.
     name : str
        Prefix for the field named in any error, e.g. 'base'.

    Returns
    -------
     profile : WaterProfile
        With every value converted to float.

    Raises
    ------
     InvalidInput
        If a mineral is missing, is not a finite number, or is
        negative. Only the first offending field is reported.

    """
    if not isinstance(profile, WaterProfile):
        if not hasattr(profile, 'items'):
            raise InvalidInput(name, 'must be a water profile')
        profile = WaterProfile.from_dict(profile, name)

    for ion, value in zip(IONS, profile):
        field = '{0:s}.{1:s}'.format(name, ion)
        _check_number(field, value)
        if value < 0:
            raise InvalidInput(field, 'must not be negative')

    return WaterProfile(*[float(v) for v in profile])


def validate_inputs(volume, base, target):
    """Validate everything the optimizer needs, before building anything."""
    return (validate_volume(volume),
            validate_profile(base, 'base'),
            validate_profile(target, 'target'))

from collections import namedtuple
import numpy as np
from .exceptions import InvalidInput


IONS = ('calcium', 'magnesium', 'sodium', 'sulfate', 'chloride', 'bicarbonate')

ION_SYMBOLS = {
    'Ca': 'calcium',
    'Mg': 'magnesium',
    'Na': 'sodium',
    'SO4': 'sulfate',
    'Cl': 'chloride',
    'HCO3': 'bicarbonate'
}


class WaterProfile(namedtuple('WaterProfile', IONS)):
    """Mineral content of water, in parts-per-million.

    Fields are always in the order of IONS, so a profile doubles as a
    vector for the matrix arithmetic in problem.py and solution.py.

    """
    __slots__ = ()

    @classmethod
    def from_dict(cls, d, name='profile'):
        """Build a profile from a dictionary.

        Parameters
        ----------
         d : dict
            Key-value pairs with key the name of the mineral (either
            the full name, like 'calcium', or the chemical symbol,
            like 'Ca') and value the ppm concentration.
         name : str
            Used to identify the offending field in error messages,
            e.g. 'base' or 'target'.

        Returns
        -------
         profile : WaterProfile

        """
        values = {}
        for k, v in d.items():
            values[ION_SYMBOLS.get(k, k)] = v

        unknown = sorted(set(values) - set(IONS))
        if unknown:
            raise InvalidInput('{0:s}.{1:s}'.format(name, unknown[0]),
                               'unknown mineral')

        for ion in IONS:
            if ion not in values:
                raise InvalidInput('{0:s}.{1:s}'.format(name, ion),
                                   'is required')

        return cls(**values)

    @classmethod
    def from_array(cls, a):
        return cls(*[float(v) for v in a])

    def as_array(self):
        return np.array(self, dtype=float)

    def as_dict(self):
        return dict(self._asdict())


def distilled():
    """Profile of distilled or Reverse-Osmosis (RO) water."""
    return WaterProfile(*([0.] * len(IONS)))

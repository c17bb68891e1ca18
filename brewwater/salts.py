# Ion contributions are (ion weight / compound molecular weight) * 1000,
# i.e. the ppm contributed by one gram of salt dissolved in one liter
# of water. Hydrated forms are used for gypsum, calcium chloride and
# epsom salt since that is what brewers buy.
#
# General reference:
# http://www.brewersfriend.com/mash-chemistry-and-brewing-water-calculator/
from collections import namedtuple
from types import MappingProxyType
import numpy as np
from .profile import IONS


Salt = namedtuple('Salt', ['name', 'formula', 'molecular_weight',
                           'contributions', 'solubility'])


BREWING_SALTS = (
    Salt(name='Gypsum (CaSO4)',
         formula='CaSO4.2H2O',
         molecular_weight=172.17,
         contributions=MappingProxyType({
             'calcium': 232.8,   # 40.08 / 172.17
             'sulfate': 557.9    # 96.06 / 172.17
         }),
         solubility=2.1),
    Salt(name='Calcium Chloride (CaCl2)',
         formula='CaCl2.2H2O',
         molecular_weight=147.01,
         contributions=MappingProxyType({
             'calcium': 272.6,   # 40.08 / 147.01
             'chloride': 482.3   # 70.90 / 147.01
         }),
         solubility=745.),
    Salt(name='Epsom Salt (MgSO4)',
         formula='MgSO4.7H2O',
         molecular_weight=246.47,
         contributions=MappingProxyType({
             'magnesium': 98.6,  # 24.31 / 246.47
             'sulfate': 389.7    # 96.06 / 246.47
         }),
         solubility=710.),
    Salt(name='Table Salt (NaCl)',
         formula='NaCl',
         molecular_weight=58.44,
         contributions=MappingProxyType({
             'sodium': 393.4,    # 22.99 / 58.44
             'chloride': 606.6   # 35.45 / 58.44
         }),
         solubility=360.),
    Salt(name='Baking Soda (NaHCO3)',
         formula='NaHCO3',
         molecular_weight=84.01,
         contributions=MappingProxyType({
             'sodium': 273.6,       # 22.99 / 84.01
             'bicarbonate': 726.4   # 61.02 / 84.01
         }),
         solubility=96.)
)

SALTS = tuple(s.name for s in BREWING_SALTS)

SALT_BY_NAME = MappingProxyType({s.name: s for s in BREWING_SALTS})


def contribution(salt, ion):
    """ppm of `ion` contributed by one gram of `salt` in one liter.

    Parameters
    ----------
     salt : Salt or str
        Catalog entry, or its name.
     ion : str
        Name of the mineral, one of IONS.

    Returns
    -------
     ppm : float
        Zero if the salt does not contribute that ion.

    """
    if not isinstance(salt, Salt):
        salt = SALT_BY_NAME[salt]
    if ion not in IONS:
        raise KeyError(ion)
    return salt.contributions.get(ion, 0.)


def contribution_matrix():
    """Design matrix of the salt catalog.

    Returns
    -------
     A : 2d array
       The columns correspond to the salts (in catalog order), and
       the rows to the mineral content (in the order of IONS), in ppm
       per gram per liter. A fresh copy is returned on each call.

    """
    return np.array([[contribution(s, ion) for s in BREWING_SALTS]
                     for ion in IONS])

import logging
from .salts import BREWING_SALTS


logger = logging.getLogger(__name__)

BICARBONATE_TO_ALKALINITY = 50. / 61


def alkalinity(profile):
    """Alkalinity as CaCO3, in ppm."""
    return profile.bicarbonate * BICARBONATE_TO_ALKALINITY


def effective_hardness(profile):
    """Hardness that offsets alkalinity in the mash (Kolbach)."""
    return profile.calcium / 1.4 + profile.magnesium / 1.7


def residual_alkalinity(profile):
    return alkalinity(profile) - effective_hardness(profile)


def sulfate_to_chloride_ratio(profile):
    if profile.chloride > 0:
        return profile.sulfate / profile.chloride
    return None


def brewing_analysis(profile):
    """Brewing-relevant metrics of a water profile.

    Parameters
    ----------
     profile : WaterProfile
        Mineral content, in ppm.

    Returns
    -------
     analysis : dict
        'alkalinity' : float
           Alkalinity as CaCO3, in ppm.
        'residual alkalinity' : float
           Alkalinity less effective hardness. Higher residual
           alkalinity is better suited to darker beers.
        'sulfate to chloride ratio' : float or None
           None if the water has no chloride.
        'total hardness' : float
           Calcium plus magnesium, in ppm.
        'effective hardness' : float
           Calcium / 1.4 + magnesium / 1.7, in ppm.

    """
    return {
        'alkalinity': alkalinity(profile),
        'residual alkalinity': residual_alkalinity(profile),
        'sulfate to chloride ratio': sulfate_to_chloride_ratio(profile),
        'total hardness': profile.calcium + profile.magnesium,
        'effective hardness': effective_hardness(profile)
    }


def solubility_warnings(additions, volume):
    """Salts that would not fully dissolve.

    Parameters
    ----------
     additions : dict
        Grams of each salt, keyed by salt name.
     volume : float
        Water volume, in liters.

    Returns
    -------
     warnings : list of str
        One message per salt whose concentration exceeds its
        solubility. Gypsum is the usual offender.

    """
    warnings = []
    for salt in BREWING_SALTS:
        concentration = additions.get(salt.name, 0.) / volume
        if concentration > salt.solubility:
            msg = '{0:s}: {1:.2f} g/L exceeds solubility of {2:.1f} g/L'
            msg = msg.format(salt.name, concentration, salt.solubility)
            logger.warning(msg)
            warnings.append(msg)
    return warnings

# General references:
# http://www.brewersfriend.com/mash-chemistry-and-brewing-water-calculator/
#
# Salt contributions are listed in salts.py.
import json
import logging
import os
from numbers import Real
from unit_parser import unit_parser
from .analysis import brewing_analysis, solubility_warnings
from .exceptions import InvalidInput
from .optimizer import optimize_salt_additions
from .profile import IONS, WaterProfile
from .salts import SALTS
from .solution import round_display, total_salt_weight
from .validation import validate_profile


logger = logging.getLogger(__name__)


def load_config():
    """Load the packaged configuration.

    The named water sources are read from the file listed under
    'files' and stored under 'water'.

    """
    this_dir, this_filename = os.path.split(__file__)
    brewwater_config = os.path.join(this_dir, 'resources', 'brewwater.json')
    with open(brewwater_config, 'r') as f:
        config = json.load(f)

    water_config_file = os.path.join(this_dir, 'resources', config['files']['water'])
    with open(water_config_file, 'r') as f:
        config['water'] = json.load(f)

    if 'units' in config['files']:
        config['units'] = os.path.join(this_dir, 'resources', config['files']['units'])

    return config


def main():
    """Entry point for water_salts command line script.

    """
    import argparse

    logging.basicConfig(format='%(levelname)s: %(message)s')
    config = load_config()

    parser = argparse.ArgumentParser()
    parser.add_argument('recipe', type=str, help='Recipe JSON')
    parser.add_argument('-o', '--output', type=str, help='Output file')

    args = parser.parse_args()
    with open(args.recipe, 'r') as f:
        recipe_config = json.load(f)
    if args.output:
        config['Output'] = args.output

    return execute(config, recipe_config)


def execute(config, recipe_config):
    """Light wrapper for other functions.

    Determines the water volume and profiles, then the salt
    additions, and writes the augmented recipe to config['Output']
    if present.

    """
    if 'units' in config:
        config['unit_parser'] = unit_parser(config['units'])
    else:
        config['unit_parser'] = unit_parser()

    config, recipe_config = salt_additions(config, recipe_config)

    if 'Output' in config:
        with open(config['Output'], 'w') as outfile:
            json.dump(recipe_config, outfile, indent=2, sort_keys=True)

    return config, recipe_config


def water_volume(config, recipe_config):
    """Volume of water to treat, in liters.

    'Volume' may be a string with units, e.g. '5 gallons', or a
    number, interpreted as liters. recipe_config overrides config.

    """
    up = config['unit_parser']

    if 'Volume' in recipe_config:
        volume = recipe_config['Volume']
    elif 'Volume' in config:
        volume = config['Volume']
    else:
        raise ValueError('Volume not specified.')

    if isinstance(volume, Real):
        return volume
    return up.convert(volume, 'liters')


def water_profile(config, profile, name):
    """Resolve a profile given either by name or as ppm values.

    Named profiles are looked up in config['water'].

    """
    if isinstance(profile, str):
        if profile not in config['water']:
            raise InvalidInput(name, 'unknown water {0:s}'.format(profile))
        profile = config['water'][profile]

    if isinstance(profile, WaterProfile):
        return profile
    if not isinstance(profile, dict):
        raise InvalidInput(name, 'must be a water profile')
    return WaterProfile.from_dict(profile, name)


def salt_additions(config, recipe_config):
    """Determines what salts (if any) to use.

    Note: required parameters are in either config or
    recipe_config. Where applicable, if a parameter is specified in
    both config and recipe_config, the latter overrides the former.

    Parameters
    ----------
     'Volume' : string
        Volume of water to treat, e.g. '20 liters'.
     'Water Profile' : dict
        'target' is the desired water profile, in terms of the ppm of
        calcium, magnesium, sodium, sulfate, chloride and bicarbonate
        (either full names or chemical symbols may be used). 'base'
        is the starting water, either a profile of the same form or
        the name of a water in config. Defaults to 'Base Water' in
        config, typically distilled.

    Returns
    -------
     This function appends fields (documented below) to recipe_config
     and returns both config (unmodified) and recipe_config. It also
     prints how much of each salt to add and the achieved profile.

    Fields Appended to recipe_config
    --------------------------------
     'Salts' : dict
        Grams of each salt to add, rounded to 0.1 gram. Salts that
        are not needed are omitted.
     'Total Salt Weight' : float
        Sum of the above.
     'Water Profile Achieved' : dict
        ppm of each mineral, and brewing metrics like residual
        alkalinity.
     'Deviations' : dict
        Achieved minus target, in ppm.
     'Feasible' : bool
        False if no salt additions could be computed.

    """
    if 'Water Profile' not in recipe_config or 'target' not in recipe_config['Water Profile']:
        raise ValueError('Target water profile not specified.')

    wp = recipe_config['Water Profile']
    if 'base' in wp:
        base = wp['base']
    elif 'Base Water' in config:
        base = config['Base Water']
    else:
        base = 'distilled'
        logger.info('Base water not specified, assuming %s', base)

    volume = water_volume(config, recipe_config)
    base = water_profile(config, base, 'base')
    target = water_profile(config, wp['target'], 'target')

    res = calculate_water_additions(volume, base, target)
    recipe_config['Feasible'] = res['success']
    if not res['success']:
        print(res['error'])
        if not res['deviations']:
            return config, recipe_config

    recipe_config['Salts'] = {}
    for salt, grams in res['additions'].items():
        if grams > 0:
            recipe_config['Salts'][salt] = grams
            print('{0:.1f} grams {1:s}'.format(grams, salt))
    recipe_config['Total Salt Weight'] = res['total_salt_weight']
    print('Total: {0:.1f} grams'.format(res['total_salt_weight']))

    if res['solubility_warnings']:
        recipe_config['Solubility Warnings'] = res['solubility_warnings']

    print('')
    recipe_config['Water Profile Achieved'] = res['achieved_profile']
    for mineral, ppm in res['achieved_profile'].items():
        print('{0:.1f} ppm {1:s} ({2:+.1f})'.format(ppm, mineral, res['deviations'][mineral]))
    recipe_config['Deviations'] = res['deviations']

    analysis = res['brewing_analysis']
    recipe_config['Water Profile Achieved'].update(analysis)
    print('Residual alkalinity: {0:.0f}'.format(analysis['residual alkalinity']))
    if analysis['sulfate to chloride ratio'] is not None:
        print('Sulfate to chloride ratio: {0:.2f}'.format(analysis['sulfate to chloride ratio']))

    return config, recipe_config


def calculate_water_additions(volume, base, target, solver=None):
    """Salt additions plus everything a brewer wants to know about them.

    Parameters
    ----------
     volume : float
        Water volume, in liters.
     base, target : WaterProfile or dict
        Starting and desired mineral content, in ppm.

    Returns
    -------
     result : dict
        'success' : bool
           False if the inputs were invalid or no solution was found,
           in which case 'error' says why.
        'additions' : dict
           Grams of each salt, rounded for display.
        'achieved_profile', 'deviations' : dict
           ppm of each mineral, rounded for display.
        'total_salt_weight' : float
        'brewing_analysis' : dict
           See analysis.brewing_analysis. Computed from the full
           precision achieved profile.
        'solubility_warnings' : list of str

    """
    try:
        res = optimize_salt_additions(volume, base, target, solver=solver)
    except InvalidInput as e:
        logger.info('Input validation failed: %s', e)
        res = {
            'success': False,
            'error': 'Input validation failed: {0}'.format(e),
            'additions': {},
            'achieved_profile': {},
            'deviations': {},
            'total_salt_weight': 0.,
            'brewing_analysis': {},
            'solubility_warnings': []
        }
        # Nothing gets added, so the base water is what the brewer gets.
        try:
            base = validate_profile(base, 'base')
        except InvalidInput:
            return res
        res['additions'] = {s: 0. for s in SALTS}
        res['achieved_profile'] = WaterProfile(*[round_display(v) for v in base]).as_dict()
        res['brewing_analysis'] = brewing_analysis(base)
        try:
            target = validate_profile(target, 'target')
        except InvalidInput:
            return res
        res['deviations'] = {ion: round_display(a - t)
                             for ion, a, t in zip(IONS, base, target)}
        return res

    if res.feasible:
        error = None
    else:
        error = 'Unable to find a feasible solution: {0:s}'.format(res.message)

    return {
        'success': res.feasible,
        'error': error,
        'additions': res.additions_display,
        'achieved_profile': res.achieved_display.as_dict(),
        'deviations': res.deviations_display.as_dict(),
        'total_salt_weight': total_salt_weight(res.additions_display),
        'brewing_analysis': brewing_analysis(res.achieved),
        'solubility_warnings': solubility_warnings(res.additions, volume)
    }


if __name__ == '__main__':
    main()

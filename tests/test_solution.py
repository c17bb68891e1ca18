import numpy as np
import pytest
from .context import brewwater as bw
from brewwater import solution


BASE = bw.WaterProfile(22., 2.7, 12., 6., 14., 50.)
TARGET = bw.WaterProfile(48., 2.7, 12., 60., 40., 50.)


def test_clamp_round_off():
    x = solution.clamp([1.5, -1e-9, 0., -5e-7, 0.25])
    assert list(x) == [1.5, 0., 0., 0., 0.25]


def test_clamp_meaningfully_negative():
    with pytest.raises(bw.SolverContractViolation) as e:
        solution.clamp([1.5, -0.01, 0., 0., 0.])
    assert 'Calcium Chloride' in str(e.value)


def test_clamp_wrong_shape():
    with pytest.raises(bw.SolverContractViolation):
        solution.clamp([1., 2.])


def test_clamp_nan():
    with pytest.raises(bw.SolverContractViolation):
        solution.clamp([1., np.nan, 0., 0., 0.])


def test_apply_additions():
    """Tests 1 gram of gypsum in 1 liter of distilled water.

    """
    res = bw.apply_additions(bw.distilled(), [1., 0., 0., 0., 0.], 1.)
    assert res.calcium == pytest.approx(232.8)
    assert res.sulfate == pytest.approx(557.9)
    assert res.chloride == 0.


def test_apply_additions_dict():
    res = bw.apply_additions(BASE, {'Table Salt (NaCl)': 2.}, 20.)
    assert res.sodium == pytest.approx(12. + 2 * 393.4 / 20)
    assert res.chloride == pytest.approx(14. + 2 * 606.6 / 20)
    assert res.calcium == BASE.calcium


def test_round_display():
    assert bw.round_display(1.26) == 1.3
    assert bw.round_display(0.04) == 0.
    assert bw.round_display(-0.04) == 0.
    assert bw.round_display(0.049, 0.1) == 0.
    assert bw.round_display(0.096, 0.1) == 0.1
    assert bw.round_display(0.1, 0.1) == 0.1
    assert bw.round_display(0.149, 0.1) == 0.1


@pytest.mark.parametrize('value', [0., 0.05, 0.0999, 0.1, 0.15, 1.2345, 17.86, 123.456, -3.14])
def test_round_display_idempotent(value):
    once = bw.round_display(value)
    assert bw.round_display(once) == once
    once = bw.round_display(value, solution.DISPLAY_THRESHOLD)
    assert bw.round_display(once, solution.DISPLAY_THRESHOLD) == once


def test_map_solution():
    """Tests full precision values are kept apart from display values.

    """
    x = [1.234, 0.04, 0., 0.96, -1e-10]
    s = bw.map_solution(x, 20., BASE, TARGET)

    assert s.additions['Gypsum (CaSO4)'] == 1.234
    assert s.additions['Calcium Chloride (CaCl2)'] == 0.04
    assert s.additions['Baking Soda (NaHCO3)'] == 0.
    assert s.additions_display == {
        'Gypsum (CaSO4)': 1.2,
        'Calcium Chloride (CaCl2)': 0.,
        'Epsom Salt (MgSO4)': 0.,
        'Table Salt (NaCl)': 1.,
        'Baking Soda (NaHCO3)': 0.
    }

    expected = bw.apply_additions(BASE, [1.234, 0.04, 0., 0.96, 0.], 20.)
    assert list(s.achieved) == pytest.approx(list(expected))
    assert s.achieved.calcium == pytest.approx(22. + (1.234 * 232.8 + 0.04 * 272.6) / 20)

    deviations = np.array(s.achieved) - np.array(TARGET)
    assert list(s.deviations) == pytest.approx(list(deviations))
    assert list(s.achieved_display) == [round(v, 1) for v in s.achieved]
    assert list(s.deviations_display) == [bw.round_display(v) for v in s.deviations]


def test_total_salt_weight():
    additions = {'Gypsum (CaSO4)': 1.2, 'Table Salt (NaCl)': 1.}
    assert solution.total_salt_weight(additions) == 2.2


def test_map_solution_rounds_before_threshold():
    """Tests 0.096 grams is shown as 0.1 grams, not dropped.

    """
    s = bw.map_solution([0.096, 0.049, 0., 0., 0.], 20., bw.distilled(), bw.distilled())
    assert s.additions_display['Gypsum (CaSO4)'] == 0.1
    assert s.additions_display['Calcium Chloride (CaCl2)'] == 0.
    assert s.additions['Gypsum (CaSO4)'] == 0.096

"""
Tests for the pure calculation modules: unit normalisation, standard-value
resolution, the color-code codec, component formulas and Sallen-Key design.

Run from the repo root:
    pytest bench-app/tests/ -v
"""

import math
import unittest

from bench_constants import STANDARD_SERIES
from color_code import (
    ColorBand,
    bands_to_description,
    decode,
    encode,
    standard_color_code,
)
from errors import (
    CalcError,
    DivisionByZero,
    InvalidColorBand,
    InvalidGain,
    InvalidPoleCount,
    InvalidPolePair,
    InvalidUnit,
    NonPositiveInput,
    UnrepresentableValue,
)
from filters import PassType, Topology, design_stage, filter_spec
from formulas import (
    combine_networks,
    cutoff_frequency,
    inverting_gain,
    non_inverting_gain,
    output_voltage,
    parallel_resistance,
    required_capacitance,
    required_resistance,
    sallen_key_component_value,
    series_resistance,
)
from standard_values import (
    Combination,
    CombinationKind,
    nearest,
    resolve,
    suggest_combinations,
)
from units import Dimension, format_value, normalize, scale_for_display


# ---------------------------------------------------------------------------
# Unit normaliser
# ---------------------------------------------------------------------------

class TestNormalize(unittest.TestCase):

    def test_kilo_ohms(self):
        m = normalize(4.7, "k", Dimension.RESISTANCE)
        self.assertAlmostEqual(m.magnitude, 4700.0)
        self.assertIs(m.dimension, Dimension.RESISTANCE)

    def test_suffix_is_case_insensitive(self):
        self.assertAlmostEqual(normalize(4.7, "K", Dimension.RESISTANCE).magnitude, 4700.0)
        self.assertAlmostEqual(normalize(2.2, "M", Dimension.RESISTANCE).magnitude, 2.2e6)
        self.assertAlmostEqual(normalize(2.2, "m", Dimension.RESISTANCE).magnitude, 2.2e6)
        self.assertAlmostEqual(normalize(330, "O", Dimension.RESISTANCE).magnitude, 330.0)

    def test_capacitance_suffixes(self):
        self.assertAlmostEqual(normalize(1, "u", Dimension.CAPACITANCE).magnitude, 1e-6, places=15)
        self.assertAlmostEqual(normalize(100, "n", Dimension.CAPACITANCE).magnitude, 1e-7, places=15)
        self.assertAlmostEqual(normalize(22, "P", Dimension.CAPACITANCE).magnitude, 22e-12, places=20)

    def test_frequency_suffixes(self):
        self.assertAlmostEqual(normalize(50, "h", Dimension.FREQUENCY).magnitude, 50.0)
        self.assertAlmostEqual(normalize(1.5, "k", Dimension.FREQUENCY).magnitude, 1500.0)
        self.assertAlmostEqual(normalize(1, "M", Dimension.FREQUENCY).magnitude, 1e6)

    def test_whitespace_around_suffix_ignored(self):
        self.assertAlmostEqual(normalize(1, " k ", Dimension.RESISTANCE).magnitude, 1000.0)

    def test_unknown_suffix_raises(self):
        with self.assertRaises(InvalidUnit):
            normalize(1.0, "x", Dimension.RESISTANCE)

    def test_suffix_from_other_dimension_raises(self):
        with self.assertRaises(InvalidUnit):
            normalize(1.0, "u", Dimension.RESISTANCE)
        with self.assertRaises(InvalidUnit):
            normalize(1.0, "k", Dimension.CAPACITANCE)

    def test_non_positive_resistance_raises(self):
        with self.assertRaises(NonPositiveInput):
            normalize(0.0, "k", Dimension.RESISTANCE)
        with self.assertRaises(NonPositiveInput):
            normalize(-1.0, "o", Dimension.RESISTANCE)

    def test_non_finite_raises(self):
        with self.assertRaises(NonPositiveInput):
            normalize(float("nan"), "k", Dimension.RESISTANCE)
        with self.assertRaises(NonPositiveInput):
            normalize(float("inf"), "v", Dimension.VOLTAGE)

    def test_voltage_may_be_negative(self):
        self.assertAlmostEqual(normalize(-3.3, "v", Dimension.VOLTAGE).magnitude, -3.3)

    def test_errors_share_base_class(self):
        with self.assertRaises(CalcError):
            normalize(1.0, "q", Dimension.FREQUENCY)


class TestScaleForDisplay(unittest.TestCase):

    def test_negative_volts_keep_sign(self):
        self.assertEqual(scale_for_display(-5.0, Dimension.VOLTAGE), (-5.0, "V"))

    def test_threshold_is_inclusive(self):
        self.assertEqual(scale_for_display(1000.0, Dimension.RESISTANCE), (1.0, "kΩ"))
        self.assertEqual(scale_for_display(1e6, Dimension.FREQUENCY), (1.0, "MHz"))

    def test_just_below_threshold(self):
        self.assertEqual(scale_for_display(999.0, Dimension.RESISTANCE), (999.0, "Ω"))

    def test_millivolts(self):
        value, label = scale_for_display(0.5, Dimension.VOLTAGE)
        self.assertAlmostEqual(value, 500.0)
        self.assertEqual(label, "mV")

    def test_capacitance_ranges(self):
        value, label = scale_for_display(4.7e-9, Dimension.CAPACITANCE)
        self.assertAlmostEqual(value, 4.7)
        self.assertEqual(label, "nF")

        value, label = scale_for_display(2.2e-6, Dimension.CAPACITANCE)
        self.assertAlmostEqual(value, 2.2)
        self.assertEqual(label, "µF")

        value, label = scale_for_display(33e-12, Dimension.CAPACITANCE)
        self.assertAlmostEqual(value, 33.0)
        self.assertEqual(label, "pF")

    def test_sub_ohm_stays_in_ohms(self):
        value, label = scale_for_display(0.1, Dimension.RESISTANCE)
        self.assertAlmostEqual(value, 0.1)
        self.assertEqual(label, "Ω")

    def test_zero(self):
        self.assertEqual(scale_for_display(0.0, Dimension.RESISTANCE), (0.0, "Ω"))

    def test_format_value(self):
        self.assertEqual(format_value(-5.0, Dimension.VOLTAGE), "-5 V")
        self.assertEqual(format_value(4700.0, Dimension.RESISTANCE), "4.7 kΩ")
        self.assertEqual(format_value(1 / (1000 * 1e-6 * 2 * math.pi), Dimension.FREQUENCY),
                         "159.2 Hz")


# ---------------------------------------------------------------------------
# Standard-value resolver
# ---------------------------------------------------------------------------

class TestStandardSeries(unittest.TestCase):

    def test_series_shape(self):
        self.assertEqual(len(STANDARD_SERIES), 85)
        self.assertEqual(STANDARD_SERIES[0], 1.0)
        self.assertEqual(STANDARD_SERIES[-1], 10_000_000.0)
        self.assertEqual(list(STANDARD_SERIES), sorted(STANDARD_SERIES))

    def test_values_are_clean(self):
        self.assertIn(330.0, STANDARD_SERIES)
        self.assertIn(8_200_000.0, STANDARD_SERIES)
        self.assertIn(4.7, STANDARD_SERIES)


class TestNearest(unittest.TestCase):

    def test_members_are_self_nearest(self):
        for value in STANDARD_SERIES:
            self.assertEqual(nearest(value), value)

    def test_result_minimises_distance(self):
        for target in (1.05, 3.0, 260.0, 4600.0, 51_000.0, 9_000_000.0):
            best = nearest(target)
            self.assertIn(best, STANDARD_SERIES)
            self.assertEqual(abs(target - best), min(abs(target - v) for v in STANDARD_SERIES))

    def test_tie_keeps_lower_value(self):
        # 11 is exactly between 10 and 12; 1100 between 1000 and 1200
        self.assertEqual(nearest(11.0), 10.0)
        self.assertEqual(nearest(1100.0), 1000.0)

    def test_out_of_range_snaps_to_ends(self):
        self.assertEqual(nearest(0.5), 1.0)
        self.assertEqual(nearest(50_000_000.0), 10_000_000.0)

    def test_exact_match_has_zero_difference(self):
        self.assertEqual(resolve(1000.0), (1000.0, 0.0))

    def test_non_positive_target_raises(self):
        with self.assertRaises(NonPositiveInput):
            nearest(0.0)
        with self.assertRaises(NonPositiveInput):
            nearest(-10.0)

    def test_custom_series(self):
        self.assertEqual(nearest(7.0, (1.0, 5.0, 10.0)), 5.0)


class TestSuggestCombinations(unittest.TestCase):

    def test_exact_match_yields_nothing(self):
        self.assertEqual(suggest_combinations(1000.0, STANDARD_SERIES, 0.0), [])
        self.assertEqual(suggest_combinations(1000.0), [])

    def test_pairs_beat_single_value(self):
        target = 1100.0
        _npv, difference = resolve(target)
        combos = suggest_combinations(target)
        self.assertTrue(combos)
        for combo in combos:
            self.assertLess(abs(combo.value - target), difference)

    def test_expected_pairs_present(self):
        combos = suggest_combinations(1100.0)
        self.assertIn(Combination(CombinationKind.SERIES, 1000.0, 100.0), combos)
        self.assertIn(Combination(CombinationKind.PARALLEL, 2200.0, 2200.0), combos)

    def test_scan_order(self):
        combos = suggest_combinations(1100.0)
        firsts = [c.r1 for c in combos]
        self.assertEqual(firsts, sorted(firsts))

    def test_combination_value_and_str(self):
        series = Combination(CombinationKind.SERIES, 1000.0, 100.0)
        parallel = Combination(CombinationKind.PARALLEL, 2200.0, 2200.0)
        self.assertAlmostEqual(series.value, 1100.0)
        self.assertAlmostEqual(parallel.value, 1100.0)
        self.assertEqual(str(series), "Series: 1000 ohms + 100 ohms")
        self.assertEqual(str(parallel), "Parallel: 2200 ohms || 2200 ohms")


# ---------------------------------------------------------------------------
# Color-code codec
# ---------------------------------------------------------------------------

class TestDecode(unittest.TestCase):

    def test_brown_black_red(self):
        self.assertEqual(decode("brown", "black", "red"), 1000.0)

    def test_all_black_is_zero(self):
        self.assertEqual(decode(ColorBand.BLACK, ColorBand.BLACK, ColorBand.BLACK), 0.0)

    def test_gold_and_silver_multipliers(self):
        self.assertAlmostEqual(decode("yellow", "violet", "gold"), 4.7)
        self.assertAlmostEqual(decode("brown", "black", "silver"), 0.1)

    def test_names_are_case_insensitive_and_grey_alias(self):
        self.assertEqual(decode("Grey", "RED", "Brown"), 820.0)

    def test_gold_as_digit_band_raises(self):
        with self.assertRaises(InvalidColorBand):
            decode("gold", "black", "red")
        with self.assertRaises(InvalidColorBand):
            decode("brown", "silver", "red")

    def test_unknown_color_raises(self):
        with self.assertRaises(InvalidColorBand):
            decode("pink", "black", "red")
        with self.assertRaises(InvalidColorBand):
            decode("brown", "black", "purple")


class TestEncode(unittest.TestCase):

    def test_power_of_ten_has_no_spurious_leading_ten(self):
        self.assertEqual(encode(1000.0), (ColorBand.BROWN, ColorBand.BLACK, ColorBand.RED))

    def test_common_values(self):
        self.assertEqual(encode(4700.0), (ColorBand.YELLOW, ColorBand.VIOLET, ColorBand.RED))
        self.assertEqual(encode(330.0), (ColorBand.ORANGE, ColorBand.ORANGE, ColorBand.BROWN))
        self.assertEqual(encode(4.7), (ColorBand.YELLOW, ColorBand.VIOLET, ColorBand.GOLD))

    def test_float_noise_in_second_digit(self):
        self.assertEqual(encode(820.0), (ColorBand.GRAY, ColorBand.RED, ColorBand.BROWN))
        self.assertEqual(encode(8_200_000.0), (ColorBand.GRAY, ColorBand.RED, ColorBand.GREEN))

    def test_extra_digits_are_truncated(self):
        self.assertEqual(encode(4790.0), (ColorBand.YELLOW, ColorBand.VIOLET, ColorBand.RED))

    def test_representable_limits(self):
        self.assertEqual(encode(0.1), (ColorBand.BROWN, ColorBand.BLACK, ColorBand.SILVER))
        self.assertEqual(encode(99e9), (ColorBand.WHITE, ColorBand.WHITE, ColorBand.WHITE))

    def test_unrepresentable_values_raise(self):
        with self.assertRaises(UnrepresentableValue):
            encode(0.05)
        with self.assertRaises(UnrepresentableValue):
            encode(1e11)

    def test_non_positive_raises(self):
        with self.assertRaises(NonPositiveInput):
            encode(0.0)
        with self.assertRaises(NonPositiveInput):
            encode(-100.0)

    def test_powers_of_ten_round_trip(self):
        for mult in ColorBand:
            with self.subTest(multiplier=mult.value):
                bands = (ColorBand.BROWN, ColorBand.BLACK, mult)
                self.assertEqual(encode(decode(*bands)), bands)

    def test_decode_then_encode(self):
        for bands in (("yellow", "violet", "orange"), ("gray", "red", "gold"),
                      ("white", "white", "blue"), ("red", "red", "silver")):
            expected = tuple(ColorBand.parse(b) for b in bands)
            self.assertEqual(encode(decode(*bands)), expected)


class TestColorHelpers(unittest.TestCase):

    def test_standard_color_code_snaps_first(self):
        npv, bands = standard_color_code(4600.0)
        self.assertEqual(npv, 4700.0)
        self.assertEqual(bands, (ColorBand.YELLOW, ColorBand.VIOLET, ColorBand.RED))

    def test_description(self):
        self.assertEqual(
            bands_to_description((ColorBand.BROWN, ColorBand.BLACK, ColorBand.RED)),
            "Brown-Black-Red (1 kΩ)",
        )

    def test_band_properties(self):
        self.assertEqual(ColorBand.VIOLET.digit, 7)
        self.assertIsNone(ColorBand.GOLD.digit)
        self.assertEqual(ColorBand.SILVER.exponent, -2)
        self.assertEqual(ColorBand.WHITE.exponent, 9)
        self.assertEqual(len(ColorBand), 12)


# ---------------------------------------------------------------------------
# Formulas
# ---------------------------------------------------------------------------

class TestFormulas(unittest.TestCase):

    def test_cutoff_frequency(self):
        self.assertAlmostEqual(cutoff_frequency(1000, 1e-6), 159.15494, places=4)

    def test_cutoff_frequency_factor(self):
        self.assertAlmostEqual(cutoff_frequency(1000, 1e-6, 2.0),
                               cutoff_frequency(1000, 1e-6) / 2)

    def test_cutoff_zero_raises_division_by_zero(self):
        with self.assertRaises(DivisionByZero):
            cutoff_frequency(0, 1e-6)
        with self.assertRaises(ZeroDivisionError):
            cutoff_frequency(1000, 0)

    def test_cutoff_negative_raises(self):
        with self.assertRaises(NonPositiveInput):
            cutoff_frequency(-1000, 1e-6)

    def test_required_resistance_and_capacitance(self):
        fc = cutoff_frequency(1000, 1e-6)
        self.assertAlmostEqual(required_resistance(1e-6, fc), 1000.0, places=6)
        self.assertAlmostEqual(required_capacitance(1000, fc), 1e-6, places=12)

    def test_inverting_gain_and_output(self):
        gain = inverting_gain(10000, 1000)
        self.assertEqual(gain, -10.0)
        v_out = output_voltage(gain, 0.5)
        self.assertEqual(v_out, -5.0)
        self.assertEqual(scale_for_display(v_out, Dimension.VOLTAGE), (-5.0, "V"))

    def test_non_inverting_gain(self):
        self.assertEqual(non_inverting_gain(9000, 1000), 10.0)

    def test_gain_zero_divisor_raises(self):
        with self.assertRaises(DivisionByZero):
            inverting_gain(1000, 0)
        with self.assertRaises(DivisionByZero):
            non_inverting_gain(1000, 0)

    def test_series_resistance(self):
        self.assertEqual(series_resistance([100.0, 220.0]), 320.0)

    def test_parallel_resistance(self):
        self.assertEqual(parallel_resistance([1000.0, 1000.0]), 500.0)
        self.assertAlmostEqual(parallel_resistance([100.0, 100.0, 100.0]), 100.0 / 3)

    def test_parallel_with_zero_raises(self):
        with self.assertRaises(DivisionByZero):
            parallel_resistance([100.0, 0.0])

    def test_parallel_empty_raises(self):
        with self.assertRaises(DivisionByZero):
            parallel_resistance([])

    def test_combine_networks(self):
        self.assertEqual(combine_networks(320.0, 500.0, in_series=True), 820.0)
        self.assertEqual(combine_networks(100.0, 100.0, in_series=False), 50.0)

    def test_sallen_key_component_value(self):
        self.assertAlmostEqual(sallen_key_component_value(1.586, 10000), 5860.0, places=6)

    def test_sallen_key_gain_not_above_one_raises(self):
        with self.assertRaises(InvalidGain):
            sallen_key_component_value(1.0, 10000)
        with self.assertRaises(InvalidGain):
            sallen_key_component_value(0.5, 10000)

    def test_sallen_key_rb_must_be_positive(self):
        with self.assertRaises(NonPositiveInput):
            sallen_key_component_value(1.586, 0)


# ---------------------------------------------------------------------------
# Sallen-Key filter design
# ---------------------------------------------------------------------------

class TestFilterDesign(unittest.TestCase):

    def test_filter_spec_pole_pairs(self):
        spec = filter_spec(Topology.BUTTERWORTH, 4, PassType.LOW)
        self.assertEqual(spec.pole_pairs, 2)
        self.assertEqual(spec.factor(2).gain, 2.325)

    def test_invalid_pole_count_raises(self):
        with self.assertRaises(InvalidPoleCount):
            filter_spec(Topology.BUTTERWORTH, 3, PassType.LOW)
        with self.assertRaises(InvalidPoleCount):
            filter_spec(Topology.CHEBYSHEV_2DB, 8, PassType.HIGH)

    def test_every_tabulated_gain_is_stable(self):
        for topology in Topology:
            for poles in (2, 4, 6):
                spec = filter_spec(topology, poles, PassType.LOW)
                self.assertEqual(spec.pole_pairs, poles // 2)
                for row in spec.pole_factors:
                    self.assertGreater(row.gain, 1.0)

    def test_butterworth_stage(self):
        spec = filter_spec(Topology.BUTTERWORTH, 4, PassType.LOW)
        stage = design_stage(spec, 2, 1000.0, 1e-6, 10000.0)
        self.assertEqual(stage.gain, 2.325)
        self.assertAlmostEqual(stage.ra, 10000.0 * 1.325, places=6)
        self.assertAlmostEqual(stage.cutoff, cutoff_frequency(1000.0, 1e-6))

    def test_chebyshev_stage_scales_r_and_c(self):
        spec = filter_spec(Topology.CHEBYSHEV_05DB, 2, PassType.LOW)
        stage = design_stage(spec, 1, 1000.0, 1e-6, 10000.0)
        expected = 1 / (1000.0 * 1.231 * 1e-6 * 0.812 * 2 * math.pi)
        self.assertAlmostEqual(stage.cutoff, expected, places=6)
        self.assertAlmostEqual(stage.cutoff, 159.2231, places=3)

    def test_chebyshev_cutoff_same_for_both_pass_types(self):
        low = filter_spec(Topology.CHEBYSHEV_2DB, 4, PassType.LOW)
        high = filter_spec(Topology.CHEBYSHEV_2DB, 4, PassType.HIGH)
        for pole_pair in (1, 2):
            self.assertAlmostEqual(
                design_stage(low, pole_pair, 4700.0, 1e-8, 10000.0).cutoff,
                design_stage(high, pole_pair, 4700.0, 1e-8, 10000.0).cutoff,
            )
        row = low.factor(1)
        self.assertAlmostEqual(
            design_stage(low, 1, 4700.0, 1e-8, 10000.0).cutoff,
            cutoff_frequency(4700.0 * row.low_factor, 1e-8 * row.high_factor),
        )

    def test_component_roles(self):
        low = design_stage(filter_spec(Topology.BUTTERWORTH, 2, PassType.LOW),
                           1, 1000.0, 1e-6, 10000.0)
        high = design_stage(filter_spec(Topology.BUTTERWORTH, 2, PassType.HIGH),
                            1, 1000.0, 1e-6, 10000.0)
        low_roles = dict(low.components)
        high_roles = dict(high.components)
        self.assertEqual([z for z, _ in low.components], ["Z1", "Z2", "Z3", "Z4"])
        self.assertEqual(low_roles["Z1"], ("R1", 1000.0))
        self.assertEqual(low_roles["Z4"], ("C2", 1e-6))
        self.assertEqual(high_roles["Z1"], ("C1", 1e-6))
        self.assertEqual(high_roles["Z3"], ("R1", 1000.0))

    def test_stage_is_hashable(self):
        spec = filter_spec(Topology.BUTTERWORTH, 2, PassType.HIGH)
        stage = design_stage(spec, 1, 1000.0, 1e-6, 10000.0)
        same = design_stage(spec, 1, 1000.0, 1e-6, 10000.0)
        self.assertEqual(hash(stage), hash(same))
        self.assertEqual(len({stage, same}), 1)

    def test_pole_pair_out_of_range_raises(self):
        spec = filter_spec(Topology.BUTTERWORTH, 4, PassType.LOW)
        with self.assertRaises(InvalidPolePair):
            design_stage(spec, 3, 1000.0, 1e-6, 10000.0)
        with self.assertRaises(CalcError):
            design_stage(spec, 0, 1000.0, 1e-6, 10000.0)


if __name__ == "__main__":
    unittest.main()

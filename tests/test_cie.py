# Copyright (c) 2026 Protabula
# SPDX-License-Identifier: MIT

"""Tests for XYZ, CIE Lab, CIE Luv and Hunter Lab conversions."""

import numpy as np
import pytest

from protabula.colormath.cie import (
    D50_WHITE,
    hex_to_hunter_lab,
    hex_to_lab,
    hex_to_lab_array,
    hex_to_luv,
    hex_to_xyz,
    srgb_to_lab,
    srgb_uint8_to_lab,
    xyz_to_lab,
)


class TestXYZ:

    def test_white_maps_to_d50(self):
        xyz = hex_to_xyz("#FFFFFF")
        assert xyz.x == pytest.approx(96.422, abs=0.02)
        assert xyz.y == pytest.approx(100.0, abs=0.02)
        assert xyz.z == pytest.approx(82.521, abs=0.02)

    def test_black_is_zero(self):
        assert hex_to_xyz("#000000").to_tuple() == (0.0, 0.0, 0.0)

    def test_three_decimals(self):
        xyz = hex_to_xyz("#FF5733")
        for value in xyz.to_tuple():
            assert round(value, 3) == value

    def test_luminance_matches_y_ordering(self):
        assert hex_to_xyz("#00FF00").y > hex_to_xyz("#FF0000").y > hex_to_xyz("#0000FF").y


class TestLab:

    def test_white(self):
        lab = hex_to_lab("#FFFFFF")
        assert lab.L == pytest.approx(100.0, abs=0.01)
        assert lab.a == pytest.approx(0.0, abs=0.05)
        assert lab.b == pytest.approx(0.0, abs=0.05)

    def test_black(self):
        assert hex_to_lab("#000000").to_tuple() == (0.0, 0.0, 0.0)

    def test_pure_red(self):
        lab = hex_to_lab("#FF0000")
        assert lab.L == pytest.approx(54.29, abs=0.1)
        assert lab.a == pytest.approx(80.81, abs=0.1)
        assert lab.b == pytest.approx(69.89, abs=0.1)

    def test_neutral_grays_have_no_chroma(self):
        for value in ("#333333", "#808080", "#CCCCCC"):
            assert hex_to_lab(value).chroma < 0.1

    def test_lightness_monotonic_on_grays(self):
        lightness = [hex_to_lab(f"#{v:02X}{v:02X}{v:02X}").L for v in range(0, 256, 15)]
        assert lightness == sorted(lightness)

    def test_reference_white_identity(self):
        lab = xyz_to_lab(D50_WHITE)
        np.testing.assert_allclose(lab, [100.0, 0.0, 0.0], atol=1e-9)

    def test_unrounded_array_close_to_rounded(self):
        arr = hex_to_lab_array("#FF5733")
        lab = hex_to_lab("#FF5733")
        np.testing.assert_allclose(arr, lab.to_tuple(), atol=5e-4)

    def test_uint8_batch_matches_scalar(self):
        pixels = np.array([[255, 0, 0], [0, 0, 255]], dtype=np.uint8)
        labs = srgb_uint8_to_lab(pixels)
        assert labs.shape == (2, 3)
        np.testing.assert_allclose(labs[0], hex_to_lab_array("#FF0000"))
        np.testing.assert_allclose(labs[1], hex_to_lab_array("#0000FF"))

    def test_batch_shape(self):
        srgb = np.random.RandomState(0).random((4, 5, 3))
        assert srgb_to_lab(srgb).shape == (4, 5, 3)


class TestLuvAndHunter:

    def test_luv_white(self):
        luv = hex_to_luv("#FFFFFF")
        assert luv.L == pytest.approx(100.0, abs=0.01)
        assert luv.u == pytest.approx(0.0, abs=0.05)
        assert luv.v == pytest.approx(0.0, abs=0.05)

    def test_luv_black_no_nan(self):
        assert hex_to_luv("#000000").to_tuple() == (0.0, 0.0, 0.0)

    def test_luv_red_positive_u(self):
        assert hex_to_luv("#FF0000").u > 0

    def test_hunter_white(self):
        hunter = hex_to_hunter_lab("#FFFFFF")
        assert hunter.L == pytest.approx(100.0, abs=0.01)
        assert hunter.a == pytest.approx(0.0, abs=0.05)
        assert hunter.b == pytest.approx(0.0, abs=0.05)

    def test_hunter_black_no_nan(self):
        assert hex_to_hunter_lab("#000000").to_tuple() == (0.0, 0.0, 0.0)

    def test_hunter_yellow_positive_b(self):
        assert hex_to_hunter_lab("#FFFF00").b > 0

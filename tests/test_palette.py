"""Tests for ansi_palette.core.palette — generation, packing and hex helpers."""

import itertools

import pytest
from ansi_palette.core.palette import (
    CUBE_LEVELS,
    EXTRAS,
    PALETTE_SIZE,
    generate_palette,
    grayscale_values,
    hex_to_rgb,
    is_hex_colour,
    nearest_colour,
    pack_rgb,
    rgb_distance,
    rgb_to_hex,
    unpack_rgb,
)

EXPECTED_GRAYS = [10, 20, 30, 40, 61, 71, 81, 91, 112, 122, 132, 142, 163, 173, 183, 193, 214, 224, 234, 244]


@pytest.fixture(scope='module')
def palette():
    return generate_palette()


class TestPackRgb:
    def test_pack(self):
        assert pack_rgb(0x12, 0x34, 0x56) == 0x123456

    def test_unpack(self):
        assert unpack_rgb(0xFF6B6B) == (255, 107, 107)

    def test_pack_masks_channels(self):
        assert pack_rgb(0x1FF, 0, 0) == 0xFF0000

    def test_round_trip_every_entry(self, palette):
        for colour in palette:
            assert pack_rgb(*unpack_rgb(colour)) == colour


class TestHex:
    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 107, 107)) == '#ff6b6b'

    def test_hex_to_rgb(self):
        assert hex_to_rgb('#2563eb') == (37, 99, 235)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash_uppercase(self):
        assert hex_to_rgb('FF0000') == (255, 0, 0)

    def test_invalid_hex_returns_black(self):
        assert hex_to_rgb('invalid') == (0, 0, 0)
        assert hex_to_rgb('#ff') == (0, 0, 0)
        assert hex_to_rgb('#ffffffff') == (0, 0, 0)

    def test_is_hex_colour(self):
        assert is_hex_colour('#abc')
        assert is_hex_colour('abcdef')
        assert not is_hex_colour('#abcd')
        assert not is_hex_colour('#gggggg')
        assert not is_hex_colour('')


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((10, 20, 30), (10, 20, 30)) == 0.0

    def test_single_channel(self):
        assert rgb_distance((0, 0, 0), (0, 0, 3)) == 3.0

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)


class TestCube:
    def test_size(self, palette):
        assert len(palette) == PALETTE_SIZE == 254

    def test_cube_span(self, palette):
        assert (palette.cube.start, palette.cube.stop) == (0, 216)

    def test_first_and_last(self, palette):
        assert palette[0] == 0x000000
        assert palette[215] == 0xFFFFFF

    def test_row_major_order(self, palette):
        for r_idx, g_idx, b_idx in itertools.product(range(6), repeat=3):
            expected = pack_rgb(CUBE_LEVELS[r_idx], CUBE_LEVELS[g_idx], CUBE_LEVELS[b_idx])
            assert palette[r_idx * 36 + g_idx * 6 + b_idx] == expected

    def test_every_combination_once(self, palette):
        cube = palette.colours[:216]
        assert len(set(cube)) == 216


class TestGrayscale:
    def test_skip_rule_matches_level_membership(self):
        kept = []
        for i in range(1, 25):
            v = (i * 255) // 25
            if v not in CUBE_LEVELS:
                kept.append(v)
        assert grayscale_values() == kept

    def test_first_step_is_kept(self):
        assert grayscale_values()[0] == 10

    def test_cube_levels_skipped(self):
        # i = 5, 10, 15, 20 land exactly on 0x33, 0x66, 0x99, 0xCC
        values = grayscale_values()
        for level in (0x33, 0x66, 0x99, 0xCC):
            assert level not in values

    def test_values(self):
        assert grayscale_values() == EXPECTED_GRAYS

    def test_entries_follow_cube(self, palette):
        assert (palette.grayscale.start, palette.grayscale.stop) == (216, 236)
        got = [unpack_rgb(palette[i]) for i in palette.grayscale.range]
        assert got == [(v, v, v) for v in EXPECTED_GRAYS]


class TestExtrasAndPadding:
    def test_extras_follow_grayscale(self, palette):
        assert palette.extras.start == palette.grayscale.stop
        assert tuple(palette[i] for i in palette.extras.range) == EXTRAS

    def test_extras_span(self, palette):
        assert (palette.extras.start, palette.extras.last) == (236, 249)

    def test_padding_is_black(self, palette):
        assert (palette.padding.start, palette.padding.stop) == (250, 254)
        assert all(palette[i] == 0 for i in palette.padding.range)

    def test_sections_tile_palette(self, palette):
        stops = [s.start for s in palette.sections] + [palette.padding.stop]
        assert stops == [0, 216, 236, 250, 254]

    def test_deterministic(self, palette):
        assert generate_palette() == palette

    def test_extras_truncated_when_palette_full(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr('ansi_palette.core.palette.PALETTE_SIZE', 240)
        short = generate_palette()
        assert len(short) == 240
        assert (short.extras.start, short.extras.stop) == (236, 240)
        assert tuple(short[i] for i in short.extras.range) == EXTRAS[:4]
        assert len(short.padding) == 0


class TestNearestColour:
    def test_exact_extra(self, palette):
        index, dist = nearest_colour((255, 107, 107), palette)
        assert index == 236
        assert dist == 0.0

    def test_near_extra(self, palette):
        index, dist = nearest_colour(hex_to_rgb('#ff6b6a'), palette)
        assert index == 236
        assert dist == 1.0

    def test_black_is_cube_not_padding(self, palette):
        index, dist = nearest_colour((0, 0, 0), palette)
        assert index == 0
        assert dist == 0.0

    def test_dark_gray(self, palette):
        index, _dist = nearest_colour((11, 11, 11), palette)
        assert index == 216

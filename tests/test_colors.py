"""Tests for author color derivation."""

from poemforms.colors import Color, derive_color, hash_seed


class TestHashSeed:
    def test_empty_seed(self):
        assert hash_seed("") == 0

    def test_rolling_recurrence(self):
        # h = ((0*31 + 97)*31 + 98)
        assert hash_seed("ab") == 97 * 31 + 98

    def test_wraps_at_32_bits(self):
        h = hash_seed("William Carlos Williams" * 4)
        assert 0 <= h < 2**32

    def test_matches_manual_fold(self):
        seed = "Emily Dickinson"
        h = 0
        for ch in seed:
            h = (h * 31 + ord(ch)) % 2**32
        assert hash_seed(seed) == h

    def test_astral_characters_hash_as_surrogates(self):
        # U+1F338 is the pair D83C DF38 in UTF-16
        assert hash_seed("\U0001F338") == (0xD83C * 31 + 0xDF38)


class TestDeriveColor:
    def test_deterministic(self):
        assert derive_color("Emily Dickinson") == derive_color("Emily Dickinson")

    def test_hue_from_hash(self):
        color = derive_color("Robert Frost")
        assert color.hue == hash_seed("Robert Frost") % 360
        assert 0 <= color.hue < 360

    def test_fixed_saturation_lightness(self):
        color = derive_color("anyone")
        assert color.saturation == 65
        assert color.lightness == 60

    def test_css(self):
        assert Color(hue=200).css == "hsl(200 65% 60%)"

    def test_rgb_red_hue(self):
        r, g, b = Color(hue=0).rgb
        assert r > g and r > b
        assert g == b

    def test_rgb_in_range(self):
        assert all(0 <= v <= 255 for v in derive_color("Percy Bysshe Shelley").rgb)

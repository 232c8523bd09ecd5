"""Tests for the UTF-8 / x-system / h-system converters."""

import pytest

from esperanto_text import (
    h_system_to_utf8,
    h_system_to_x_system,
    utf8_to_h_system,
    utf8_to_x_system,
    x_system_to_h_system,
    x_system_to_utf8,
)

SAMPLE_UTF8 = "eĥoŝanĝo ĉiuĵaŭde EĤOŜANĜO ĈIUĴAŬDE"
SAMPLE_X = "ehxosxangxo cxiujxauxde EHXOSXANGXO CXIUJXAUXDE"
SAMPLE_H = "ehhoshangho chiujhaude EHHOSHANGHO CHIUJHAUDE"
CAPITALS_UTF8 = "Ĉiuj estas belaj. Ĥ Ŝ Ĝ Ĉ Ĵ Ŭ ĤO ŜO ĜO ĈO ĴO ŬO"


class TestXSystem:
    """UTF-8 <-> x-system."""

    def test_to_utf8_noop(self, pangram: str) -> None:
        assert x_system_to_utf8(pangram) == pangram

    def test_from_utf8_noop(self, pangram: str) -> None:
        assert utf8_to_x_system(pangram) == pangram

    def test_empty(self) -> None:
        assert utf8_to_x_system("") == ""
        assert x_system_to_utf8("") == ""

    def test_to_utf8(self) -> None:
        assert x_system_to_utf8(SAMPLE_X) == SAMPLE_UTF8

    def test_to_utf8_mixed_case(self) -> None:
        """Either letter of the digraph being uppercase gives a capital."""
        source = "eHxoSxanGxo CxiuJxaUxde ehXosXangXo cXiujXauXde"
        expected = "eĤoŜanĜo ĈiuĴaŬde eĤoŜanĜo ĈiuĴaŬde"
        assert x_system_to_utf8(source) == expected

    def test_from_utf8(self) -> None:
        assert utf8_to_x_system(SAMPLE_UTF8) == SAMPLE_X

    def test_from_utf8_leading_capital(self) -> None:
        expected = "Cxiuj estas belaj. Hx Sx Gx Cx Jx Ux HXO SXO GXO CXO JXO UXO"
        assert utf8_to_x_system(CAPITALS_UTF8) == expected

    def test_capital_at_word_start(self) -> None:
        assert utf8_to_x_system("ĤO") == "HXO"
        assert utf8_to_x_system("Ĥo") == "Hxo"

    def test_capital_at_end_of_all_caps_word(self) -> None:
        assert utf8_to_x_system("ANTAŬ") == "ANTAUX"
        assert utf8_to_x_system("Antaŭ") == "Antaux"

    def test_adjacent_capitals(self) -> None:
        assert utf8_to_x_system("ĈĜ") == "CXGX"

    def test_text_around_letters_untouched(self) -> None:
        assert utf8_to_x_system("«ĉu?»\n\tĝi") == "«cxu?»\n\tgxi"

    @pytest.mark.parametrize(
        "text",
        [
            SAMPLE_UTF8,
            CAPITALS_UTF8,
            "Ŝi diris: «Ĉu vi ĵuras?» — ĜUSTE, ĉar ŭ-o estas aŭ ne.",
            "Eĥo",
            "",
        ],
    )
    def test_round_trip(self, text: str) -> None:
        assert x_system_to_utf8(utf8_to_x_system(text)) == text


class TestHSystem:
    """UTF-8 <-> h-system."""

    def test_to_utf8_noop(self, pangram: str) -> None:
        assert h_system_to_utf8(pangram) == pangram

    def test_from_utf8_noop(self, pangram: str) -> None:
        assert utf8_to_h_system(pangram) == pangram

    def test_to_utf8(self) -> None:
        assert h_system_to_utf8(SAMPLE_H) == SAMPLE_UTF8

    def test_to_utf8_mixed_case(self) -> None:
        source = "eHhoShanGho ChiuJhAUde ehHosHangHo cHiujHaUde"
        expected = "eĤoŜanĜo ĈiuĴAŬde eĤoŜanĜo ĈiuĴaŬde"
        assert h_system_to_utf8(source) == expected

    def test_from_utf8(self) -> None:
        assert utf8_to_h_system(SAMPLE_UTF8) == SAMPLE_H

    def test_from_utf8_leading_capital(self) -> None:
        """Ŭ has no suffix in the h-system, so it is always a bare "U"."""
        expected = "Chiuj estas belaj. Hh Sh Gh Ch Jh U HHO SHO GHO CHO JHO UO"
        assert utf8_to_h_system(CAPITALS_UTF8) == expected

    def test_ambiguous_h(self) -> None:
        source = "Chiuj estas senchavaj ideoj."
        assert h_system_to_utf8(source) == "Ĉiuj estas senchavaj ideoj."

    def test_ambiguous_u(self) -> None:
        source = "Hierau mi vizitis Nauron."
        assert h_system_to_utf8(source) == "Hieraŭ mi vizitis Nauron."

    def test_ambiguous_h_and_u(self) -> None:
        source = "Chiuj estas senchavaj kaj taugaj ideoj."
        expected = "Ĉiuj estas senchavaj kaj taŭgaj ideoj."
        assert h_system_to_utf8(source) == expected

    @pytest.mark.parametrize(
        "word",
        [
            "seshora",
            "SESHORA",
            "flughaveno",
            "Bushaltejo",
            "tobushaltejo",
            "kuracherbo",
            "gajhumora",
            "malgrandaursino",
            "unuaulo",
            "kakaujo",
            "Saudaarabujo",
        ],
    )
    def test_exception_fragments_unchanged(self, word: str) -> None:
        assert h_system_to_utf8(word) == word

    def test_digraphs_outside_fragments_still_convert(self) -> None:
        source = "La senchava shipo ne estas ashundo"
        assert h_system_to_utf8(source) == "La senchava ŝipo ne estas ashundo"

    def test_breve_u_round_trip(self) -> None:
        assert h_system_to_utf8(utf8_to_h_system("aŭto kaj ankaŭ")) == "aŭto kaj ankaŭ"

    def test_lossy_for_bare_u(self) -> None:
        """A ŭ not after "a" cannot be recovered from h-system text."""
        assert utf8_to_h_system("eŭro") == "euro"
        assert h_system_to_utf8("euro") == "euro"


class TestDerivedDirections:
    """x-system <-> h-system through UTF-8."""

    def test_x_to_h(self) -> None:
        assert x_system_to_h_system(SAMPLE_X) == SAMPLE_H

    def test_h_to_x(self) -> None:
        assert h_system_to_x_system(SAMPLE_H) == SAMPLE_X

    def test_h_to_x_keeps_exceptions(self) -> None:
        source = "Chiuj estas senchavaj kaj taugaj ideoj."
        expected = "Cxiuj estas senchavaj kaj tauxgaj ideoj."
        assert h_system_to_x_system(source) == expected

    def test_x_to_h_capitals(self) -> None:
        assert x_system_to_h_system("Cxu ANTAUX") == "Chu ANTAU"

"""Unit tests for theater chain color-coding."""

import pytest

from quickwatch.models import Theater
from quickwatch.utils.chains import DEFAULT_CHAIN_COLOR, chain_color


class TestChainColor:
    @pytest.mark.parametrize(
        ("chain", "expected"),
        [
            ("TOHOシネマズ", "red"),
            ("toho cinemas", "red"),
            ("ユナイテッド・シネマ", "orange"),
            ("United Cinemas", "orange"),
            ("109シネマズ", "yellow"),
            ("イオンシネマ", "pink"),
            ("AEON Cinema", "pink"),
            ("MOVIX", "blue"),
            ("ピカデリー", "blue"),
            ("Piccadilly", "blue"),
            ("ヒューマックスシネマズ", "green"),
            ("HUMAX", "green"),
        ],
    )
    def test_known_chains(self, chain: str, expected: str) -> None:
        assert chain_color(chain) == expected

    def test_unknown_chain_is_gray(self) -> None:
        assert chain_color("Independent Arthouse") == DEFAULT_CHAIN_COLOR == "gray"

    def test_empty_chain_is_gray(self) -> None:
        assert chain_color("") == "gray"
        assert chain_color(None) == "gray"

    def test_chain_embedded_in_longer_label(self) -> None:
        assert chain_color("TOHOシネマズ 新宿") == "red"

    def test_theater_exposes_chain_color(self) -> None:
        theater = Theater(
            id="aeon-itabashi",
            name="イオンシネマ 板橋",
            chain="イオンシネマ",
            address="",
            latitude=35.7707,
            longitude=139.6604,
        )
        assert theater.chain_color == "pink"

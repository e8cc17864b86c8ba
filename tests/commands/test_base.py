"""Tests for DconvCommand argument splitting."""

from __future__ import annotations

import click
import pytest

from dconv.cli import cli


def _split(args: list[str]) -> list[str]:
    with click.Context(cli) as ctx:
        return cli.split_positionals(ctx, args)


class TestSplitPositionals:
    def test_plain_positionals(self) -> None:
        assert _split(["now", "+10m"]) == ["--", "now", "+10m"]

    @pytest.mark.parametrize("operation", ["-3h", "-30s", "-1v", "-1q", "--5h"])
    def test_hyphen_led_operation_is_positional(self, operation: str) -> None:
        assert _split(["now", operation]) == ["--", "now", operation]

    def test_negative_timestamp_is_positional(self) -> None:
        assert _split(["-100000000", "+5m"]) == ["--", "-100000000", "+5m"]

    def test_declared_flags_move_ahead(self) -> None:
        assert _split(["now", "-v", "-3h", "--json"]) == ["-v", "--json", "--", "now", "-3h"]

    def test_flag_cluster(self) -> None:
        assert _split(["-qv", "now"]) == ["-qv", "--", "now"]

    def test_option_value_starting_with_hyphen(self) -> None:
        assert _split(["--utc-offset", "-05:00", "now", "-1d"]) == [
            "--utc-offset",
            "-05:00",
            "--",
            "now",
            "-1d",
        ]

    def test_option_value_with_equals(self) -> None:
        assert _split(["--utc-offset=-05:00", "now"]) == ["--utc-offset=-05:00", "--", "now"]

    def test_explicit_separator(self) -> None:
        assert _split(["-v", "--", "now", "-q"]) == ["-v", "--", "now", "-q"]

    def test_unknown_long_option_is_positional(self) -> None:
        assert _split(["now", "--bogus"]) == ["--", "now", "--bogus"]

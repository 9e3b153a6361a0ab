"""Tests for scrape_scripts.helpers module."""

import pytest

from scrape_scripts.errors import MalformedLineError
from scrape_scripts.helpers import (
    artifact_key,
    format_title_for_url,
    parse_scrape_scripts_args,
    parse_work_item,
)


class TestParseWorkItem:
    def test_three_fields(self) -> None:
        item = parse_work_item("The Matrix, R, ignored")
        assert item.title == "The Matrix"
        assert item.content_rating == "R"
        assert item.raw_line == "The Matrix, R, ignored"

    def test_two_fields_is_malformed(self) -> None:
        with pytest.raises(MalformedLineError):
            parse_work_item("only,two")

    def test_four_fields_is_malformed(self) -> None:
        with pytest.raises(MalformedLineError):
            parse_work_item("Crouching Tiger, Hidden Dragon,PG-13,x")

    def test_malformed_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_work_item("no commas")


class TestTitleFormatting:
    def test_url_title_keeps_case(self) -> None:
        assert format_title_for_url("Star Wars A New Hope") == "Star_Wars_A_New_Hope"

    def test_artifact_key_lowercases(self) -> None:
        assert artifact_key("The Matrix") == "the_matrix"

    def test_artifact_key_keeps_punctuation(self) -> None:
        assert artifact_key("Ocean's Eleven") == "ocean's_eleven"


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_scrape_scripts_args([])
        assert args.config is None
        assert args.input is None
        assert args.workers is None
        assert args.output_dir is None
        assert args.timeout is None
        assert args.verbose is False

    def test_overrides(self) -> None:
        args = parse_scrape_scripts_args(
            ["--workers", "8", "--output-dir", "out", "--timeout", "2.5", "--config", "local"]
        )
        assert args.workers == 8
        assert args.output_dir == "out"
        assert args.timeout == 2.5
        assert args.config == "local"

    def test_zero_workers_rejected(self) -> None:
        with pytest.raises(SystemExit):
            parse_scrape_scripts_args(["--workers", "0"])

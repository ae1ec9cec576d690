"""
Integration tests for the build controller (parse -> search -> write).
"""

import logging
from pathlib import Path

import pytest

from slideshow_toolkit.builder import (
    BuildError,
    OrderingStrategy,
    SearchConfig,
    build_slideshow,
)
from slideshow_toolkit.builder.controller import BuildResult


class TestBuildSlideshow:
    """Tests for build_slideshow."""

    def test_build_when_valid_input_then_writes_slideshow(self, sample_input, tmp_path):
        # Arrange
        output = tmp_path / "out" / "slideshow.txt"

        # Act
        result = build_slideshow(sample_input, output, SearchConfig(iterations=5))

        # Assert
        assert isinstance(result, BuildResult)
        assert result.output_path == output
        assert result.photo_count == 4
        assert result.slide_count == 3
        lines = output.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "3"
        assert sorted(lines[1:]) == sorted(
            " ".join(map(str, s.photo_indices)) for s in result.slideshow
        )
        assert result.total_score == result.slideshow.total_score

    def test_build_when_only_unpaired_vertical_then_writes_empty_output(self, tmp_path):
        source = tmp_path / "in.txt"
        source.write_text("1\nV 1 x\n", encoding="utf-8")
        output = tmp_path / "out.txt"

        result = build_slideshow(source, output, SearchConfig(iterations=2))

        assert result.slideshow is None
        assert result.slide_count == 0
        assert result.total_score == 0
        assert output.read_text(encoding="utf-8") == "0\n"

    def test_build_when_missing_input_then_raises_build_error(self, tmp_path):
        with pytest.raises(BuildError, match="Failed to parse photos"):
            build_slideshow(tmp_path / "nope.txt", tmp_path / "out.txt")

    def test_build_when_malformed_input_then_no_output_written(self, tmp_path):
        """Parse failures abort before anything is written."""
        source = tmp_path / "in.txt"
        source.write_text("2\nH 2 a b\nX 1 c\n", encoding="utf-8")
        output = tmp_path / "out.txt"

        with pytest.raises(BuildError) as excinfo:
            build_slideshow(source, output)

        assert excinfo.value.__cause__ is not None
        assert not output.exists()

    def test_build_when_exhaustive_pool_too_large_then_raises_build_error(
        self, tmp_path
    ):
        source = tmp_path / "in.txt"
        source.write_text(
            "4\n" + "".join(f"H 1 t{i}\n" for i in range(4)), encoding="utf-8"
        )
        config = SearchConfig(
            iterations=1,
            ordering_strategy=OrderingStrategy.EXHAUSTIVE,
            max_exhaustive_slides=3,
        )

        with pytest.raises(BuildError, match="Search failed"):
            build_slideshow(source, tmp_path / "out.txt", config)

    def test_build_when_complete_then_logs_summary(self, sample_input, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="slideshow_toolkit"):
            build_slideshow(sample_input, tmp_path / "out.txt", SearchConfig(iterations=2))

        assert "Build complete" in caplog.text

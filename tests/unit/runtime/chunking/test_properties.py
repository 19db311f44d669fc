"""Property tests tying the planner, executor and estimator together.

Lengths are drawn from a seeded random generator so failures reproduce.
"""

from __future__ import annotations

import random

import pytest

from yuque.docs.core.exceptions import ChunkIndexError, InvalidChunkConfigError
from yuque.docs.runtime.chunking import (
    ChunkPolicy,
    WindowPlanner,
    estimate,
    estimate_chunk_count,
    get_chunk,
    serialize,
    split,
)

SEED = 20240601

SIZE_GRID = [(400, 200), (1000, 200), (257, 13), (50, 0), (201, 200)]


def _random_lengths(count: int, upper: int, seed: int = SEED) -> list[int]:
    rng = random.Random(seed)
    return [rng.randint(1, upper) for _ in range(count)]


class TestSizeThreshold:
    """Records that fit produce one chunk from both components."""

    @pytest.mark.parametrize("chunk_size,overlap_size", SIZE_GRID)
    def test_fits_means_single_chunk(self, record_of_length, chunk_size, overlap_size):
        record = record_of_length(chunk_size)

        chunks = split(record, chunk_size, overlap_size=overlap_size)

        assert len(chunks) == 1
        assert estimate(chunk_size, chunk_size, overlap_size).total_chunks == 1

    def test_identity_for_records_that_fit(self, sample_doc):
        """Test an unsplit record comes back unmodified."""
        chunk = split(sample_doc)[0]

        assert chunk.to_payload() is sample_doc
        assert chunk.text_content == serialize(sample_doc)


class TestEstimatorChunkerAgreement:
    """Estimator count and offsets match what the executor produces."""

    @pytest.mark.parametrize("chunk_size,overlap_size", SIZE_GRID)
    def test_agreement_on_real_records(self, record_of_length, chunk_size, overlap_size):
        for total_length in _random_lengths(25, 5_000):
            total_length = max(total_length, 60)
            record = record_of_length(total_length)

            chunks = split(record, chunk_size, overlap_size=overlap_size)
            result = estimate(total_length, chunk_size, overlap_size)

            assert result.total_chunks == len(chunks)
            assert [(c.approximate_start, c.approximate_end) for c in result.chunks] == [
                (c.start, c.end) for c in chunks
            ]

    def test_termination_and_count_up_to_ten_million(self):
        """Test planning terminates and matches the closed form for large texts."""
        policy = ChunkPolicy(chunk_size=1000, overlap_size=200)
        planner = WindowPlanner(policy)

        for total_length in _random_lengths(40, 10_000_000):
            windows = planner.plan(total_length)
            expected = 1 if total_length <= 1000 else -(-(total_length - 200) // 800)

            assert len(windows) == expected == estimate_chunk_count(total_length, policy)
            assert windows[-1].end == total_length

    @pytest.mark.parametrize("total_length", [1, 2, 999, 1000, 1001, 1800, 1801, 10_000_000])
    def test_count_at_edges(self, total_length):
        policy = ChunkPolicy(chunk_size=1000, overlap_size=200)
        windows = WindowPlanner(policy).plan(total_length)
        assert len(windows) == estimate_chunk_count(total_length, policy)


class TestCoverageAndOverlap:
    """Chunks reconstruct the text and share exactly the overlap."""

    @pytest.mark.parametrize("chunk_size,overlap_size", SIZE_GRID)
    def test_coverage(self, record_of_length, chunk_size, overlap_size):
        for total_length in _random_lengths(15, 3_000, seed=SEED + 1):
            record = record_of_length(max(total_length, 60))
            text = serialize(record)

            chunks = split(record, chunk_size, overlap_size=overlap_size)
            rebuilt = chunks[0].text_content + "".join(
                c.text_content[overlap_size:] for c in chunks[1:]
            )

            assert rebuilt == text

    @pytest.mark.parametrize("chunk_size,overlap_size", SIZE_GRID)
    def test_overlap(self, record_of_length, chunk_size, overlap_size):
        record = record_of_length(2_500)

        chunks = split(record, chunk_size, overlap_size=overlap_size)

        for previous, current in zip(chunks, chunks[1:]):
            assert current.start == previous.end - overlap_size
            if overlap_size:
                assert previous.text_content[-overlap_size:] == current.text_content[:overlap_size]


class TestScenarios:
    """Fixed scenarios."""

    def test_boundary_scenario(self, record_of_length):
        """Test 1000 characters at chunk size 400 and overlap 200."""
        record = record_of_length(1000)
        expected = [(0, 400), (200, 600), (400, 800), (600, 1000)]

        chunks = split(record, 400, overlap_size=200)
        result = estimate(1000, 400, 200)

        assert [(c.start, c.end) for c in chunks] == expected
        assert [(c.approximate_start, c.approximate_end) for c in result.chunks] == expected
        assert result.total_chunks == len(chunks) == 4

    def test_invalid_configuration(self, record_of_length):
        """Test chunk size below overlap is rejected by both components."""
        with pytest.raises(InvalidChunkConfigError):
            estimate(1000, 100, 200)
        with pytest.raises(InvalidChunkConfigError):
            split(record_of_length(1000), 100, overlap_size=200)

    def test_out_of_range_index(self, record_of_length):
        """Test a three-chunk document rejects index 5 and defaults to chunk 0."""
        record = record_of_length(700)

        with pytest.raises(ChunkIndexError) as exc_info:
            get_chunk(record, 400, 5)
        first = get_chunk(record, 400)

        assert "Valid range is 0-2" in str(exc_info.value)
        assert first.index == 0
        assert first.total_chunks == 3

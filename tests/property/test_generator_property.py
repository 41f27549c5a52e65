import random

from hypothesis import given, settings
from hypothesis import strategies as st

from builder_spoof.data import makers
from builder_spoof.data.util import bounded_array, numeric_string
from builder_spoof.models.entities import Platform
from tests.support.snapshot_helpers import FIXED_NOW, build_snapshot


@given(st.integers(min_value=0), st.integers(min_value=1, max_value=200))
def test_numeric_string_has_exact_length(seed: int, length: int) -> None:
    value = numeric_string(random.Random(seed), length)
    assert len(value) == length
    assert set(value) <= set("0123456789")


@given(
    st.integers(min_value=0),
    st.integers(min_value=0, max_value=50),
    st.integers(min_value=0, max_value=50),
)
def test_bounded_array_length_within_bounds(seed: int, low: int, extra: int) -> None:
    high = low + extra
    items = bounded_array(random.Random(seed), lambda index: index, low, high)
    assert low <= len(items) <= high
    assert items == list(range(len(items)))


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=0))
def test_job_timestamps_are_ordered(seed: int) -> None:
    ctx = makers.GenerationContext(fake=makers.seeded_faker(seed), now=FIXED_NOW)
    job = makers.make_job(ctx, "pkg", "core", "1")
    assert job.created_at <= job.build_started_at <= job.build_finished_at <= FIXED_NOW


@settings(max_examples=30, deadline=None)
@given(st.integers(min_value=0))
def test_version_platforms_are_a_non_empty_subset(seed: int) -> None:
    ctx = makers.GenerationContext(fake=makers.seeded_faker(seed), now=FIXED_NOW)
    version = makers.make_version(ctx, "pkg", "core", True)
    assert version.platforms
    assert set(version.platforms) <= {Platform.X86_64_LINUX, Platform.X86_64_WINDOWS}
    assert len(set(version.platforms)) == len(version.platforms)


@settings(max_examples=15, deadline=None)
@given(st.integers(min_value=0, max_value=10_000))
def test_snapshot_invariants(seed: int) -> None:
    snapshot = build_snapshot(seed)
    assert snapshot.user.created_at <= snapshot.user.updated_at
    assert len(snapshot.origins) == 2
    assert len({origin.name for origin in snapshot.origins}) == 2
    for origin in snapshot.origins:
        assert origin.created_at <= origin.updated_at
        bundles = snapshot.projects[origin.name]
        assert len(bundles) == origin.package_count
        for bundle in bundles.values():
            assert bundle.root.origin == origin.name
            assert bundle.root.created_at <= bundle.root.updated_at
            for job in bundle.jobs:
                assert job.created_at <= job.build_started_at <= job.build_finished_at
            for version in bundle.versions:
                assert version.release_count >= 1
                assert version.platforms

"""Unit tests for trace building and error classification."""

from __future__ import annotations

import pytest

from mp_errlog.kernel.errors import (
    BaseError,
    BucketExists,
    BucketNameInvalid,
    BucketNotEmpty,
    BucketNotFound,
    BucketPolicyNotFound,
    InvalidUploadID,
    NotFoundError,
    ObjectExistsAsDirectory,
    ObjectNameInvalid,
    ObjectNotFound,
    StorageFull,
    wrap,
)
from mp_errlog.observability.logging.classifier import IGNORABLE_ERRORS, is_ignorable
from mp_errlog.observability.logging.frames import RawFrame, StackFrameEnumerator
from mp_errlog.observability.logging.paths import PathNormalizer
from mp_errlog.observability.logging.trace import TraceBuilder
from mp_errlog.testing import FakeFrameEnumerator

STACK = [
    RawFrame("/srv/app/src/mp_errlog/observability/logging/trace.py", 40,
             "mp_errlog.observability.logging.trace", "TraceBuilder.build"),
    RawFrame("/srv/app/src/cmd/server.py", 12, "cmd.server", "Server.make_bucket"),
    RawFrame("<frozen importlib._bootstrap>", 241, "importlib._bootstrap",
             "_call_with_frames_removed"),
    RawFrame("/usr/lib/python3.12/threading.py", 1010, "threading", "Thread.run"),
    RawFrame("/srv/app/src/cmd/main.py", 7, "cmd.main", "main"),
    RawFrame("/usr/lib/python3.12/runpy.py", 88, "runpy", "_run_code"),
    RawFrame("<string>", 1, "__main__", "<module>"),
]


def _builder(frames: list[RawFrame]) -> TraceBuilder:
    normalizer = PathNormalizer(["/usr/lib/python3.12/", "/srv/app/src/"])
    return TraceBuilder(FakeFrameEnumerator(frames), normalizer)


# ---------------------------------------------------------------------------
# TraceBuilder
# ---------------------------------------------------------------------------


class TestTraceBuilder:
    def test_renders_file_line_function(self) -> None:
        trace = _builder(STACK).build(1)
        assert trace[0] == "cmd/server.py:12:server.Server.make_bucket()"

    def test_drops_synthetic_and_runtime_frames(self) -> None:
        trace = _builder(STACK).build(1)
        assert trace == [
            "cmd/server.py:12:server.Server.make_bucket()",
            "cmd/main.py:7:main.main()",
        ]

    def test_skip_excludes_innermost(self) -> None:
        trace = _builder(STACK).build(0)
        assert trace[0].startswith("mp_errlog/observability/logging/trace.py:40:")
        assert len(trace) == 3

    def test_innermost_first(self) -> None:
        frames = [RawFrame(f"/srv/app/src/m{i}.py", i + 1, f"m{i}", "f") for i in range(5)]
        trace = _builder(frames).build(0)
        assert trace == [f"m{i}.py:{i + 1}:m{i}.f()" for i in range(5)]

    def test_empty_stack(self) -> None:
        assert _builder([]).build(0) == []

    def test_custom_runtime_prefixes(self) -> None:
        builder = TraceBuilder(
            FakeFrameEnumerator(STACK),
            PathNormalizer(["/srv/app/src/"]),
            runtime_prefixes=("cmd.main.",),
        )
        assert builder.build(1) == [
            "cmd/server.py:12:server.Server.make_bucket()",
            "/usr/lib/python3.12/threading.py:1010:threading.Thread.run()",
            "/usr/lib/python3.12/runpy.py:88:runpy._run_code()",
        ]

    def test_each_build_walks_the_stack_again(self) -> None:
        fake = FakeFrameEnumerator(STACK)
        builder = TraceBuilder(fake, PathNormalizer([]))
        builder.build(1)
        builder.build(2)
        assert fake.calls == [1, 2]

    def test_live_stack_starts_at_requested_depth(self) -> None:
        builder = TraceBuilder(StackFrameEnumerator(), PathNormalizer([]))
        trace = builder.build(1)
        module = __name__.rpartition(".")[2]
        assert trace[0].endswith(
            f":{module}.TestTraceBuilder.test_live_stack_starts_at_requested_depth()"
        )


# ---------------------------------------------------------------------------
# is_ignorable
# ---------------------------------------------------------------------------

IGNORABLE = [
    BucketNotFound("b"),
    BucketNotEmpty("b"),
    BucketExists("b"),
    ObjectNotFound("b", "o"),
    ObjectExistsAsDirectory("b", "o"),
    BucketPolicyNotFound("b"),
    InvalidUploadID("u"),
]


class TestIsIgnorable:
    @pytest.mark.parametrize("err", IGNORABLE, ids=lambda e: type(e).__name__)
    def test_allow_listed(self, err: BaseError) -> None:
        assert is_ignorable(err)

    @pytest.mark.parametrize("err", IGNORABLE, ids=lambda e: type(e).__name__)
    def test_allow_listed_when_wrapped(self, err: BaseError) -> None:
        assert is_ignorable(wrap(wrap(err, "inner"), "outer"))

    @pytest.mark.parametrize(
        "err",
        [
            StorageFull(),
            BucketNameInvalid("B!"),
            ObjectNameInvalid("b", ""),
            NotFoundError("Order", 1),
            ValueError("bad"),
            OSError(28, "No space left on device"),
        ],
        ids=lambda e: type(e).__name__,
    )
    def test_other_errors_are_logged(self, err: BaseException) -> None:
        assert not is_ignorable(err)

    def test_wrapper_of_loggable_error(self) -> None:
        assert not is_ignorable(wrap(StorageFull(), "put object"))

    def test_only_root_cause_counts(self) -> None:
        err = StorageFull(cause=ValueError("x"))
        outer = BucketNotFound("b", cause=err)
        assert not is_ignorable(outer)

    def test_allow_list_matches_exported_tuple(self) -> None:
        assert {type(e) for e in IGNORABLE} == set(IGNORABLE_ERRORS)

    def test_does_not_mutate(self) -> None:
        inner = BucketNotFound("b")
        outer = wrap(inner, "lookup")
        is_ignorable(outer)
        assert outer.__cause__ is inner
        assert str(outer) == "lookup: Bucket not found: b"

"""Unit tests for stack frame enumeration and path normalisation."""

from __future__ import annotations

import os
import sysconfig

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mp_errlog.observability.logging import paths as paths_module
from mp_errlog.observability.logging.frames import RawFrame, StackFrameEnumerator
from mp_errlog.observability.logging.paths import PathNormalizer, default_trim_prefixes
from mp_errlog.testing import FakeFrameEnumerator


def _capture(skip: int) -> list[RawFrame]:
    return list(StackFrameEnumerator().frames(skip))


def _outer(skip: int) -> list[RawFrame]:
    return _capture(skip)


# ---------------------------------------------------------------------------
# RawFrame
# ---------------------------------------------------------------------------


class TestRawFrame:
    def test_function_is_module_qualified(self) -> None:
        frame = RawFrame("/srv/app/cmd/server.py", 3, "cmd.server", "Server.handle")
        assert frame.function == "cmd.server.Server.handle"

    def test_short_function_keeps_last_module_segment(self) -> None:
        frame = RawFrame("/srv/app/cmd/server.py", 3, "cmd.server", "Server.handle")
        assert frame.short_function == "server.Server.handle"

    def test_without_module(self) -> None:
        frame = RawFrame("x.py", 1, "", "main")
        assert frame.function == frame.short_function == "main"


# ---------------------------------------------------------------------------
# StackFrameEnumerator
# ---------------------------------------------------------------------------


class TestStackFrameEnumerator:
    def test_skip_zero_starts_at_caller_of_frames(self) -> None:
        frames = _outer(0)
        assert frames[0].qualname == "_capture"
        assert frames[1].qualname == "_outer"
        assert frames[2].qualname == (
            "TestStackFrameEnumerator.test_skip_zero_starts_at_caller_of_frames"
        )

    def test_skip_drops_innermost_frames(self) -> None:
        frames = _outer(1)
        assert frames[0].qualname == "_outer"
        assert all(f.qualname != "_capture" for f in frames)

    def test_frames_carry_file_line_and_module(self) -> None:
        frame = _outer(0)[0]
        assert frame.file == _capture.__code__.co_filename
        assert frame.line >= 1
        assert frame.module == __name__

    def test_is_lazy_iterator(self) -> None:
        frames = StackFrameEnumerator().frames()
        assert iter(frames) is frames
        assert next(frames).qualname == "TestStackFrameEnumerator.test_is_lazy_iterator"

    def test_skip_past_stack_depth_is_empty(self) -> None:
        assert _capture(100_000) == []

    def test_negative_skip_rejected(self) -> None:
        with pytest.raises(ValueError):
            StackFrameEnumerator().frames(-1)


class TestFakeFrameEnumerator:
    def test_honours_skip(self) -> None:
        frames = [RawFrame(f"f{i}.py", i + 1, "m", f"fn{i}") for i in range(4)]
        fake = FakeFrameEnumerator(frames)
        assert list(fake.frames(2)) == frames[2:]
        assert fake.calls == [2]


# ---------------------------------------------------------------------------
# PathNormalizer
# ---------------------------------------------------------------------------


class TestPathNormalizer:
    def test_strips_matching_prefix(self) -> None:
        n = PathNormalizer(["/usr/lib/python3.12/"])
        assert n.normalize("/usr/lib/python3.12/json/decoder.py") == "json/decoder.py"

    def test_unmatched_path_passes_through(self) -> None:
        n = PathNormalizer(["/usr/lib/python3.12/"])
        assert n.normalize("/srv/app/main.py") == "/srv/app/main.py"

    def test_prefix_must_match_at_start(self) -> None:
        n = PathNormalizer(["/srv/app/"])
        assert n.normalize("/opt/srv/app/main.py") == "/opt/srv/app/main.py"

    def test_later_prefix_applies_after_broader_root(self) -> None:
        n = PathNormalizer(["/usr/local/lib/python3.12/", "site-packages/"])
        path = "/usr/local/lib/python3.12/site-packages/mp_errlog/logger.py"
        assert n.normalize(path) == "mp_errlog/logger.py"

    def test_empty_prefixes_ignored(self) -> None:
        n = PathNormalizer(["", "/srv/"])
        assert n.prefixes == ("/srv/",)

    def test_separator_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(os, "sep", "\\")
        n = PathNormalizer(["C:\\Python312\\Lib\\"])
        mixed = n.normalize("C:/Python312/Lib/json/decoder.py")
        native = n.normalize("C:\\Python312\\Lib\\json\\decoder.py")
        monkeypatch.undo()
        assert mixed == "json\\decoder.py"
        assert native == "json\\decoder.py"

    @given(
        root=st.sampled_from(["/usr/lib/python3.12/", "/srv/app/src/", "/opt/mp/"]),
        segments=st.lists(
            st.text(alphabet="abcdefghijklmnopqrstuvwxyz_.", min_size=1, max_size=8),
            min_size=1,
            max_size=5,
        ),
    )
    def test_idempotent(self, root: str, segments: list[str]) -> None:
        n = PathNormalizer(["/usr/lib/python3.12/", "/srv/app/src/", "/opt/mp/"])
        once = n.normalize(root + "/".join(segments))
        assert n.normalize(once) == once


class TestDefaultTrimPrefixes:
    def test_order_stdlib_then_search_path(self) -> None:
        environ = {"PYTHONPATH": os.pathsep.join(["/opt/a", "", "/opt/b"])}
        prefixes = default_trim_prefixes(environ)
        assert prefixes[0] == os.path.join(sysconfig.get_paths()["stdlib"], "")
        assert prefixes[1:3] == (os.path.join("/opt/a", ""), os.path.join("/opt/b", ""))

    def test_every_prefix_ends_with_separator(self) -> None:
        for prefix in default_trim_prefixes({"PYTHONPATH": "/opt/a"}):
            assert prefix.endswith(os.sep)

    def test_own_sources_become_import_relative(self) -> None:
        n = PathNormalizer(default_trim_prefixes({}))
        expected = os.path.join("mp_errlog", "observability", "logging", "paths.py")
        assert n.normalize(paths_module.__file__) == expected

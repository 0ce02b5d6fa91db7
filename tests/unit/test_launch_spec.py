# tests/unit/test_launch_spec.py

"""Unit tests for LaunchSpec and CapturedOutput values."""

from pathlib import Path

import attrs
import pytest

from gcharness.process import CapturedOutput, LaunchSpec


class TestLaunchSpec:
    """Construction and immutability of launch specs."""

    def test_build_orders_arguments(self) -> None:
        spec = LaunchSpec.build(
            "java",
            ["-Xmx128m", "-Xlog:gc"],
            entry_point="TestExplicitGC",
            program_args=["test"],
        )
        assert spec.args == ("java", "-Xmx128m", "-Xlog:gc", "TestExplicitGC", "test")
        assert spec.executable == "java"

    def test_build_without_entry_point(self) -> None:
        spec = LaunchSpec.build("echo", program_args=["hello"])
        assert spec.args == ("echo", "hello")

    def test_args_are_copied_into_a_tuple(self) -> None:
        flags = ["-Xlog:gc"]
        spec = LaunchSpec.build("java", flags)
        flags.append("-XX:+DisableExplicitGC")
        assert spec.args == ("java", "-Xlog:gc")

    def test_spec_is_frozen(self) -> None:
        spec = LaunchSpec(args=["java"])
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            spec.args = ("other",)  # type: ignore[misc]

    @pytest.mark.parametrize("args", [[], [""]])
    def test_empty_vector_rejected(self, args: list[str]) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            LaunchSpec(args=args)

    def test_command_line_is_quoted_for_display(self) -> None:
        spec = LaunchSpec(args=["java", "-Dname=two words"])
        assert spec.command_line == "java '-Dname=two words'"

    def test_env_overrides_merge_over_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GCHARNESS_TEST_INHERITED", "yes")
        spec = LaunchSpec(args=["java"], env={"JAVA_TOOL_OPTIONS": "-Xint"})
        env = spec.resolved_env()
        assert env["JAVA_TOOL_OPTIONS"] == "-Xint"
        assert env["GCHARNESS_TEST_INHERITED"] == "yes"

    def test_no_env_inherits_parent(self) -> None:
        assert LaunchSpec(args=["java"]).resolved_env() is None

    def test_env_mapping_is_read_only(self) -> None:
        spec = LaunchSpec(args=["java"], env={"A": "1"})
        with pytest.raises(TypeError):
            spec.env["A"] = "2"  # type: ignore[index]

    def test_env_takes_part_in_equality(self) -> None:
        assert LaunchSpec(args=["java"], env={"A": "1"}) != LaunchSpec(args=["java"], env={"A": "2"})
        assert LaunchSpec(args=["java"], env={"A": "1"}) == LaunchSpec(args=["java"], env={"A": "1"})
        assert LaunchSpec(args=["java"], env={"A": "1"}) != LaunchSpec(args=["java"])

    def test_spec_with_env_is_hashable(self) -> None:
        specs = {LaunchSpec(args=["java"], env={"A": "1"}), LaunchSpec(args=["java"], env={"A": "1"})}
        assert len(specs) == 1

    def test_cwd_is_kept(self, tmp_path: Path) -> None:
        spec = LaunchSpec.build("java", cwd=tmp_path)
        assert spec.cwd == tmp_path


class TestCapturedOutput:
    """Stream selection and diagnostics on captured output."""

    def test_text_selects_stream(self) -> None:
        captured = CapturedOutput(stdout="out\n", stderr="err\n", exit_code=0)
        assert captured.text("stdout") == "out\n"
        assert captured.text("stderr") == "err\n"
        assert captured.text("both") == "out\nerr\n"
        assert captured.output == "out\nerr\n"

    def test_unknown_stream_rejected(self) -> None:
        with pytest.raises(ValueError):
            CapturedOutput(stdout="", stderr="", exit_code=0).text("stdin")

    def test_dump_includes_everything(self) -> None:
        captured = CapturedOutput(
            stdout="Pause Full",
            stderr="warning",
            exit_code=3,
            launch_spec=LaunchSpec(args=["java", "-Xlog:gc"]),
            complete=False,
        )
        dump = captured.dump()
        assert "Command: java -Xlog:gc" in dump
        assert "Exit code: 3" in dump
        assert "Pause Full" in dump
        assert "warning" in dump
        assert "(capture incomplete)" in dump

import logging

import pytest

from grepx.cli import Args, LogLevel, OutputFormat, parse_args


def test_defaults():
    args = parse_args(["needle"])
    assert args == Args(pattern="needle")
    assert args.path == ["."]
    assert args.threads == 0
    assert args.chunk_size == 64
    assert args.format is OutputFormat.TEXT
    assert args.log_level is LogLevel.INFO
    assert not (args.recursive or args.case_sensitive or args.line_numbers)
    assert not (args.files_with_matches or args.count or args.progress)


def test_all_options():
    args = parse_args(
        [
            "-r", "-s", "-n", "-l", "-c", "-p",
            "-t", "4", "--chunk-size", "128",
            "-f", "json", "--log-level", "debug",
            "pat", "a", "b",
        ]
    )
    assert args == Args(
        pattern="pat",
        path=["a", "b"],
        threads=4,
        recursive=True,
        case_sensitive=True,
        line_numbers=True,
        files_with_matches=True,
        count=True,
        progress=True,
        chunk_size=128,
        format=OutputFormat.JSON,
        log_level=LogLevel.DEBUG,
    )


def test_long_options_and_intermixed_positionals():
    args = parse_args(["pat", "--recursive", "dir", "--format", "grep", "--threads", "2"])
    assert args.pattern == "pat"
    assert args.path == ["dir"]
    assert args.recursive
    assert args.format is OutputFormat.GREP
    assert args.threads == 2


def test_missing_pattern_exits():
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == 2


@pytest.mark.parametrize(
    "extra", [["-f", "xml"], ["--log-level", "loud"], ["-t", "-1"], ["--chunk-size", "big"]]
)
def test_invalid_values_exit(extra):
    with pytest.raises(SystemExit) as info:
        parse_args(["pat", *extra])
    assert info.value.code == 2


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as info:
        parse_args(["--version"])
    assert info.value.code == 0
    assert "0.1.0" in capsys.readouterr().out


def test_log_level_applied_to_package_logger():
    logger = logging.getLogger("grepx")

    args = parse_args(["pat", "--log-level", "warn"])
    assert str(args.log_level) == "warn"
    assert logger.level == logging.WARNING

    args = parse_args(["pat", "--log-level", "off"])
    assert str(args.log_level) == "off"
    assert not logger.isEnabledFor(logging.CRITICAL)

    args = parse_args(["pat"])
    assert args.log_level is LogLevel.INFO
    assert logger.level == logging.INFO


def test_enum_values_round_trip():
    for member in OutputFormat:
        assert OutputFormat(str(member)) is member
    for member in LogLevel:
        assert LogLevel(str(member)) is member
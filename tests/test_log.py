import re

from hazel_engine.log import client_logger, core_logger, init_logging


def test_logger_names():
    assert core_logger().name == "HAZEL"
    assert client_logger().name == "APP"


def test_file_pattern_has_level(tmp_path):
    path = tmp_path / "engine.log"
    init_logging(str(path))
    core_logger().info("hello")
    client_logger().warning("careful")
    lines = path.read_text(encoding="utf-8").splitlines()
    stamp = re.compile(r"^\[\d\d:\d\d:\d\d\] ")
    assert all(stamp.match(line) for line in lines)
    assert [stamp.sub("", line) for line in lines] == [
        "[info] HAZEL: hello",
        "[warning] APP: careful",
    ]


def test_console_pattern_has_no_level(tmp_path, capsys):
    init_logging(str(tmp_path / "engine.log"))
    core_logger().error("boom")
    out = capsys.readouterr().out
    assert re.search(r"^\[\d\d:\d\d:\d\d\] HAZEL: boom$", out, re.M)
    assert "[error]" not in out


def test_reinit_truncates_file(tmp_path):
    path = tmp_path / "engine.log"
    init_logging(str(path))
    core_logger().info("first")
    init_logging(str(path))
    core_logger().info("second")
    text = path.read_text(encoding="utf-8")
    assert "first" not in text
    assert "second" in text
    assert len(core_logger().handlers) == 2


def test_lowest_levels_are_recorded(tmp_path):
    path = tmp_path / "engine.log"
    init_logging(str(path))
    core_logger().log(5, "fine detail")
    core_logger().debug("detail")
    text = path.read_text(encoding="utf-8")
    assert "[trace] HAZEL: fine detail" in text
    assert "[debug] HAZEL: detail" in text
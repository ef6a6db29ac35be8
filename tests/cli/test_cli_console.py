"""
tests/cli/test_cli_console.py - cli/ui/console.py, cli/output.py 테스트
"""

import json
import logging

from rich.logging import RichHandler

from cli.output import to_json, write_json
from cli.ui.console import get_logger, print_error, print_info, print_resources_table, print_success
from core.terraform import new_simple_resource

RESOURCES = [
    new_simple_resource("abcd1234ef", "myacl_abcd1234", "aws_waf_web_acl", "aws", ["tags."]),
]


class TestGetLogger:
    def test_rich_handler_added_once(self):
        name = "tests.console.logger"
        logger = get_logger(name, logging.DEBUG)
        get_logger(name, logging.DEBUG)

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False


class TestPrint:
    def test_print_success(self, capsys):
        print_success("완료")
        assert "완료" in capsys.readouterr().out

    def test_print_resources_table(self, capsys):
        print_resources_table(RESOURCES, title="waf")
        out = capsys.readouterr().out
        assert "Type" in out
        assert "waf" in out

    def test_print_error_keeps_brackets(self, capsys):
        print_error("설정 오류 [region]: 리전이 비어 있습니다")
        assert "설정 오류 [region]" in capsys.readouterr().err

    def test_print_info_unbalanced_tag(self, capsys):
        print_info("closing [/b] only")
        assert "closing [/b] only" in capsys.readouterr().out

    def test_table_keeps_bracketed_cells(self, capsys):
        resources = [new_simple_resource("[id]12345", "x[/y]_[id]1234", "aws_waf_rule", "aws", ["tags."])]

        print_resources_table(resources, title="waf [us-east-1]")
        out = capsys.readouterr().out

        assert "x[/y]_[id]1234" in out
        assert "[id]12345" in out
        assert "waf [us-east-1]" in out


class TestOutput:
    def test_to_json(self):
        data = json.loads(to_json(RESOURCES))
        assert data == [RESOURCES[0].to_dict()]

    def test_write_json_creates_dirs(self, tmp_path):
        path = write_json(tmp_path / "a" / "b.json", RESOURCES)

        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8"))[0]["id"] == "abcd1234ef"

# tests/integration_tests/test_run_ordering.py
# This file is part of VClocks - Causal Ordering with Vector Clocks
#
# Integration tests for the ordering command-line tool

"""End-to-end tests for run_ordering: clock file in, ordered entries out.

The three-node exchange is written to disk in both supported line formats,
read back through the clock reader, ordered, and rendered.
"""

import json

import pytest
import run_ordering
from model import VectorClock
from utils.logger import LogLevel, get_logger


@pytest.fixture(autouse=True)
def reset_log_level():
    yield
    get_logger().set_level(LogLevel.INFO)


@pytest.fixture
def walkthrough_file(tmp_path, walkthrough):
    """Clock file holding A and C as wire form and B in compact notation."""
    path = tmp_path / "walkthrough.txt"
    path.write_text(
        "\n".join(
            [
                "# three-node exchange",
                walkthrough["A"],
                "B[A:1, B:1]",
                walkthrough["C"],
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestFormatEntry:
    def test_standalone_clock(self):
        vc = VectorClock({"id": "B", "clocks": {"A": 1, "B": 1}})
        assert run_ordering.format_entry(vc) == "B[A:1, B:1]"
        assert run_ordering.format_entry(vc, as_json=True) == vc.serialize()

    def test_group(self):
        group = [
            VectorClock({"id": "A", "clocks": {"A": 1}}),
            VectorClock({"id": "C", "clocks": {"C": 1}}),
        ]
        assert run_ordering.format_entry(group) == "{ A[A:1] | C[C:1] }"
        assert json.loads(run_ordering.format_entry(group, as_json=True)) == [
            {"id": "A", "clocks": {"A": 1}},
            {"id": "C", "clocks": {"C": 1}},
        ]


    def test_id_outside_notation_uses_wire_form(self):
        vc = VectorClock({"id": "3f9a2c", "clocks": {"3f9a2c": 1}})
        assert run_ordering.format_entry(vc) == vc.serialize()
        group = [vc, VectorClock({"id": "B", "clocks": {"B": 1}})]
        assert run_ordering.format_entry(group) == "{ " + vc.serialize() + " | B[B:1] }"

class TestOrderingSession:
    def test_walkthrough_lines(self, walkthrough_file):
        lines = run_ordering.run_ordering_session(str(walkthrough_file), as_json=False)

        assert len(lines) == 2
        assert lines[0] in (
            "{ A[A:2, B:1] | C[A:1, B:1, C:1] }",
            "{ C[A:1, B:1, C:1] | A[A:2, B:1] }",
        )
        assert lines[1] == "B[A:1, B:1]"

    def test_walkthrough_json(self, walkthrough_file):
        lines = run_ordering.run_ordering_session(str(walkthrough_file), as_json=True)

        group = json.loads(lines[0])
        assert sorted(entry["id"] for entry in group) == ["A", "C"]
        assert VectorClock(lines[1]).id == "B"


class TestMain:
    def test_success(self, walkthrough_file):
        assert run_ordering.main(["-c", str(walkthrough_file)]) == 0

    def test_success_verbose_json(self, walkthrough_file):
        assert run_ordering.main(["-c", str(walkthrough_file), "-v", "--json"]) == 0

    def test_validate_only(self, walkthrough_file):
        assert run_ordering.main(["-c", str(walkthrough_file), "--validate-only"]) == 0

    def test_debug_sets_level(self, walkthrough_file):
        assert run_ordering.main(["-c", str(walkthrough_file), "--debug"]) == 0
        assert get_logger().logger.level == LogLevel.DEBUG.value

    def test_missing_file_exit_code(self, tmp_path):
        assert run_ordering.main(["-c", str(tmp_path / "absent.txt")]) == 1

    def test_malformed_file_exit_code(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("A[A:1]\nB[B:-2]\n", encoding="utf-8")
        assert run_ordering.main(["-c", str(path)]) == 1

    def test_missing_required_argument(self):
        with pytest.raises(SystemExit):
            run_ordering.main([])

    def test_bad_notation_line_exit_code(self, tmp_path):
        path = tmp_path / "bad_notation.txt"
        path.write_text("A[A:1]\nB[B:oops]\n", encoding="utf-8")
        assert run_ordering.main(["-c", str(path)]) == 1

    def test_undecodable_file_exit_code(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"A[A:1]\n\xff\xfe\n")
        assert run_ordering.main(["-c", str(path)]) == 1

    def test_digit_leading_host_id_is_printed(self, tmp_path):
        path = tmp_path / "hosts.txt"
        path.write_text('{"id":"3f9a2c","clocks":{"3f9a2c":2}}\n', encoding="utf-8")
        assert run_ordering.main(["-c", str(path)]) == 0

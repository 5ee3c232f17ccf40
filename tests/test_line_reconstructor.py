from __future__ import annotations

from notfis.services.layout import RECORD_IDS
from notfis.services.line_reconstructor import reconstruct_lines
from tests.conftest import line_311, line_313


def test_one_record_per_line():
    raw = "000HEADER\n310DOC\n311SHIPPER\n"
    assert reconstruct_lines(raw) == ["000HEADER", "310DOC", "311SHIPPER"]


def test_strips_carriage_returns():
    raw = "311ABC\r\n312DEF\r\n"
    assert reconstruct_lines(raw) == ["311ABC", "312DEF"]


def test_continuation_is_glued_without_separator():
    assert reconstruct_lines("313...ABC\nDEF") == ["313...ABCDEF"]


def test_split_record_matches_unsplit_form():
    full = line_313()
    raw = "\n".join([line_311(), full[:150], full[150:]])
    assert reconstruct_lines(raw) == [line_311(), full]


def test_record_split_in_three_parts():
    full = line_313()
    raw = "\r\n".join([full[:150], full[150:200], full[200:]])
    assert reconstruct_lines(raw) == [full]


def test_fragment_starting_with_record_code_opens_new_record():
    # A break just before "0001050" (peso) leaves a fragment that looks like a 000 header.
    raw = "313AAAA\n000105000125"
    assert reconstruct_lines(raw) == ["313AAAA", "000105000125"]


def test_blank_lines_are_discarded():
    raw = "311A\n\n   \n\t\n312B\n"
    assert reconstruct_lines(raw) == ["311A", "312B"]


def test_continuation_keeps_inner_whitespace():
    assert reconstruct_lines("312NAME\n   CITY  ") == ["312NAME   CITY  "]


def test_fragment_before_first_record_is_dropped():
    assert reconstruct_lines("LIXO\n311A\nB") == ["311AB"]


def test_no_recognized_records():
    assert reconstruct_lines("ABCDEF\n999XYZ\n") == []


def test_empty_input():
    assert reconstruct_lines("") == []


def test_unknown_code_is_treated_as_continuation():
    # 315 is not a NOTFIS 3.0A record identifier
    assert reconstruct_lines("313AAA\n315BBB") == ["313AAA315BBB"]


def test_every_known_code_starts_a_record():
    raw = "\n".join(f"{code}X" for code in sorted(RECORD_IDS))
    assert reconstruct_lines(raw) == [f"{code}X" for code in sorted(RECORD_IDS)]


def test_known_record_ids():
    assert RECORD_IDS == {
        "000", "310", "311", "312", "313", "314", "316", "317", "318", "319", "333",
    }

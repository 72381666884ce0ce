# tests/test_data_integrity_check.py

from draftboard.record_builder import header_row
from draftboard.tools.data_integrity_check import audit_rows
from tests.helpers import make_row


def test_clean_store_has_no_issues():
    rows = [header_row(), make_row(1, battle_id="a"), make_row(2, battle_id="b")]
    report = audit_rows(rows)
    assert report.header_ok
    assert report.total_rows == 2
    assert report.issue_count == 0
    assert report.stage_counts == {"Group Stage": 2}


def test_flags_collisions_and_dirty_cells():
    duplicate_seq = make_row(2, battle_id="a")
    bad = make_row(3, battle_id="n/a")
    bad[117] = "Draw"
    bad[116] = "soon"
    bad[17] = "many"
    short = make_row(4)[:50]
    rows = [header_row(), make_row(1, battle_id="a"), make_row(2), duplicate_seq, bad, short]

    report = audit_rows(rows)

    assert report.duplicate_sequence_numbers == {2: 2}
    assert report.out_of_order_rows == [3]
    assert report.duplicate_battle_ids == {"a": 2}
    assert report.unknown_winner_rows == [4]
    assert report.bad_duration_rows == [4]
    assert report.non_numeric_cells == 1
    assert report.wrong_width_rows == [5]


def test_missing_header_is_reported():
    report = audit_rows([])
    assert not report.header_ok
    assert report.issue_count == 1

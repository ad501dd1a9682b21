import pytest

from xdrgtk.scan import (
    SCAN_MAX_SAMPLES,
    SCAN_MIN_SAMPLES,
    ScanData,
    ScanError,
    ScanMarks,
    ScanPoint,
    build_scan_command,
    validate_range,
)


def _data(freqs, levels):
    return ScanData([ScanPoint(f, s) for f, s in zip(freqs, levels)])


def test_validate_range_keeps_order():
    assert validate_range(87500, 108000, 100) == (87500, 108000)


def test_validate_range_swaps_reversed():
    assert validate_range(108000, 87500, 100) == (87500, 108000)


def test_validate_range_too_few_samples():
    with pytest.raises(ScanError, match="too low"):
        validate_range(87500, 87600, 100)


def test_validate_range_too_many_samples():
    with pytest.raises(ScanError, match="too large"):
        validate_range(0, (SCAN_MAX_SAMPLES + 1) * 10, 10)


def test_validate_range_limits_accepted():
    assert validate_range(0, SCAN_MIN_SAMPLES * 10, 10) == (0, SCAN_MIN_SAMPLES * 10)
    assert validate_range(0, SCAN_MAX_SAMPLES * 10, 10) == (0, SCAN_MAX_SAMPLES * 10)


def test_validate_range_bad_step():
    with pytest.raises(ValueError):
        validate_range(87500, 108000, 0)


def test_build_scan_command_full():
    command = build_scan_command(87500, 108000, 100, 1, 0, 5, 12, False, False)
    assert command == "Sa87500\nSb108000\nSc100\nSf5\nSw12\nSz1\nS"


def test_build_scan_command_continuous_tef_offset():
    command = build_scan_command(87500, 108000, 100, 2, 10, 5, 12, True, True)
    lines = command.split("\n")
    assert lines[0] == "Sa87510"
    assert lines[1] == "Sb108010"
    assert "Sf5" not in lines
    assert "Sw12" in lines
    assert lines[-1] == "Sm"


def test_scan_data_min_max_defaults():
    data = _data([87500, 87600, 87700], [10.0, 30.0, 20.0])
    assert data.min == 10.0
    assert data.max == 30.0
    assert len(data) == 3
    assert data.first_freq == 87500
    assert data.last_freq == 87700


def test_scan_data_empty_rejected():
    with pytest.raises(ValueError):
        ScanData([])


def test_scan_data_copy_is_independent():
    data = _data([87500, 87600, 87700], [10.0, 30.0, 20.0])
    clone = data.copy()
    assert clone == data
    clone.signals[0].signal = 99.0
    assert data.signals[0].signal == 10.0


def test_same_range():
    a = _data([87500, 87600, 87700], [1.0, 2.0, 3.0])
    b = _data([87500, 87600, 87700], [5.0, 6.0, 7.0])
    c = _data([87500, 87700], [5.0, 7.0])
    d = _data([87400, 87600, 87700], [5.0, 6.0, 7.0])
    assert a.same_range(b)
    assert not a.same_range(c)
    assert not a.same_range(d)


def test_marks_add_unique_sorted():
    marks = ScanMarks()
    for freq in (95000, 88000, 95000, 91000):
        marks.add(freq)
    assert list(marks) == [88000, 91000, 95000]


def test_marks_toggle_twice_restores():
    marks = ScanMarks([88000, 90000])
    marks.toggle(89000)
    assert 89000 in marks
    marks.toggle(89000)
    assert list(marks) == [88000, 90000]


def test_marks_remove_missing_ignored():
    marks = ScanMarks([88000])
    marks.remove(99999)
    marks.remove(88000)
    assert len(marks) == 0


def test_marks_clear_range_inclusive():
    marks = ScanMarks([88000, 89000, 90000, 91000])
    marks.clear_range(89000, 90000)
    assert list(marks) == [88000, 91000]


def test_marks_clear():
    marks = ScanMarks([88000, 89000])
    marks.clear()
    assert list(marks) == []
from src.payroll_engine.payroll_engine.attendance.seed import attendance_roll, scenario_bucket, seed


def test_seed_is_code_point_sum_plus_offset():
    assert seed("ab", 0) == 97 + 98
    assert seed("ab", 5) == 97 + 98 + 5
    assert seed("E1", 2) == 69 + 49 + 2


def test_seed_is_stable_across_calls():
    assert seed("emp-rahul", 17) == seed("emp-rahul", 17)


def test_buckets():
    assert attendance_roll(118) == 18
    assert scenario_bucket(118) == 8
    assert attendance_roll(203) == 3

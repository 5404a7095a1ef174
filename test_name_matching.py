"""Name resolution tests"""
from canvas_groups.models.project import Student
from canvas_groups.utils.name_matching import find_student_by_name, normalize_name


def test_normalize_name():
    assert normalize_name("  Ann   Lee!! ") == "ann   lee"
    assert normalize_name("David O'Brien") == "david obrien"
    assert normalize_name("José") == "jos"


def test_exact_match():
    students = [Student(1, "Ann Lee")]
    assert find_student_by_name(students, "Ann Lee").id == 1


def test_exact_match_after_normalization():
    students = [Student(1, "Ann Lee")]
    assert find_student_by_name(students, "ann   lee!!").id == 1


def test_exact_match_wins_over_earlier_partial_match():
    students = [Student(1, "Ann Leeson"), Student(2, "Ann Lee")]
    assert find_student_by_name(students, "Ann Lee").id == 2


def test_all_parts_contained_in_any_order():
    students = [Student(1, "Bob Smith"), Student(2, "Lee, Ann Marie")]
    assert find_student_by_name(students, "Ann Lee").id == 2


def test_all_parts_tier_beats_single_part_tier():
    students = [Student(1, "Ann Jones"), Student(2, "Ann Lee Parker")]
    assert find_student_by_name(students, "Ann Lee").id == 2


def test_single_significant_part():
    students = [Student(1, "Maria Garcia")]
    assert find_student_by_name(students, "Garcia").id == 1


def test_single_part_tier_returns_first_in_directory_order():
    students = [Student(1, "Maria Garcia"), Student(2, "Maria Lopez")]
    assert find_student_by_name(students, "Maria Fernandez").id == 1


def test_short_parts_are_not_significant():
    students = [Student(1, "Al Bo")]
    assert find_student_by_name(students, "Al Xy") is None


def test_no_match_returns_none():
    students = [Student(1, "Ann Lee"), Student(2, "Maria Garcia")]
    assert find_student_by_name(students, "Zed Quill") is None


def test_empty_directory():
    assert find_student_by_name([], "Ann Lee") is None


def test_name_without_letters_matches_first_student():
    students = [Student(1, "Ann Lee"), Student(2, "Maria Garcia")]
    assert find_student_by_name(students, "???").id == 1
    assert find_student_by_name(students, "12345").id == 1


def test_name_without_letters_in_empty_directory():
    assert find_student_by_name([], "???") is None

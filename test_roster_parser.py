"""Roster parser tests"""
from canvas_groups.models.project import ProjectEntry
from canvas_groups.utils.roster_parser import load_projects, parse_projects


def test_empty_input():
    assert parse_projects("") == []


def test_every_header_with_a_bullet_yields_one_entry_in_order():
    text = "\n".join(f"## Project {i}\n- Leader {i}" for i in range(5))
    projects = parse_projects(text)
    assert [p.project_name for p in projects] == [f"Project {i}" for i in range(5)]
    assert [p.leader_name for p in projects] == [f"Leader {i}" for i in range(5)]


def test_section_title_skipped_and_extra_bullets_ignored():
    text = "## Project Ideas\n## Alpha\n- Bob\n## Beta\n- Carol\n- Dave"
    assert parse_projects(text) == [
        ProjectEntry("Alpha", "Bob"),
        ProjectEntry("Beta", "Carol"),
    ]


def test_header_without_bullet_is_dropped():
    text = "## Orphan\nSome description\n## Kept\n- Ann Lee\n"
    assert parse_projects(text) == [ProjectEntry("Kept", "Ann Lee")]


def test_bullet_before_any_header_is_ignored():
    assert parse_projects("- Nobody\n## Alpha\n- Bob") == [ProjectEntry("Alpha", "Bob")]


def test_whitespace_is_trimmed():
    text = "   ##   Spaced Out   \n\t-   Ann Lee  \n"
    assert parse_projects(text) == [ProjectEntry("Spaced Out", "Ann Lee")]


def test_other_heading_levels_and_nested_bullets_do_not_match():
    text = "# Title\n### Sub\n- stray\n## Alpha\n* star bullet\n-no space\n- Bob"
    assert parse_projects(text) == [ProjectEntry("Alpha", "Bob")]


def test_custom_section_marker():
    text = "## Table of Contents\n- one\n## Alpha\n- Bob"
    assert parse_projects(text, section_marker="Table of Contents") == [ProjectEntry("Alpha", "Bob")]


def test_windows_line_endings():
    assert parse_projects("## Alpha\r\n- Bob\r\n") == [ProjectEntry("Alpha", "Bob")]


def test_load_projects_reads_file(tmp_path):
    roster = tmp_path / "project-ideas.md"
    roster.write_text("## Alpha\n- Bob\n", encoding="utf-8")
    assert load_projects(roster) == [ProjectEntry("Alpha", "Bob")]


def test_load_projects_unreadable_file_yields_nothing(tmp_path):
    assert load_projects(tmp_path / "missing.md") == []

"""Fuzzy matching of roster names against enrolled students"""
import re
from typing import Optional, Sequence

from ..models.project import Student

_NON_LETTERS = re.compile(r'[^a-z\s]')

# Tier 3 ignores initials and other short fragments
MIN_PART_LENGTH = 3


def normalize_name(name: str) -> str:
    """Lower-case and keep only letters and whitespace"""
    return _NON_LETTERS.sub('', name.lower()).strip()


def find_student_by_name(students: Sequence[Student], target_name: str) -> Optional[Student]:
    """Find the best match for ``target_name``, first student in list order per tier.
    
    Tiers, first hit wins:
      1. exact normalized match
      2. every part of the target appears in the student's name
      3. any part of the target longer than two letters appears in the name
    """
    target = normalize_name(target_name)
    normalized = [(student, normalize_name(student.name)) for student in students]
    
    for student, name in normalized:
        if name == target:
            return student
    
    # A target with no letters has no parts, so every student satisfies tier 2
    parts = target.split()
    
    for student, name in normalized:
        if all(part in name for part in parts):
            return student
    
    for student, name in normalized:
        if any(len(part) >= MIN_PART_LENGTH and part in name for part in parts):
            return student
    
    return None

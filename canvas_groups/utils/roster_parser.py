"""Parse project names and leaders out of the markdown roster"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from ..models.project import ProjectEntry

logger = logging.getLogger(__name__)

HEADER_PREFIX = '## '
BULLET_PREFIX = '- '
DEFAULT_SECTION_MARKER = 'Project Ideas'


def parse_projects(text: str, section_marker: str = DEFAULT_SECTION_MARKER) -> List[ProjectEntry]:
    """Return one entry per "## Project" header that is followed by a "- Leader" bullet.
    
    Only the first bullet after a header names the leader. Headers containing
    ``section_marker`` are section titles, not projects.
    """
    projects = []
    current_project: Optional[str] = None
    
    for raw_line in text.splitlines():
        line = raw_line.strip()
        
        if line.startswith(HEADER_PREFIX) and section_marker not in line:
            current_project = line[len(HEADER_PREFIX):].strip()
        elif line.startswith(BULLET_PREFIX) and current_project:
            projects.append(ProjectEntry(
                project_name=current_project,
                leader_name=line[len(BULLET_PREFIX):].strip()
            ))
            current_project = None
    
    return projects


def load_projects(path: Union[str, Path], section_marker: str = DEFAULT_SECTION_MARKER) -> List[ProjectEntry]:
    """Read and parse the roster file; an unreadable file yields no projects"""
    try:
        text = Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading markdown file {path}: {e}")
        return []
    
    return parse_projects(text, section_marker)

"""Configuration settings for the group creation tool"""
import os
from dataclasses import dataclass, field, replace
from typing import Any, Callable, List, Optional

from dotenv import load_dotenv

from ..utils.exceptions import ConfigurationError


# Placeholder values shipped in the example .env
DEFAULT_CANVAS_URL = 'https://your-institution.instructure.com'
DEFAULT_API_TOKEN = 'your-api-token'
DEFAULT_COURSE_ID = 'your-course-id'


@dataclass(frozen=True)
class Settings:
    """Application settings"""
    
    # Canvas
    canvas_url: str = DEFAULT_CANVAS_URL
    api_token: str = field(default=DEFAULT_API_TOKEN, repr=False)
    course_id: str = DEFAULT_COURSE_ID
    
    # Workflow
    category_name: str = 'Project Groups'
    roster_path: str = './project-ideas.md'
    roster_section_marker: str = 'Project Ideas'
    request_delay: float = 0.5
    request_timeout: float = 30.0
    page_size: int = 100
    
    # Logging
    log_level: str = 'WARNING'
    log_file: Optional[str] = None
    
    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'Settings':
        """Load settings from the environment, reading an optional .env file first"""
        load_dotenv(env_file)
        
        errors: List[str] = []
        request_delay = _number_from_env('REQUEST_DELAY', '0.5', float, errors)
        request_timeout = _number_from_env('REQUEST_TIMEOUT', '30', float, errors)
        page_size = _number_from_env('PAGE_SIZE', '100', int, errors)
        if errors:
            raise ConfigurationError(errors)
        
        return cls(
            canvas_url=os.getenv('CANVAS_URL', DEFAULT_CANVAS_URL).rstrip('/'),
            api_token=os.getenv('CANVAS_API_TOKEN', DEFAULT_API_TOKEN),
            course_id=os.getenv('COURSE_ID', DEFAULT_COURSE_ID),
            category_name=os.getenv('GROUP_CATEGORY_NAME', 'Project Groups'),
            roster_path=os.getenv('ROSTER_PATH', './project-ideas.md'),
            roster_section_marker=os.getenv('ROSTER_SECTION_MARKER', 'Project Ideas'),
            request_delay=request_delay,
            request_timeout=request_timeout,
            page_size=page_size,
            log_level=os.getenv('LOG_LEVEL', 'WARNING').upper(),
            log_file=os.getenv('LOG_FILE') or None
        )
    
    def with_overrides(self, **overrides) -> 'Settings':
        """Return a copy with the given non-None values replaced"""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self
    
    def get_errors(self) -> List[str]:
        """List every required setting that is unset or still a placeholder"""
        errors = []
        
        if not self.api_token or self.api_token == DEFAULT_API_TOKEN:
            errors.append('CANVAS_API_TOKEN not set or using default value')
        
        if not self.course_id or self.course_id == DEFAULT_COURSE_ID:
            errors.append('COURSE_ID not set or using default value')
        
        if not self.canvas_url or self.canvas_url == DEFAULT_CANVAS_URL:
            errors.append('CANVAS_URL not set or using default value')
        
        return errors
    
    def validate(self):
        """Validate required settings"""
        errors = self.get_errors()
        if errors:
            raise ConfigurationError(errors)


def _number_from_env(name: str, default: str, cast: Callable[[str], Any], errors: List[str]) -> Any:
    """Convert a numeric variable, recording an error instead of raising"""
    raw = os.getenv(name, default)
    try:
        value = cast(raw)
    except ValueError:
        errors.append(f"{name} must be a {cast.__name__}, got {raw!r}")
        return None
    
    if value < 0 or (cast is int and value == 0):
        errors.append(f"{name} must be positive, got {raw!r}")
        return None
    return value

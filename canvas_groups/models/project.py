"""Project and Canvas data models"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ProjectEntry:
    """A project proposal and the name of its leader, as listed in the roster"""
    project_name: str
    leader_name: str


@dataclass(frozen=True)
class Student:
    """An enrolled student returned by the course directory"""
    id: Any
    name: str
    
    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Student':
        return cls(id=data['id'], name=data.get('name') or '')


@dataclass(frozen=True)
class Category:
    """A group category (group set) in the course"""
    id: Any
    name: str
    
    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'Category':
        return cls(id=data['id'], name=data.get('name') or '')


@dataclass(frozen=True)
class Group:
    """A project group created inside a category"""
    id: Any
    name: str
    category_id: Optional[Any] = None
    
    @classmethod
    def from_api(cls, data: Dict[str, Any], category_id: Optional[Any] = None) -> 'Group':
        return cls(
            id=data['id'],
            name=data.get('name') or '',
            category_id=data.get('group_category_id', category_id)
        )

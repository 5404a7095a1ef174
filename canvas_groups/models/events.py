"""Outcome and result models"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ProvisioningStatus(str, Enum):
    """Per-project provisioning status"""
    SUCCESS = "Success"
    LEADER_NOT_FOUND = "Leader not found"
    GROUP_CREATION_FAILED = "Group creation failed"
    MEMBERSHIP_FAILED = "Failed to add leader"


@dataclass(frozen=True)
class ProjectOutcome:
    """Result of provisioning a single project"""
    project_name: str
    leader_name: str  # resolved student name on success, roster name otherwise
    status: ProvisioningStatus
    group_id: Optional[Any] = None
    group_url: Optional[str] = None
    leader_role: Optional[str] = None  # "with leader permissions" or "as member"
    
    @property
    def is_successful(self) -> bool:
        return self.status is ProvisioningStatus.SUCCESS
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            'project': self.project_name,
            'leader': self.leader_name,
            'status': self.status.value,
            'group_id': self.group_id,
            'group_url': self.group_url,
            'leader_role': self.leader_role
        }


@dataclass
class RunResult:
    """Ordered outcomes of one run"""
    category_name: str
    outcomes: List[ProjectOutcome] = field(default_factory=list)
    
    @property
    def total(self) -> int:
        return len(self.outcomes)
    
    @property
    def successful(self) -> List[ProjectOutcome]:
        return [o for o in self.outcomes if o.is_successful]
    
    @property
    def failed(self) -> List[ProjectOutcome]:
        return [o for o in self.outcomes if not o.is_successful]
    
    @property
    def success_rate(self) -> int:
        """Success percentage, rounded half up"""
        if self.total == 0:
            return 0
        return int(math.floor(len(self.successful) * 100 / self.total + 0.5))
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category_name,
            'total': self.total,
            'successful': len(self.successful),
            'failed': len(self.failed),
            'success_rate': self.success_rate,
            'results': [o.to_dict() for o in self.outcomes]
        }

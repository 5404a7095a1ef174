"""Group provisioning for individual projects"""
import logging
from typing import Optional, Sequence

from ..models.events import ProjectOutcome, ProvisioningStatus
from ..models.project import Category, ProjectEntry, Student
from ..tools.api_clients.canvas import CanvasClient
from ..utils.exceptions import CategoryUnavailableError
from ..utils.name_matching import find_student_by_name
from ..utils.progress_logger import ProgressLogger, progress_logger

logger = logging.getLogger(__name__)

LEADER_ROLE = "with leader permissions"
MEMBER_ROLE = "as member"


class GroupProvisioner:
    """Creates one group per project inside a single category and adds its leader"""
    
    def __init__(self, client: CanvasClient, course_id: str,
                 progress: Optional[ProgressLogger] = None):
        self.client = client
        self.course_id = course_id
        self.progress = progress or progress_logger
        self.category: Optional[Category] = None
    
    async def find_or_create_category(self, name: str) -> Category:
        """Resolve the category used for every group of the run"""
        self.progress.log_task(f"Looking for group category '{name}'")
        category = await self.client.find_group_category(self.course_id, name)
        
        if category:
            self.progress.log_result(f"Found existing category: {category.name} (ID: {category.id})")
        else:
            self.progress.log_task("Creating new group category")
            category = await self.client.create_group_category(self.course_id, name)
            if not category:
                raise CategoryUnavailableError(f"Failed to create group category '{name}'")
            self.progress.log_result(f"Created category: {category.name} (ID: {category.id})")
        
        self.category = category
        return category
    
    async def provision(self, project: ProjectEntry, students: Sequence[Student]) -> ProjectOutcome:
        """Resolve the leader, create the group, add the leader and try to make them moderator"""
        if self.category is None:
            raise RuntimeError("find_or_create_category() must run before provisioning groups")
        
        leader = find_student_by_name(students, project.leader_name)
        if not leader:
            self.progress.log_result(f"Could not find student: {project.leader_name}", status="warning")
            return self._failure(project, ProvisioningStatus.LEADER_NOT_FOUND)
        
        self.progress.log_result(f"Found leader: {leader.name} (ID: {leader.id})")
        
        group = await self.client.create_group(
            self.category.id,
            project.project_name,
            f"Project: {project.project_name}\nLeader: {leader.name}"
        )
        if not group:
            self.progress.log_result(f"Failed to create group for {project.project_name}", status="failed")
            return self._failure(project, ProvisioningStatus.GROUP_CREATION_FAILED)
        
        self.progress.log_result(f"Created group: {group.name} (ID: {group.id})")
        
        if not await self.client.add_member(group.id, leader.id):
            self.progress.log_result("Failed to add leader to group", status="failed")
            return self._failure(project, ProvisioningStatus.MEMBERSHIP_FAILED, group_id=group.id)
        
        is_leader = await self.client.set_group_leader(group.id, leader.id)
        if not is_leader:
            logger.warning(f"Could not set leader permissions for {leader.name} in group {group.id}")
        role = LEADER_ROLE if is_leader else MEMBER_ROLE
        self.progress.log_result(f"Added {leader.name} to group {role}")
        
        return ProjectOutcome(
            project_name=project.project_name,
            leader_name=leader.name,
            status=ProvisioningStatus.SUCCESS,
            group_id=group.id,
            group_url=self.client.group_url(group.id),
            leader_role=role
        )
    
    @staticmethod
    def _failure(project: ProjectEntry, status: ProvisioningStatus, group_id=None) -> ProjectOutcome:
        return ProjectOutcome(
            project_name=project.project_name,
            leader_name=project.leader_name,
            status=status,
            group_id=group_id
        )

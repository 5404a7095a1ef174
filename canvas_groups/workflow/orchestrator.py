"""Orchestrator that drives a full group creation run"""
import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, List, Optional

from ..config.settings import Settings
from ..models.events import RunResult
from ..models.project import ProjectEntry, Student
from ..tools.api_clients.canvas import CanvasClient
from ..utils.exceptions import (
    ConnectionFailedError,
    EmptyRosterError,
    NoStudentsError,
)
from ..utils.progress_logger import ProgressLogger, progress_logger
from ..utils.roster_parser import load_projects
from .provisioner import GroupProvisioner

logger = logging.getLogger(__name__)


class GroupCreationOrchestrator:
    """Coordinates the connectivity check, roster parsing, directory lookup and per-project provisioning.
    
    Projects are processed one at a time with a fixed pause between them.
    Any of the preconditions failing raises a WorkflowAborted subclass and no
    result is returned.
    """
    
    def __init__(self, settings: Settings, client: CanvasClient,
                 progress: Optional[ProgressLogger] = None,
                 sleep: Callable[[float], Awaitable[None]] = asyncio.sleep):
        self.settings = settings
        self.client = client
        self.progress = progress or progress_logger
        self.sleep = sleep
        self.metrics = client.metrics
        self.provisioner = GroupProvisioner(client, settings.course_id, self.progress)

    async def run(self, roster_path: Optional[str] = None, check_connection: bool = True) -> RunResult:
        """Main workflow orchestration method"""
        roster_path = roster_path or self.settings.roster_path
        self.metrics.start_timer('group_creation')
        try:
            result = await self._run(roster_path, check_connection)
        finally:
            duration = self.metrics.stop_timer('group_creation')
        
        logger.debug(f"Processed {result.total} projects in {duration:.2f}s, "
                     f"success rate {result.success_rate}%")
        self.progress.complete_workflow(result)
        return result
    
    async def _run(self, roster_path: str, check_connection: bool) -> RunResult:
        self.progress.start_workflow(self.settings.course_id, roster_path)
        
        # Step 1: Connectivity probe
        if check_connection:
            await self.check_connection()
        
        # Step 2: Parse roster
        projects = self.load_roster(roster_path)
        
        # Step 3: Fetch students once
        students = await self.fetch_students()
        
        # Step 4: Resolve the category once
        self.progress.start_stage("Group Category", "Finding or creating the category for project groups")
        category = await self.provisioner.find_or_create_category(self.settings.category_name)
        self.progress.complete_stage()
        
        # Step 5: Provision every project
        self.progress.start_stage("Group Creation", f"Creating {len(projects)} project groups")
        result = RunResult(category_name=category.name)
        
        for index, project in enumerate(projects, start=1):
            self.progress.log_project(project, index, len(projects))
            outcome = await self.provisioner.provision(project, students)
            result.outcomes.append(outcome)
            self.metrics.increment(f"projects_{outcome.status.name.lower()}")
            
            if index < len(projects) and self.settings.request_delay > 0:
                await self.sleep(self.settings.request_delay)
        
        self.progress.complete_stage()
        return result
    
    async def check_connection(self):
        self.progress.start_stage("Connection", "Checking Canvas API access")
        user = await self.client.get_current_user()
        if user is None:
            raise ConnectionFailedError("Cannot connect to Canvas. Please check your configuration.")
        self.progress.log_result(f"Connected to Canvas as: {user.get('name')}")
        self.progress.complete_stage()

    def load_roster(self, roster_path: str) -> List[ProjectEntry]:
        self.progress.start_stage("Roster", f"Parsing project ideas from {Path(roster_path).name}")
        projects = load_projects(roster_path, self.settings.roster_section_marker)
        if not projects:
            raise EmptyRosterError("No projects found in markdown file")
        
        self.progress.log_result(f"Found {len(projects)} projects")
        self.progress.complete_stage()
        return projects
    
    async def fetch_students(self) -> List[Student]:
        self.progress.start_stage("Students", "Fetching course students")
        students = await self.client.list_students(self.settings.course_id)
        if not students:
            raise NoStudentsError("No students found in course")
        
        self.progress.log_result(f"Found {len(students)} students")
        self.progress.complete_stage()
        return students

"""Console progress reporting for group creation runs"""
import sys
from datetime import datetime
from typing import Any, Dict, Optional, TextIO

from ..models.events import RunResult
from ..models.project import ProjectEntry


class Colors:
    """ANSI color codes for terminal output"""
    HEADER = '\033[95m'
    BLUE = '\033[94m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'


class ProgressLogger:
    """Human-readable progress and summary output"""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.start_time = datetime.now()
        self.current_stage = None
        self.stage_start = None
    
    def _print(self, text: str = ""):
        print(text, file=self.stream or sys.stdout)
    
    def start_workflow(self, course_id: str, roster_path: str):
        """Start the workflow with a welcome message"""
        self.start_time = datetime.now()
        self._print(f"\n{Colors.HEADER}{'═' * 70}{Colors.ENDC}")
        self._print(f"{Colors.HEADER}{Colors.BOLD}🎯 CANVAS GROUP CREATOR{Colors.ENDC}")
        self._print(f"{Colors.HEADER}{'═' * 70}{Colors.ENDC}")
        self._print(f"\n📍 Course: {Colors.CYAN}{Colors.BOLD}{course_id}{Colors.ENDC}")
        self._print(f"📍 Roster: {Colors.CYAN}{Colors.BOLD}{roster_path}{Colors.ENDC}")
        self._print(f"🕐 Started: {Colors.DIM}{datetime.now().strftime('%I:%M %p')}{Colors.ENDC}")
    
    def start_stage(self, stage_name: str, description: str):
        """Start a new workflow stage"""
        self.current_stage = stage_name
        self.stage_start = datetime.now()
        
        self._print(f"\n{Colors.BLUE}{Colors.BOLD}▶ {stage_name.upper()}{Colors.ENDC}")
        self._print(f"{Colors.DIM}  {description}{Colors.ENDC}")
        self._print(f"{Colors.DIM}{'─' * 60}{Colors.ENDC}")
    
    def log_task(self, task: str, status: str = "working"):
        icons = {
            "working": "🔄",
            "success": "✅",
            "failed": "❌",
            "warning": "⚠️",
            "info": "ℹ️"
        }
        self._print(f"  {icons.get(status, '•')} {task}")
    
    def log_result(self, message: str, details: Optional[Dict[str, Any]] = None, status: str = "success"):
        """Log the result of an operation"""
        colors = {
            "success": Colors.GREEN,
            "failed": Colors.RED,
            "warning": Colors.YELLOW,
            "info": Colors.CYAN
        }
        color = colors.get(status, Colors.ENDC)
        
        self._print(f"     {color}→ {message}{Colors.ENDC}")
        
        if details:
            for key, value in details.items():
                self._print(f"       {Colors.DIM}• {key}: {color}{value}{Colors.ENDC}")
    
    def log_project(self, project: ProjectEntry, index: int, total: int):
        self._print(f"\n  {Colors.YELLOW}🔧 Processing: {project.project_name}{Colors.ENDC} "
                    f"{Colors.DIM}({index}/{total}){Colors.ENDC}")
        self._print(f"     {Colors.DIM}👤 Leader: {project.leader_name}{Colors.ENDC}")
    
    def log_error(self, error: str, details: Optional[list] = None):
        """Log a fatal error with optional detail lines"""
        self._print(f"  {Colors.RED}❌ {error}{Colors.ENDC}")
        for line in details or []:
            self._print(f"     {Colors.RED}• {line}{Colors.ENDC}")
    
    def complete_stage(self):
        """Complete the current stage with timing"""
        if self.stage_start:
            duration = (datetime.now() - self.stage_start).total_seconds()
            self._print(f"\n  {Colors.GREEN}✓ Stage completed in {duration:.1f}s{Colors.ENDC}")
    
    def complete_workflow(self, result: RunResult):
        """Complete the workflow with summary statistics"""
        total_duration = (datetime.now() - self.start_time).total_seconds()
        
        self._print(f"\n{Colors.HEADER}{'═' * 70}{Colors.ENDC}")
        self._print(f"{Colors.GREEN}{Colors.BOLD}🎉 PROCESS COMPLETED{Colors.ENDC}")
        self._print(f"{Colors.HEADER}{'═' * 70}{Colors.ENDC}")
        
        successful = result.successful
        failed = result.failed
        
        self._print(f"\n📊 {Colors.BOLD}Summary:{Colors.ENDC}")
        self._print(f"   • Category: {result.category_name}")
        self._print(f"   • Successfully created: {Colors.GREEN}{len(successful)}{Colors.ENDC} groups")
        self._print(f"   • Failed: {Colors.RED}{len(failed)}{Colors.ENDC} groups")
        
        rate = result.success_rate
        rate_color = Colors.GREEN if rate >= 80 else Colors.YELLOW if rate >= 60 else Colors.RED
        self._print(f"   • Success rate: {rate_color}{rate}%{Colors.ENDC}")
        self._print(f"   • Duration: {Colors.CYAN}{total_duration:.1f} seconds{Colors.ENDC}")
        
        if successful:
            self._print(f"\n{Colors.GREEN}✅ SUCCESSFUL GROUPS:{Colors.ENDC}")
            for outcome in successful:
                self._print(f"  • {outcome.project_name} - {outcome.leader_name} ({outcome.leader_role})")
                self._print(f"    Group URL: {Colors.CYAN}{outcome.group_url}{Colors.ENDC}")
        
        if failed:
            self._print(f"\n{Colors.RED}❌ FAILED GROUPS:{Colors.ENDC}")
            for outcome in failed:
                self._print(f"  • {outcome.project_name} - {outcome.leader_name}: {outcome.status.value}")
        
        self._print(f"\n🏁 Finished processing {result.total} projects.")
        self._print(f"🕐 Completed: {Colors.DIM}{datetime.now().strftime('%I:%M %p')}{Colors.ENDC}")
        self._print("")


# Global progress logger instance
progress_logger = ProgressLogger()

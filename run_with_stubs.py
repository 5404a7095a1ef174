#!/usr/bin/env python3
"""Run the group creator against the in-memory Canvas stub (no Canvas account required)"""

import asyncio
import json
import logging
import sys
import tempfile
from pathlib import Path

from canvas_groups.config.settings import Settings
from canvas_groups.tools.api_clients.canvas import CanvasClient
from canvas_groups.utils.exceptions import CanvasGroupsException
from canvas_groups.workflow.orchestrator import GroupCreationOrchestrator
from stub_services import SAMPLE_ROSTER, STUB_CANVAS_URL, STUB_COURSE_ID, StubCanvasService

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger('httpx').setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


async def main(roster_path: str = None):
    """Main entry point"""
    service = StubCanvasService()
    settings = Settings(
        canvas_url=STUB_CANVAS_URL,
        api_token='stub-token',
        course_id=STUB_COURSE_ID,
        request_delay=0.1
    )
    
    with tempfile.TemporaryDirectory() as tmp:
        if roster_path is None:
            roster_path = str(Path(tmp) / 'project-ideas.md')
            Path(roster_path).write_text(SAMPLE_ROSTER, encoding='utf-8')
        
        async with CanvasClient.from_settings(settings, transport=service.transport()) as client:
            orchestrator = GroupCreationOrchestrator(settings, client)
            result = await orchestrator.run(roster_path)
    
    output_file = "stub_result.json"
    with open(output_file, 'w') as f:
        json.dump(result.to_dict(), f, indent=2, default=str)
    
    logger.info(f"Results saved to: {output_file}")
    logger.info(f"Stub received {len(service.requests)} requests")
    return result


if __name__ == "__main__":
    try:
        asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None))
    except CanvasGroupsException as e:
        logger.error(f"Run aborted: {e}")
        sys.exit(1)

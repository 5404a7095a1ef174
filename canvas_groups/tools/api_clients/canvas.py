"""Canvas LMS API client"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from .base import BaseAPIClient
from ...config.settings import Settings
from ...models.project import Category, Group, Student
from ...utils.exceptions import APIException

logger = logging.getLogger(__name__)

# Remote failures plus payloads missing the fields the models need
MALFORMED_RESPONSE = (APIException, KeyError, TypeError)


class CanvasClient(BaseAPIClient):
    """Client for the Canvas course directory and groups API.
    
    Every public call returns an empty or negative value on failure instead
    of raising, after logging the error.
    """
    
    service_name = "Canvas"
    
    def __init__(self, canvas_url: str, api_token: Optional[str] = None, page_size: int = 100,
                 timeout: float = 30.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.canvas_url = canvas_url.rstrip('/')
        self.page_size = page_size
        super().__init__(f"{self.canvas_url}/api/v1", api_token, timeout=timeout, transport=transport)
    
    @classmethod
    def from_settings(cls, settings: Settings,
                      transport: Optional[httpx.AsyncBaseTransport] = None) -> 'CanvasClient':
        return cls(
            settings.canvas_url,
            settings.api_token,
            page_size=settings.page_size,
            timeout=settings.request_timeout,
            transport=transport
        )
    
    def group_url(self, group_id: Any) -> str:
        """Browser URL of a group"""
        return f"{self.canvas_url}/groups/{group_id}"
    
    async def get_current_user(self) -> Optional[Dict[str, Any]]:
        """Get the user the token belongs to"""
        try:
            user = await self._request_json('GET', 'users/self')
        except APIException as e:
            logger.error(f"Canvas connection failed: {e}")
            return None
        
        if not isinstance(user, dict):
            logger.error(f"Canvas connection failed: unexpected user payload {user!r}")
            return None
        return user
    
    async def validate_connection(self) -> bool:
        """Validate API connection"""
        user = await self.get_current_user()
        if user is None:
            return False
        
        logger.info(f"Connected to Canvas as: {user.get('name')}")
        return True
    
    async def list_students(self, course_id: str) -> List[Student]:
        """Fetch every student enrolled in the course"""
        try:
            data = await self._get_paginated(
                f"courses/{course_id}/students",
                {"per_page": self.page_size}
            )
            return [Student.from_api(item) for item in data]
        except MALFORMED_RESPONSE as e:
            logger.error(f"Error fetching students: {e!r}")
            return []
    
    async def list_group_categories(self, course_id: str) -> List[Category]:
        """Fetch all group categories of the course"""
        try:
            data = await self._get_paginated(
                f"courses/{course_id}/group_categories",
                {"per_page": self.page_size}
            )
            return [Category.from_api(item) for item in data]
        except MALFORMED_RESPONSE as e:
            logger.error(f"Error fetching group categories: {e!r}")
            return []
    
    async def find_group_category(self, course_id: str, name: str) -> Optional[Category]:
        """Find an existing group category by exact name"""
        for category in await self.list_group_categories(course_id):
            if category.name == name:
                return category
        return None
    
    async def create_group_category(self, course_id: str, name: str) -> Optional[Category]:
        try:
            data = await self._request_json(
                'POST',
                f"courses/{course_id}/group_categories",
                json={
                    "name": name,
                    "self_signup": None,
                    "group_limit": None,
                    "auto_leader": None
                }
            )
            return Category.from_api(data)
        except MALFORMED_RESPONSE as e:
            logger.error(f"Error creating group category: {e!r}")
            return None
    
    async def create_group(self, category_id: Any, name: str, description: str = '') -> Optional[Group]:
        """Create an invitation-only group within a category"""
        try:
            data = await self._request_json(
                'POST',
                f"group_categories/{category_id}/groups",
                json={
                    "name": name,
                    "description": description,
                    "is_public": False,
                    "join_level": "invitation_only"
                }
            )
            return Group.from_api(data, category_id)
        except MALFORMED_RESPONSE as e:
            logger.error(f"Error creating group {name}: {e!r}")
            return None
    
    async def add_member(self, group_id: Any, user_id: Any) -> bool:
        try:
            await self._request(
                'POST',
                f"groups/{group_id}/memberships",
                json={"user_id": user_id}
            )
        except APIException as e:
            logger.error(f"Error adding student {user_id} to group {group_id}: {e}")
            return False
        return True
    
    async def list_memberships(self, group_id: Any) -> Optional[List[Dict[str, Any]]]:
        try:
            return await self._get_paginated(
                f"groups/{group_id}/memberships",
                {"per_page": self.page_size}
            )
        except APIException as e:
            logger.warning(f"Could not list memberships of group {group_id}: {e}")
            return None
    
    async def update_membership(self, group_id: Any, membership_id: Any, moderator: bool = True) -> bool:
        try:
            await self._request(
                'PUT',
                f"groups/{group_id}/memberships/{membership_id}",
                json={"moderator": moderator}
            )
        except APIException as e:
            logger.warning(f"Could not update membership {membership_id}: {e}")
            return False
        return True
    
    async def set_group_leader(self, group_id: Any, user_id: Any) -> bool:
        """Make the user a moderator of the group (not every Canvas plan allows it)"""
        memberships = await self.list_memberships(group_id)
        if not memberships:
            return False
        
        membership = next(
            (m for m in memberships if isinstance(m, dict) and m.get('user_id') == user_id),
            None
        )
        if membership is None or 'id' not in membership:
            logger.warning(f"No membership for user {user_id} in group {group_id}")
            return False
        
        return await self.update_membership(group_id, membership['id'], moderator=True)

"""Stub Canvas API for local testing and development"""
import itertools
import json
import re
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import httpx

STUB_CANVAS_URL = "https://canvas.stub.local"
STUB_COURSE_ID = "101"

# Sample data for testing
SAMPLE_STUDENTS = [
    {"id": 1, "name": "Ann Lee", "sortable_name": "Lee, Ann"},
    {"id": 2, "name": "Maria Garcia", "sortable_name": "Garcia, Maria"},
    {"id": 3, "name": "Bob Johnson", "sortable_name": "Johnson, Bob"},
    {"id": 4, "name": "Carol Nguyen", "sortable_name": "Nguyen, Carol"},
    {"id": 5, "name": "David O'Brien", "sortable_name": "O'Brien, David"},
    {"id": 6, "name": "Jean-Luc Moreau", "sortable_name": "Moreau, Jean-Luc"},
]

SAMPLE_ROSTER = """# Project Ideas

## Project Ideas Index
- this list is not a project

## Campus Navigation App
- Ann Lee
- Bob Johnson

## Study Group Matcher
- garcia

## Recipe Recommender
- Zed Quill

## Library Seat Finder
- david obrien
"""


class StubCanvasService:
    """In-memory implementation of the Canvas endpoints used by CanvasClient.
    
    Serve it through ``transport()``; the failure switches let tests force
    every kind of remote error.
    """
    
    def __init__(self, students: Optional[List[Dict[str, Any]]] = None,
                 categories: Optional[List[Dict[str, Any]]] = None,
                 max_page_size: int = 100):
        self.students = [dict(s) for s in (SAMPLE_STUDENTS if students is None else students)]
        self.categories = [dict(c) for c in categories or []]
        self.groups: Dict[int, Dict[str, Any]] = {}
        self.memberships: Dict[int, List[Dict[str, Any]]] = {}
        self.max_page_size = max_page_size
        self.requests: List[Tuple[str, str]] = []
        self._ids = itertools.count(1000)
        
        # Failure switches
        self.authorized = True
        self.fail_category_creation = False
        self.fail_group_names: Set[str] = set()
        self.fail_membership_users: Set[Any] = set()
        self.moderator_supported = True
        
        self._routes: List[Tuple[str, re.Pattern, Callable]] = [
            ("GET", re.compile(r"^/api/v1/users/self$"), self._current_user),
            ("GET", re.compile(r"^/api/v1/courses/(\w+)/students$"), self._list_students),
            ("GET", re.compile(r"^/api/v1/courses/(\w+)/group_categories$"), self._list_categories),
            ("POST", re.compile(r"^/api/v1/courses/(\w+)/group_categories$"), self._create_category),
            ("POST", re.compile(r"^/api/v1/group_categories/(\d+)/groups$"), self._create_group),
            ("GET", re.compile(r"^/api/v1/groups/(\d+)/memberships$"), self._list_memberships),
            ("POST", re.compile(r"^/api/v1/groups/(\d+)/memberships$"), self._add_membership),
            ("PUT", re.compile(r"^/api/v1/groups/(\d+)/memberships/(\d+)$"), self._update_membership),
        ]
    
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)
    
    def handle(self, request: httpx.Request) -> httpx.Response:
        """Dispatch a request to the matching endpoint"""
        path = request.url.path
        self.requests.append((request.method, path))
        
        if not self.authorized or request.headers.get("Authorization", "") == "":
            return httpx.Response(401, json={"errors": [{"message": "Invalid access token."}]})
        
        for method, pattern, handler in self._routes:
            match = pattern.match(path)
            if match and request.method == method:
                return handler(request, *match.groups())
        
        return httpx.Response(404, json={"errors": [{"message": "The specified resource does not exist."}]})
    
    def calls(self, method: str, fragment: str = "") -> List[str]:
        """Paths of recorded requests with the given method containing ``fragment``"""
        return [path for m, path in self.requests if m == method and fragment in path]
    
    # Endpoints
    
    def _current_user(self, request):
        return httpx.Response(200, json={"id": 99, "name": "Stub Instructor"})
    
    def _list_students(self, request, course_id):
        return self._paginate(request, self.students)
    
    def _list_categories(self, request, course_id):
        return self._paginate(request, self.categories)
    
    def _create_category(self, request, course_id):
        if self.fail_category_creation:
            return httpx.Response(403, json={"errors": [{"message": "user not authorized to perform that action"}]})
        
        body = json.loads(request.content)
        category = {"id": next(self._ids), "name": body["name"], "course_id": course_id}
        self.categories.append(category)
        return httpx.Response(200, json=category)
    
    def _create_group(self, request, category_id):
        body = json.loads(request.content)
        if body["name"] in self.fail_group_names:
            return httpx.Response(400, json={"errors": {"name": [{"message": "name is invalid"}]}})
        
        group = {
            "id": next(self._ids),
            "name": body["name"],
            "description": body.get("description"),
            "is_public": body.get("is_public"),
            "join_level": body.get("join_level"),
            "group_category_id": int(category_id),
        }
        self.groups[group["id"]] = group
        self.memberships[group["id"]] = []
        return httpx.Response(200, json=group)
    
    def _list_memberships(self, request, group_id):
        if int(group_id) not in self.groups:
            return httpx.Response(404, json={"errors": [{"message": "group not found"}]})
        return self._paginate(request, self.memberships[int(group_id)])
    
    def _add_membership(self, request, group_id):
        body = json.loads(request.content)
        if int(group_id) not in self.groups or body["user_id"] in self.fail_membership_users:
            return httpx.Response(400, json={"errors": {"user_id": [{"message": "user is not in the course"}]}})
        
        membership = {
            "id": next(self._ids),
            "group_id": int(group_id),
            "user_id": body["user_id"],
            "workflow_state": "accepted",
            "moderator": False,
        }
        self.memberships[int(group_id)].append(membership)
        return httpx.Response(200, json=membership)
    
    def _update_membership(self, request, group_id, membership_id):
        if not self.moderator_supported:
            return httpx.Response(401, json={"errors": [{"message": "user not authorized to perform that action"}]})
        
        for membership in self.memberships.get(int(group_id), []):
            if membership["id"] == int(membership_id):
                membership.update(json.loads(request.content))
                return httpx.Response(200, json=membership)
        return httpx.Response(404, json={"errors": [{"message": "membership not found"}]})
    
    def _paginate(self, request: httpx.Request, items: List[Dict[str, Any]]) -> httpx.Response:
        """Return one page of ``items`` with a Link header pointing at the next page"""
        per_page = min(int(request.url.params.get("per_page", 10)), self.max_page_size)
        page = int(request.url.params.get("page", 1))
        start = (page - 1) * per_page
        
        headers = {}
        if start + per_page < len(items):
            next_url = request.url.copy_set_param("page", str(page + 1))
            headers["Link"] = f'<{next_url}>; rel="next"'
        
        return httpx.Response(200, json=items[start:start + per_page], headers=headers)

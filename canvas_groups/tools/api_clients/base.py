"""Base API client for all services"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import httpx

from ...utils.exceptions import APIException
from ...utils.metrics import MetricsCollector

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """Abstract base class for API clients"""
    
    service_name = "API"
    
    def __init__(self, base_url: str, api_key: Optional[str] = None, timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.headers = self._build_headers()
        self.metrics = MetricsCollector()
        self._client = httpx.AsyncClient(headers=self.headers, timeout=timeout, transport=transport)
    
    def _build_headers(self) -> Dict[str, str]:
        """Build common headers"""
        headers = {
            'Content-Type': 'application/json',
            'User-Agent': 'CanvasGroupCreator/1.0'
        }
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers
    
    @abstractmethod
    async def validate_connection(self) -> bool:
        """Validate API connection"""
        pass
    
    def get_endpoint(self, path: str) -> str:
        """Build full endpoint URL"""
        if path.startswith(('http://', 'https://')):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"
    
    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """Send a request; transport errors and non-2xx responses raise APIException"""
        url = self.get_endpoint(path)
        self.metrics.increment('api_requests')
        
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            self.metrics.increment('api_failures')
            raise APIException(self.service_name, f"{method} {url} failed: {e}") from e
        
        if not response.is_success:
            self.metrics.increment('api_failures')
            raise APIException(
                self.service_name,
                f"HTTP {response.status_code}: {response.text}",
                response.status_code
            )
        
        logger.debug(f"{method} {url} -> {response.status_code}")
        return response
    
    async def _request_json(self, method: str, path: str, **kwargs) -> Any:
        """Send a request and decode its JSON body; an undecodable body raises APIException"""
        response = await self._request(method, path, **kwargs)
        return self._decode(response)
    
    def _decode(self, response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            self.metrics.increment('api_failures')
            raise APIException(
                self.service_name,
                f"invalid JSON in HTTP {response.status_code} response: {response.text[:200]}",
                response.status_code
            ) from e
    
    async def _get_paginated(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Any]:
        """GET every page of a list endpoint by following Link rel="next" headers"""
        items: List[Any] = []
        url: Optional[str] = path
        
        while url:
            response = await self._request('GET', url, params=params)
            page = self._decode(response)
            if not isinstance(page, list):
                self.metrics.increment('api_failures')
                raise APIException(self.service_name, f"expected a list from {url}", response.status_code)
            items.extend(page)
            url = response.links.get('next', {}).get('url')
            # The next link already carries the query string
            params = None
        
        return items
    
    async def close(self):
        await self._client.aclose()
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

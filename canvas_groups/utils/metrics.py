"""Per-run request counters and timers"""
from collections import defaultdict
from datetime import datetime
from typing import Dict


class MetricsCollector:
    """Counts API requests and project outcomes, and times the run"""
    
    def __init__(self):
        self.counters = defaultdict(int)
        self.durations: Dict[str, float] = {}
        self._started: Dict[str, datetime] = {}
    
    def increment(self, metric: str, value: int = 1):
        self.counters[metric] += value
    
    def start_timer(self, timer_name: str):
        self._started[timer_name] = datetime.now()
    
    def stop_timer(self, timer_name: str) -> float:
        """Stop a timer and return duration in seconds"""
        started = self._started.pop(timer_name, None)
        if started is None:
            return 0.0
        
        duration = (datetime.now() - started).total_seconds()
        self.durations[timer_name] = duration
        return duration
    
    def get_summary(self) -> Dict:
        return {
            'counters': dict(self.counters),
            'durations': dict(self.durations)
        }

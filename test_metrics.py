"""Metrics collector tests"""
from canvas_groups.utils.metrics import MetricsCollector


def test_increment():
    metrics = MetricsCollector()
    metrics.increment('api_requests')
    metrics.increment('api_requests', 2)
    
    assert metrics.counters['api_requests'] == 3
    assert metrics.counters['api_failures'] == 0


def test_timer_records_duration():
    metrics = MetricsCollector()
    metrics.start_timer('group_creation')
    duration = metrics.stop_timer('group_creation')
    
    assert duration >= 0
    assert metrics.durations == {'group_creation': duration}


def test_stopping_unstarted_timer():
    metrics = MetricsCollector()
    assert metrics.stop_timer('group_creation') == 0.0
    assert metrics.durations == {}


def test_summary():
    metrics = MetricsCollector()
    metrics.increment('projects_success')
    
    summary = metrics.get_summary()
    
    assert summary == {'counters': {'projects_success': 1}, 'durations': {}}
    summary['counters']['projects_success'] = 5
    assert metrics.counters['projects_success'] == 1

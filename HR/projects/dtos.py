"""
Data Transfer Objects for the Projects Domain
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Optional


@dataclass
class ProjectCreateDTO:
    name: str
    start_date: date
    description: str = ''
    status: Optional[str] = None
    end_date: Optional[date] = None


@dataclass
class ProjectUpdateDTO:
    """Only the provided fields are changed"""
    project_id: int
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TaskCreateDTO:
    title: str
    project_id: int
    description: str = ''
    assigned_to_id: Optional[int] = None
    status: Optional[str] = None
    priority: Optional[str] = None


@dataclass
class TaskUpdateDTO:
    """
    Requested task changes keyed by field name
    (title, description, project, priority, status, assigned_to).
    The service narrows them to what the caller's role may change.
    """
    task_id: int
    changes: Dict[str, Any] = field(default_factory=dict)

"""
Data Transfer Objects for the Employees Domain
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass
class EmployeeCreateDTO:
    """DTO for creating an employee record for an existing user"""
    user_id: int
    position: str
    department: str
    join_date: date
    base_salary: Decimal


@dataclass
class EmployeeUpdateDTO:
    """DTO for updating an existing employee"""
    employee_id: int
    position: Optional[str] = None
    department: Optional[str] = None


@dataclass
class SalarySaveDTO:
    """DTO for creating or updating the salary of one month"""
    employee_id: int
    month: int
    year: int
    base_salary: Decimal
    bonus: Decimal = Decimal('0')
    deductions: Decimal = Decimal('0')

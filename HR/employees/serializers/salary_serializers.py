"""
Serializers for Salary model
"""
from decimal import Decimal

from rest_framework import serializers
from HR.employees.models import Salary, MIN_SALARY_YEAR, MAX_SALARY_YEAR
from HR.employees.dtos import SalarySaveDTO


class SalarySerializer(serializers.ModelSerializer):
    """Read serializer for Salary model"""
    employee_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Salary
        fields = [
            'id', 'employee_id', 'month', 'year',
            'base_salary', 'bonus', 'deductions', 'total_salary',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class SalarySaveSerializer(serializers.Serializer):
    """Write serializer for the monthly salary upsert"""
    employee_id = serializers.IntegerField()
    month = serializers.IntegerField(
        min_value=1, max_value=12,
        error_messages={
            'min_value': "Month must be between 1 and 12",
            'max_value': "Month must be between 1 and 12",
        }
    )
    year = serializers.IntegerField(
        min_value=MIN_SALARY_YEAR, max_value=MAX_SALARY_YEAR,
        error_messages={
            'min_value': "Year is out of valid range",
            'max_value': "Year is out of valid range",
        }
    )
    base_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'))
    bonus = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'), default=Decimal('0'))
    deductions = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'), default=Decimal('0'))

    def to_dto(self):
        return SalarySaveDTO(**self.validated_data)

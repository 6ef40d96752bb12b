"""
Serializers for Employee model
"""
from decimal import Decimal

from rest_framework import serializers
from HR.employees.models import Employee
from HR.employees.dtos import EmployeeCreateDTO, EmployeeUpdateDTO
from HR.employees.serializers.salary_serializers import SalarySerializer


class EmployeeSerializer(serializers.ModelSerializer):
    """Read serializer for Employee model"""
    user_id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(source='user.name', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)

    class Meta:
        model = Employee
        fields = [
            'id', 'user_id', 'name', 'email',
            'position', 'department', 'join_date',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields


class EmployeeDetailSerializer(EmployeeSerializer):
    """Employee with the last twelve salary records"""
    salaries = serializers.SerializerMethodField()

    class Meta(EmployeeSerializer.Meta):
        fields = EmployeeSerializer.Meta.fields + ['salaries']
        read_only_fields = fields

    def get_salaries(self, obj):
        return SalarySerializer(obj.salaries.order_by('-year', '-month')[:12], many=True).data


class EmployeeCreateSerializer(serializers.Serializer):
    """Write serializer for creating an employee record for an existing user"""
    user_id = serializers.IntegerField()
    position = serializers.CharField(max_length=100)
    department = serializers.CharField(max_length=100)
    join_date = serializers.DateField()
    base_salary = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal('0'))

    def to_dto(self):
        return EmployeeCreateDTO(**self.validated_data)


class EmployeeUpdateSerializer(serializers.Serializer):
    """Write serializer for updating position and department"""
    position = serializers.CharField(max_length=100, required=False)
    department = serializers.CharField(max_length=100, required=False)

    def validate(self, attrs):
        if not attrs:
            raise serializers.ValidationError("Provide position and/or department")
        return attrs

    def to_dto(self, employee_id):
        return EmployeeUpdateDTO(employee_id=employee_id, **self.validated_data)

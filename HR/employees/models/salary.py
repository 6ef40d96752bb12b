from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models

from core.base.models import AuditMixin

MIN_SALARY_YEAR = 2000
MAX_SALARY_YEAR = 2100


class Salary(AuditMixin):
    """
    Monthly salary record of an employee.

    One record per (employee, month, year). total_salary is always
    base_salary + bonus - deductions and is recomputed on save.
    """
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='salaries'
    )
    month = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(12)]
    )
    year = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(MIN_SALARY_YEAR), MaxValueValidator(MAX_SALARY_YEAR)]
    )
    base_salary = models.DecimalField(max_digits=12, decimal_places=2)
    bonus = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    deductions = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0'))
    total_salary = models.DecimalField(max_digits=12, decimal_places=2, editable=False)

    class Meta:
        db_table = 'salaries'
        verbose_name = 'Salary'
        verbose_name_plural = 'Salaries'
        unique_together = ('employee', 'month', 'year')
        ordering = ['-year', '-month']

    def __str__(self):
        return f"{self.employee_id} {self.year}-{self.month:02d}: {self.total_salary}"

    def clean(self):
        super().clean()
        for field in ('base_salary', 'bonus', 'deductions'):
            value = getattr(self, field)
            if value is not None and value < 0:
                raise ValidationError({field: "Must not be negative"})

    def compute_total(self) -> Decimal:
        return Decimal(self.base_salary) + Decimal(self.bonus or 0) - Decimal(self.deductions or 0)

    def save(self, *args, **kwargs):
        self.total_salary = self.compute_total()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None and 'total_salary' not in update_fields:
            kwargs['update_fields'] = list(update_fields) + ['total_salary']
        super().save(*args, **kwargs)

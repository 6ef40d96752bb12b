"""
Serializers for Task model
"""
from rest_framework import serializers
from HR.projects.models import Task, TaskStatus, TaskPriority
from HR.projects.dtos import TaskCreateDTO, TaskUpdateDTO


class TaskSerializer(serializers.ModelSerializer):
    """Read serializer for Task model"""
    project_id = serializers.IntegerField(read_only=True)
    project_name = serializers.CharField(source='project.name', read_only=True)
    assigned_to_id = serializers.IntegerField(read_only=True, allow_null=True)
    assigned_to_name = serializers.SerializerMethodField()

    class Meta:
        model = Task
        fields = [
            'id', 'title', 'description',
            'project_id', 'project_name',
            'assigned_to_id', 'assigned_to_name',
            'status', 'priority',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_assigned_to_name(self, obj):
        return obj.assigned_to.user.name if obj.assigned_to_id else None


class TaskCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    project_id = serializers.IntegerField()
    assigned_to_id = serializers.IntegerField(required=False, allow_null=True, default=None)
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=TaskPriority.choices, required=False)

    def to_dto(self):
        return TaskCreateDTO(**self.validated_data)


class TaskUpdateSerializer(serializers.Serializer):
    """
    Accepts any editable task field. Which of them are applied depends on
    the caller's role and is decided by the service.
    """
    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    project_id = serializers.IntegerField(required=False)
    assigned_to_id = serializers.IntegerField(required=False, allow_null=True)
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
    priority = serializers.ChoiceField(choices=TaskPriority.choices, required=False)

    def to_dto(self, task_id):
        changes = dict(self.validated_data)
        if 'project_id' in changes:
            changes['project'] = changes.pop('project_id')
        if 'assigned_to_id' in changes:
            changes['assigned_to'] = changes.pop('assigned_to_id')
        return TaskUpdateDTO(task_id=task_id, changes=changes)


class TaskStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=TaskStatus.choices)

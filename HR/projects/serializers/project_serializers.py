"""
Serializers for Project model
"""
from rest_framework import serializers
from HR.projects.models import Project, ProjectStatus
from HR.projects.dtos import ProjectCreateDTO, ProjectUpdateDTO
from HR.projects.serializers.task_serializers import TaskSerializer


class ProjectSerializer(serializers.ModelSerializer):
    """Read serializer with task counts and progress percentage"""
    total_tasks = serializers.SerializerMethodField()
    completed_tasks = serializers.SerializerMethodField()
    progress = serializers.IntegerField(read_only=True)

    class Meta:
        model = Project
        fields = [
            'id', 'name', 'description', 'status',
            'start_date', 'end_date',
            'total_tasks', 'completed_tasks', 'progress',
            'created_at', 'updated_at'
        ]
        read_only_fields = fields

    def get_total_tasks(self, obj):
        return obj.get_task_counts()[0]

    def get_completed_tasks(self, obj):
        return obj.get_task_counts()[1]


class ProjectDetailSerializer(ProjectSerializer):
    tasks = serializers.SerializerMethodField()

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ['tasks']
        read_only_fields = fields

    def get_tasks(self, obj):
        tasks = obj.tasks.select_related('assigned_to__user').order_by('-created_at')
        return TaskSerializer(tasks, many=True).data


def _validate_dates(attrs, instance=None):
    start = attrs.get('start_date', getattr(instance, 'start_date', None))
    end = attrs.get('end_date', getattr(instance, 'end_date', None))
    if start and end and end < start:
        raise serializers.ValidationError({'end_date': "End date cannot be before start date"})
    return attrs


class ProjectCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    status = serializers.ChoiceField(choices=ProjectStatus.choices, required=False)
    start_date = serializers.DateField()
    end_date = serializers.DateField(required=False, allow_null=True, default=None)

    def validate(self, attrs):
        return _validate_dates(attrs)

    def to_dto(self):
        return ProjectCreateDTO(**self.validated_data)


class ProjectUpdateSerializer(serializers.Serializer):
    """Partial update; the stored dates are checked again by the model"""
    name = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=ProjectStatus.choices, required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False, allow_null=True)

    def validate(self, attrs):
        return _validate_dates(attrs)

    def to_dto(self, project_id):
        return ProjectUpdateDTO(project_id=project_id, changes=dict(self.validated_data))

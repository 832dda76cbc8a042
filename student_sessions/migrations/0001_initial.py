import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("cases", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="StudentSessionModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("start_time", models.DateTimeField(default=django.utils.timezone.now, help_text="Timestamp when the session was started.")),
                ("end_time", models.DateTimeField(blank=True, help_text="Timestamp when the diagnosis was submitted.", null=True)),
                ("submitted_diagnosis", models.TextField(blank=True, default="", help_text="Diagnosis submitted by the student.")),
                ("completeness", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("efficiency", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("diagnosis_accuracy", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("overall_score", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("feedback", models.JSONField(blank=True, default=list, help_text='Feedback messages, e.g. ["Correct diagnosis! Well done."].')),
                ("case", models.ForeignKey(help_text="The case being examined in this session.", on_delete=django.db.models.deletion.CASCADE, related_name="sessions", to="cases.casemodel")),
            ],
            options={
                "verbose_name": "Student Session",
                "verbose_name_plural": "Student Sessions",
                "ordering": ["-start_time"],
            },
        ),
        migrations.CreateModel(
            name="PerformedManeuverModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("input_method", models.CharField(choices=[("click", "Click"), ("text", "Text")], max_length=10)),
                ("raw_input", models.TextField(blank=True, default="", help_text="Original free text when the maneuver was typed.")),
                ("timestamp", models.DateTimeField(default=django.utils.timezone.now)),
                ("finding", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="performances", to="cases.examfindingmodel")),
                ("session", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="maneuvers_performed", to="student_sessions.studentsessionmodel")),
            ],
            options={
                "verbose_name": "Performed Maneuver",
                "verbose_name_plural": "Performed Maneuvers",
                "ordering": ["timestamp", "id"],
            },
        ),
    ]

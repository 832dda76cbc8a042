import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CaseModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(help_text="Short case title.", max_length=200)),
                ("age", models.PositiveSmallIntegerField(help_text="Patient age in years.", validators=[django.core.validators.MaxValueValidator(130)])),
                ("sex", models.CharField(help_text="Patient sex as presented in the vignette.", max_length=20)),
                ("chief_complaint", models.CharField(help_text="Presenting complaint in the patient's words.", max_length=255)),
                ("hpi", models.TextField(blank=True, default="", help_text="History of present illness.")),
                ("pmh", models.JSONField(blank=True, default=list, help_text='Past medical history, e.g. ["Hypertension"].')),
                ("medications", models.JSONField(blank=True, default=list, help_text='Current medications, e.g. ["Lisinopril 20mg daily"].')),
                ("allergies", models.JSONField(blank=True, default=list, help_text='Known allergies, e.g. ["NKDA"].')),
                ("social_history", models.TextField(blank=True, default="")),
                ("family_history", models.TextField(blank=True, default="")),
                ("bp", models.CharField(help_text='Blood pressure, e.g. "150/92".', max_length=20)),
                ("hr", models.PositiveSmallIntegerField(help_text="Heart rate (bpm).")),
                ("rr", models.PositiveSmallIntegerField(help_text="Respiratory rate (/min).")),
                ("temp", models.FloatField(help_text="Temperature (°C).")),
                ("spo2", models.PositiveSmallIntegerField(help_text="Oxygen saturation (%).", validators=[django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ("diagnosis", models.CharField(help_text="Canonical diagnosis the submission is scored against.", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Case",
                "verbose_name_plural": "Cases",
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="ExamFindingModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("region", models.CharField(choices=[("head", "Head"), ("neck", "Neck"), ("chest", "Chest"), ("abdomen", "Abdomen"), ("back", "Back"), ("upper_extremity_left", "Left Upper Extremity"), ("upper_extremity_right", "Right Upper Extremity"), ("lower_extremity_left", "Left Lower Extremity"), ("lower_extremity_right", "Right Lower Extremity")], max_length=30)),
                ("maneuver", models.CharField(choices=[("inspect", "Inspect"), ("palpate", "Palpate"), ("percuss", "Percuss"), ("auscultate", "Auscultate"), ("special_test", "Special Test"), ("measure", "Measure")], max_length=20)),
                ("target", models.CharField(blank=True, default="", help_text='Structure examined, e.g. "heart" or "jugular_venous_pressure".', max_length=100)),
                ("location", models.CharField(blank=True, default="", help_text='Sub-location within the region, e.g. "apex".', max_length=100)),
                ("description", models.TextField(help_text="What the student observes.")),
                ("finding_type", models.CharField(choices=[("text", "Text"), ("audio", "Audio"), ("image", "Image"), ("video", "Video")], default="text", max_length=10)),
                ("media_url", models.CharField(blank=True, default="", help_text='Path of the associated media, e.g. "/media/audio/s3-gallop.mp3".', max_length=255)),
                ("is_abnormal", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("case", models.ForeignKey(help_text="Case this finding belongs to.", on_delete=django.db.models.deletion.CASCADE, related_name="findings", to="cases.casemodel")),
            ],
            options={
                "verbose_name": "Exam Finding",
                "verbose_name_plural": "Exam Findings",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["case", "region", "maneuver"], name="finding_lookup_idx")],
            },
        ),
        migrations.AddField(
            model_name="casemodel",
            name="key_findings",
            field=models.ManyToManyField(blank=True, help_text="Findings the student is expected to elicit.", related_name="key_for_cases", to="cases.examfindingmodel"),
        ),
    ]

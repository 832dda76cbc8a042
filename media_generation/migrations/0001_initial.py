from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="GeneratedMediaModel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("media_kind", models.CharField(choices=[("IMAGE", "Image"), ("VIDEO", "Video")], max_length=10)),
                ("media_type", models.CharField(blank=True, default="", help_text="Predefined catalog key, blank for custom prompts.", max_length=100)),
                ("prompt", models.TextField(help_text="Prompt sent to the generation model.")),
                ("source_url", models.URLField(help_text="URL of the asset returned by the generation API.", max_length=500)),
                ("local_path", models.CharField(help_text="Public path of the saved asset.", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Generated Media",
                "verbose_name_plural": "Generated Media",
                "ordering": ["-created_at"],
            },
        ),
    ]

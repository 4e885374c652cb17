from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Session",
            fields=[
                ("id", models.CharField(editable=False, max_length=24, primary_key=True, serialize=False)),
                ("client_id", models.CharField(max_length=24)),
                ("visitor_id", models.CharField(max_length=24)),
                ("last_event_time", models.DateTimeField()),
                ("duration_in_seconds", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField()),
                ("updated_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["client_id", "visitor_id"], name="rec_session_client_visitor"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.CharField(editable=False, max_length=24, primary_key=True, serialize=False)),
                ("session_id", models.CharField(max_length=24)),
                ("dom_event", models.TextField()),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["created_at", "id"],
                "indexes": [
                    models.Index(fields=["session_id", "created_at"], name="rec_event_session_created"),
                ],
            },
        ),
    ]

import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.TextField()),
                ("slug", models.TextField(unique=True)),
                ("description", models.TextField()),
                ("overview", models.TextField()),
                ("image", models.TextField()),
                ("venue", models.TextField()),
                ("location", models.TextField()),
                ("date", models.CharField(max_length=10)),
                ("time", models.CharField(max_length=5)),
                ("mode", models.TextField()),
                ("audience", models.TextField()),
                ("agenda", models.JSONField(default=list)),
                ("organizer", models.TextField()),
                ("tags", models.JSONField(default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["date", "time"],
                "indexes": [models.Index(fields=["date", "time"], name="events_event_date_time_idx")],
            },
        ),
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("email", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "event",
                    models.ForeignKey(
                        db_constraint=False,
                        on_delete=django.db.models.deletion.DO_NOTHING,
                        related_name="bookings",
                        to="events.event",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["event"], name="events_booking_event_idx")],
            },
        ),
    ]

# Generated manually for the World ID models

import django.db.models.deletion
import worldid.models
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("account", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="VerificationSession",
            fields=[
                (
                    "account",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="world_id_session",
                        serialize=False,
                        to="account.account",
                    ),
                ),
                ("signal", models.TextField()),
                ("action", models.CharField(max_length=255)),
                ("created_at", models.DateTimeField()),
                ("expires_at", models.DateTimeField(db_index=True)),
                ("verified", models.BooleanField(default=False)),
                ("verified_at", models.DateTimeField(blank=True, null=True)),
            ],
        ),
        migrations.CreateModel(
            name="NullifierRecord",
            fields=[
                (
                    "nullifier_hash",
                    worldid.models.NullifierHashField(
                        max_length=64, primary_key=True, serialize=False
                    ),
                ),
                ("verified_at", models.DateTimeField()),
                (
                    "verification_level",
                    models.CharField(
                        choices=[
                            ("orb", "Orb"),
                            ("device", "Device"),
                            ("phone", "Phone"),
                        ],
                        max_length=10,
                    ),
                ),
                (
                    "account",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="world_id_nullifiers",
                        to="account.account",
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="WorldIdVerification",
            fields=[
                (
                    "account",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        primary_key=True,
                        related_name="world_id_verification",
                        serialize=False,
                        to="account.account",
                    ),
                ),
                ("verified_at", models.DateTimeField()),
                (
                    "nullifier_hash",
                    worldid.models.NullifierHashField(db_index=True, max_length=64),
                ),
                (
                    "verification_level",
                    models.CharField(
                        choices=[
                            ("orb", "Orb"),
                            ("device", "Device"),
                            ("phone", "Phone"),
                        ],
                        max_length=10,
                    ),
                ),
                ("trust_score_boost", models.IntegerField(default=0)),
            ],
        ),
    ]

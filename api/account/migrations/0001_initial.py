# Generated manually for the Account model

import account.models
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                (
                    "id",
                    account.models.AccountIdField(
                        max_length=128, primary_key=True, serialize=False
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("is_verified", models.BooleanField(db_index=True, default=False)),
                ("trust_score", models.IntegerField(default=0)),
                (
                    "verification_badges",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Ordered list of badge names awarded to this account",
                    ),
                ),
            ],
        ),
    ]

from django.apps import AppConfig


class WorldIdAppConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "worldid"
    verbose_name = "World ID"

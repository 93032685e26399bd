from django.apps import AppConfig


class TastingsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tastings'
    label = 'tastings'
